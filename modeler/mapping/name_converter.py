"""
이름 변환 유틸리티 모듈
snake_case 컬럼명을 camelCase 프로퍼티명으로 변환합니다.
"""

import re

_UNDERSCORE_LOWER = re.compile(r'_([a-z])')
_LEADING_UPPER = re.compile(r'^[A-Z]')


def to_camel_case(identifier) -> str:
    """
    snake_case를 camelCase로 변환합니다.

    문자열이 아닌 입력은 str()로 변환한 뒤 처리하며, 예외를 던지지 않습니다.

    예:
        user_name -> userName
        Id -> id
        created_at_2 -> createdAt_2
    """
    if identifier is None:
        return ""
    text = str(identifier)
    text = _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), text)
    return _LEADING_UPPER.sub(lambda m: m.group(0).lower(), text)
