"""
생성된 TypeScript 코드 정리 모듈
"""

import re
from typing import List

INDENT = "  "

_STRING_LITERAL = re.compile(r"'(?:\\.|[^'\\])*'|\"(?:\\.|[^\"\\])*\"|`(?:\\.|[^`\\])*`")
_LINE_COMMENT = re.compile(r"//.*$")


def _brace_delta(line: str) -> int:
    # 문자열 리터럴, 한 줄 주석, JSDoc 안의 중괄호는 들여쓰기에 반영하지 않음
    if line.startswith(("/*", "*")):
        return 0
    code = _LINE_COMMENT.sub("", _STRING_LITERAL.sub("", line))
    return code.count("{") - code.count("}")


def normalize_code(code: str) -> str:
    """
    생성된 코드를 정리합니다.

    - 연속된 빈 줄은 하나로 합치고, '{' 직후와 '}' 직전의 빈 줄은 제거
    - 중괄호 깊이에 따라 2칸 들여쓰기 (JSDoc 연속 줄은 한 칸 더)
    - 앞뒤 빈 줄 제거, 마지막 줄바꿈은 정확히 하나

    여러 번 적용해도 결과가 같습니다.
    """
    stripped = [line.strip() for line in (code or "").splitlines()]

    lines: List[str] = []
    for line in stripped:
        if not line:
            if lines and lines[-1] and not lines[-1].endswith("{"):
                lines.append("")
            continue
        if line.startswith("}") and lines and not lines[-1]:
            lines.pop()
        lines.append(line)
    while lines and not lines[-1]:
        lines.pop()

    out: List[str] = []
    depth = 0
    for line in lines:
        if not line:
            out.append("")
            continue
        if line.startswith("}"):
            depth = max(depth - 1, 0)
            delta = _brace_delta(line[1:])
        else:
            delta = _brace_delta(line)
        indent = INDENT * depth
        if line.startswith("*"):
            indent += " "
        out.append(indent + line)
        depth = max(depth + delta, 0)

    return "\n".join(out) + "\n"
