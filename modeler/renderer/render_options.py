"""
TypeScript 렌더링 옵션 정의
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RenderOptions:
    """렌더링 옵션을 담는 데이터클래스"""
    include_header_comment: bool = True
    include_import_hints: bool = True
    emit_create_dto: bool = True
    emit_update_dto: bool = True
    emit_query_params: bool = True
    use_raw_field_names: bool = False  # True면 camelCase 변환 없이 DB 컬럼명 그대로 사용
    verbose_docs: bool = False  # 블록 주석과 필드별 상세 정보(타입, PK, nullable, 기본값) 출력
    generated_at: Optional[datetime] = None  # 헤더의 생성 시각 (None이면 현재 시각)

    @classmethod
    def interface_only(cls, **overrides) -> "RenderOptions":
        """메인 interface 하나만 출력하는 옵션"""
        values = dict(
            include_header_comment=False,
            include_import_hints=False,
            emit_create_dto=False,
            emit_update_dto=False,
            emit_query_params=False,
        )
        values.update(overrides)
        return cls(**values)


RENDER_OPTION_NAMES = frozenset(f.name for f in fields(RenderOptions))
