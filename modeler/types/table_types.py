"""
코드 생성에 사용되는 테이블/컬럼 디스크립터 정의
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class TableDescriptorError(ValueError):
    """테이블 디스크립터가 잘못된 경우 발생하는 예외 (테이블명 누락, fields 형식 오류 등)"""
    pass


@dataclass(frozen=True)
class ColumnDescriptor:
    """컬럼 정보를 담는 데이터클래스"""
    name: str
    source_type: str  # 원본 DB 타입
    is_primary: bool = False
    is_nullable: bool = False
    comment: Optional[str] = None
    default_value: Optional[str] = None
    ts_type: Optional[str] = None  # 미리 지정된 TypeScript 타입 (있으면 매핑 대신 그대로 사용)


@dataclass(frozen=True)
class TableDescriptor:
    """테이블 정보를 담는 데이터클래스"""
    table_name: str
    fields: Tuple[ColumnDescriptor, ...] = field(default_factory=tuple)
    comment: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.table_name, str) or not self.table_name.strip():
            raise TableDescriptorError("tableName이 비어 있습니다.")
        if not isinstance(self.fields, (list, tuple)):
            raise TableDescriptorError(
                f"fields는 순서가 있는 시퀀스여야 합니다: {type(self.fields).__name__}"
            )
        for col in self.fields:
            if not isinstance(col, ColumnDescriptor):
                raise TableDescriptorError(
                    f"fields 항목은 ColumnDescriptor여야 합니다: {type(col).__name__}"
                )
        # frozen 이므로 object.__setattr__로 tuple 변환
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def primary_keys(self) -> List[str]:
        return [col.name for col in self.fields if col.is_primary]

    @property
    def non_primary_fields(self) -> List[ColumnDescriptor]:
        return [col for col in self.fields if not col.is_primary]
