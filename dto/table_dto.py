"""
테이블 구조 입력 DTO 정의
호출자가 넘겨주는 JSON 객체(tableName, fields[...])를 검증하고 TableDescriptor로 변환합니다.
"""
from typing import Any, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from modeler.types.table_types import ColumnDescriptor, TableDescriptor, TableDescriptorError


class FieldPayload(BaseModel):
    """필드(컬럼) 입력 구조"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    source_type: str = Field(
        default="",
        validation_alias=AliasChoices("sourceType", "source_type", "type"),
    )
    ts_type: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("tsType", "ts_type"),
    )
    is_primary: bool = Field(
        default=False,
        validation_alias=AliasChoices("isPrimary", "is_primary"),
    )
    is_nullable: bool = Field(
        default=False,
        validation_alias=AliasChoices("isNullable", "is_nullable"),
    )
    comment: Optional[str] = None
    default_value: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("defaultValue", "default_value"),
    )

    @field_validator("name", "source_type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # 숫자 등 문자열이 아닌 값도 문자열로 변환
        if value is None:
            return ""
        return str(value)

    @field_validator("default_value", mode="before")
    @classmethod
    def _coerce_default(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @field_validator("ts_type", "comment", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def to_descriptor(self) -> ColumnDescriptor:
        return ColumnDescriptor(
            name=self.name,
            source_type=self.source_type,
            is_primary=self.is_primary,
            is_nullable=self.is_nullable,
            comment=self.comment,
            default_value=self.default_value,
            ts_type=self.ts_type,
        )


class TablePayload(BaseModel):
    """테이블 입력 구조"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    table_name: str = Field(validation_alias=AliasChoices("tableName", "table_name"))
    comment: Optional[str] = None
    columns: List[FieldPayload] = Field(validation_alias=AliasChoices("fields", "columns"))

    @field_validator("table_name")
    @classmethod
    def _table_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("tableName이 비어 있습니다.")
        return value

    @field_validator("comment", mode="before")
    @classmethod
    def _blank_comment_to_none(cls, value: Any) -> Optional[str]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def to_descriptor(self) -> TableDescriptor:
        return TableDescriptor(
            table_name=self.table_name,
            comment=self.comment,
            fields=tuple(col.to_descriptor() for col in self.columns),
        )


def parse_table_descriptor(data: Mapping[str, Any]) -> TableDescriptor:
    """
    JSON 객체를 검증하여 TableDescriptor로 변환합니다.

    Args:
        data: tableName, comment, fields(또는 columns)를 가진 딕셔너리

    Returns:
        TableDescriptor 객체

    Raises:
        TableDescriptorError: tableName이 없거나 비어 있는 경우, fields가 리스트가 아닌 경우
    """
    if not isinstance(data, Mapping):
        raise TableDescriptorError(f"테이블 입력은 객체여야 합니다: {type(data).__name__}")
    try:
        payload = TablePayload.model_validate(dict(data))
    except ValidationError as e:
        raise TableDescriptorError(f"잘못된 테이블 입력: {e}") from e
    return payload.to_descriptor()
