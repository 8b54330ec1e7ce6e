"""
DB 타입을 TypeScript 타입으로 매핑하는 모듈
"""

from typing import Dict, Literal

TsType = Literal[
    "number",
    "string",
    "boolean",
    "Date",
    "any",
]

TS_TYPES = ("number", "string", "boolean", "Date", "any")

DEFAULT_TS_TYPE: TsType = "any"

TYPE_MAP: Dict[str, TsType] = {
    # Integer types
    "int": "number",
    "integer": "number",
    "bigint": "number",
    "smallint": "number",
    "tinyint": "number",
    "mediumint": "number",

    # Floating point / decimal types
    "float": "number",
    "double": "number",
    "decimal": "number",
    "numeric": "number",
    "real": "number",

    # String types
    "varchar": "string",
    "char": "string",
    "text": "string",
    "longtext": "string",
    "mediumtext": "string",
    "tinytext": "string",
    "nvarchar": "string",
    "nchar": "string",

    # Date / time types
    "datetime": "Date",
    "timestamp": "Date",
    "date": "Date",
    "time": "Date",
    "year": "number",

    # Boolean types
    "boolean": "boolean",
    "bool": "boolean",
    "bit": "boolean",

    # Structured / binary / geometry types
    "json": "any",
    "jsonb": "any",
    "blob": "any",
    "longblob": "any",
    "mediumblob": "any",
    "tinyblob": "any",
    "binary": "any",
    "varbinary": "any",
    "geometry": "any",
    "point": "any",
    "linestring": "any",
    "polygon": "any",
    "multipoint": "any",
    "multilinestring": "any",
    "multipolygon": "any",
    "geometrycollection": "any",
}


def map_type(source_type: str) -> TsType:
    """
    DB 타입 문자열을 TypeScript 타입으로 매핑합니다.

    대소문자와 앞뒤 공백은 무시하고, 매핑 테이블에 없는 타입은 모두 any로 처리합니다.
    (예외를 던지지 않음)

    예:
        VARCHAR -> string
        datetime -> Date
        varchar(255) -> any  (길이 정보가 붙은 타입은 dialect 매퍼 사용)
    """
    if source_type is None:
        return DEFAULT_TS_TYPE
    normalized = str(source_type).strip().lower()
    return TYPE_MAP.get(normalized, DEFAULT_TS_TYPE)


def is_range_type(ts_type: str) -> bool:
    """
    범위 검색(Min/Max)이 가능한 타입인지 확인합니다.
    범위 타입: number, Date
    """
    return ts_type in ("number", "Date")
