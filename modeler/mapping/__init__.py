"""
타입 / 이름 매핑 모듈
"""

from modeler.mapping.type_mapping import TS_TYPES, TYPE_MAP, is_range_type, map_type
from modeler.mapping.name_converter import to_camel_case
from modeler.mapping.dialect_mappers import (
    BaseTypeMapper,
    MySQLMapper,
    PostgreSQLMapper,
    SQLiteMapper,
    get_type_mapper,
)

__all__ = [
    "TS_TYPES",
    "TYPE_MAP",
    "is_range_type",
    "map_type",
    "to_camel_case",
    "BaseTypeMapper",
    "MySQLMapper",
    "PostgreSQLMapper",
    "SQLiteMapper",
    "get_type_mapper",
]
