"""
DBMS별 타입 매퍼
연결된 DB가 돌려주는 컬럼 타입 원문(varchar(255), int unsigned 등)을 TypeScript 타입으로 매핑합니다.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from modeler.mapping.type_mapping import DEFAULT_TS_TYPE, TsType
from utils.logger import setup_logger

logger = setup_logger("dialect_mappers")


class BaseTypeMapper(ABC):
    """타입 매퍼 기본 클래스"""

    type_map: Dict[str, TsType] = {}

    @abstractmethod
    def normalize(self, db_type: str) -> str:
        """
        매핑 테이블 조회에 사용할 키로 DB 타입을 정규화합니다.

        Args:
            db_type: 소문자로 변환된 DB 타입 원문

        Returns:
            조회 키
        """
        pass

    def map(self, db_type: str) -> TsType:
        """DB 타입을 TypeScript 타입으로 매핑합니다. 모르는 타입은 any."""
        if db_type is None:
            return DEFAULT_TS_TYPE
        lowered = str(db_type).strip().lower()
        return self.type_map.get(self.normalize(lowered), DEFAULT_TS_TYPE)

    def __call__(self, db_type: str) -> TsType:
        return self.map(db_type)


def _base_type(db_type: str) -> str:
    """'(' 또는 공백 이전까지의 기본 타입을 추출합니다. 예: varchar(255) -> varchar"""
    for i, c in enumerate(db_type):
        if c in "( ":
            return db_type[:i]
    return db_type


class MySQLMapper(BaseTypeMapper):
    """MySQL/MariaDB 타입 매퍼"""

    type_map: Dict[str, TsType] = {
        "int": "number",
        "integer": "number",
        "tinyint": "number",
        "smallint": "number",
        "mediumint": "number",
        "bigint": "number",
        "float": "number",
        "double": "number",
        "decimal": "number",
        "year": "number",

        "char": "string",
        "varchar": "string",
        "tinytext": "string",
        "text": "string",
        "mediumtext": "string",
        "longtext": "string",
        "time": "string",
        "enum": "string",
        "set": "string",

        "date": "Date",
        "datetime": "Date",
        "timestamp": "Date",

        # tinyint(1)은 보통 boolean 컬럼
        "tinyint(1)": "boolean",
        "bit": "boolean",
        "boolean": "boolean",
        "bool": "boolean",

        "json": "any",
        "binary": "any",
        "varbinary": "any",
        "blob": "any",
    }

    def normalize(self, db_type: str) -> str:
        if db_type.startswith("tinyint(1)"):
            return "tinyint(1)"
        return _base_type(db_type)


class PostgreSQLMapper(BaseTypeMapper):
    """PostgreSQL 타입 매퍼"""

    type_map: Dict[str, TsType] = {
        "smallint": "number",
        "integer": "number",
        "int": "number",
        "int2": "number",
        "int4": "number",
        "int8": "number",
        "bigint": "number",
        "decimal": "number",
        "numeric": "number",
        "real": "number",
        "float4": "number",
        "float8": "number",
        "double precision": "number",
        "smallserial": "number",
        "serial": "number",
        "bigserial": "number",

        "varchar": "string",
        "character varying": "string",
        "character": "string",
        "char": "string",
        "bpchar": "string",
        "text": "string",
        "time": "string",
        "time with time zone": "string",
        "time without time zone": "string",
        "interval": "string",
        "uuid": "string",
        "inet": "string",
        "cidr": "string",
        "macaddr": "string",

        "timestamp": "Date",
        "timestamptz": "Date",
        "timestamp with time zone": "Date",
        "timestamp without time zone": "Date",
        "date": "Date",

        "boolean": "boolean",
        "bool": "boolean",

        "json": "any",
        "jsonb": "any",
        "bytea": "any",
    }

    _precision = re.compile(r'\s*\([^)]*\)')

    def normalize(self, db_type: str) -> str:
        # character varying(64), timestamp(3) with time zone 처럼 정밀도는 위치와 무관하게 제거
        without_precision = self._precision.sub("", db_type)
        return " ".join(without_precision.split())


class SQLiteMapper(BaseTypeMapper):
    """SQLite 타입 매퍼"""

    type_map: Dict[str, TsType] = {
        "integer": "number",
        "int": "number",
        "tinyint": "number",
        "smallint": "number",
        "mediumint": "number",
        "bigint": "number",
        "real": "number",
        "double": "number",
        "float": "number",
        "numeric": "number",
        "decimal": "number",

        "text": "string",
        "char": "string",
        "varchar": "string",
        "nchar": "string",
        "nvarchar": "string",
        "clob": "string",

        "date": "Date",
        "datetime": "Date",
        "timestamp": "Date",

        "tinyint(1)": "boolean",
        "boolean": "boolean",

        "blob": "any",
    }

    def normalize(self, db_type: str) -> str:
        if db_type.startswith("tinyint(1)"):
            return "tinyint(1)"
        return _base_type(db_type)


# 같은 타입 체계를 쓰는 dialect들은 같은 매퍼를 공유
MAPPER_MAP: Dict[str, Type[BaseTypeMapper]] = {
    "mysql": MySQLMapper,
    "mariadb": MySQLMapper,
    "postgres": PostgreSQLMapper,
    "postgresql": PostgreSQLMapper,
    "sqlite": SQLiteMapper,
}


def get_type_mapper(dialect: Optional[str]) -> BaseTypeMapper:
    """
    dialect 이름으로 타입 매퍼를 생성합니다.

    지원하지 않는 dialect는 경고 로그를 남기고 MySQL 매퍼를 사용합니다.
    """
    key = (dialect or "").strip().lower()
    mapper_class = MAPPER_MAP.get(key)
    if mapper_class is None:
        logger.warning(
            "지원하지 않는 dialect: %r, MySQL 매퍼를 사용합니다. 지원하는 dialect: %s",
            dialect,
            ", ".join(sorted(MAPPER_MAP)),
        )
        mapper_class = MySQLMapper
    return mapper_class()
