"""
TypeScript interface 렌더링 모듈
테이블 디스크립터를 기반으로 엔티티 interface, Create/Update DTO, 조회 파라미터 interface를 생성합니다.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from dto.table_dto import parse_table_descriptor
from modeler.mapping.name_converter import to_camel_case
from modeler.mapping.type_mapping import is_range_type, map_type
from modeler.renderer.render_options import RenderOptions
from modeler.types.table_types import ColumnDescriptor, TableDescriptor, TableDescriptorError
from utils.logger import setup_logger

logger = setup_logger("interface_renderer")

INDENT = "  "
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# import 힌트가 필요한 타입
IMPORT_HINT_TYPES = ("Date",)

TableInput = Union[TableDescriptor, Mapping[str, Any]]


def render(table: TableInput, options: Optional[RenderOptions] = None) -> str:
    """
    테이블 디스크립터를 TypeScript 코드로 렌더링합니다.

    블록 순서: 파일 헤더 -> import 힌트 -> 엔티티 interface -> Create DTO -> Update DTO -> 조회 파라미터
    각 블록은 빈 줄 하나로 구분됩니다.

    Args:
        table: TableDescriptor 또는 tableName/fields를 가진 딕셔너리
        options: 렌더링 옵션 (None이면 기본값)

    Returns:
        생성된 TypeScript 코드

    Raises:
        TableDescriptorError: tableName이 없거나 fields가 시퀀스가 아닌 경우
    """
    table = ensure_table_descriptor(table)
    options = options or RenderOptions()

    blocks: List[str] = []
    if options.include_header_comment:
        blocks.append(render_header(table, options.generated_at))
    if options.include_import_hints:
        blocks.append(render_import_hints(table))
    blocks.append(render_main_interface(table, options))
    if options.emit_create_dto:
        blocks.append(render_create_dto(table, options))
    if options.emit_update_dto:
        blocks.append(render_update_dto(table, options))
    if options.emit_query_params:
        blocks.append(render_query_params(table, options))

    logger.debug("%s 렌더링 완료 (필드 %d개)", table.table_name, len(table.fields))
    return "\n".join(block for block in blocks if block)


def ensure_table_descriptor(table: TableInput) -> TableDescriptor:
    if isinstance(table, TableDescriptor):
        return table
    if isinstance(table, Mapping):
        return parse_table_descriptor(table)
    raise TableDescriptorError(f"지원하지 않는 테이블 입력 타입: {type(table).__name__}")


def resolve_ts_type(col: ColumnDescriptor) -> str:
    """미리 지정된 tsType이 있으면 그대로, 없으면 DB 타입을 매핑합니다."""
    if col.ts_type:
        return col.ts_type
    return map_type(col.source_type)


def property_name(col: ColumnDescriptor, options: RenderOptions) -> str:
    if options.use_raw_field_names:
        return str(col.name)
    return to_camel_case(col.name)


def collect_import_types(table: TableDescriptor) -> List[str]:
    """import 힌트가 필요한 타입 목록 (중복 없이, 처음 등장한 순서)"""
    found: List[str] = []
    for col in table.fields:
        ts_type = resolve_ts_type(col)
        if ts_type in IMPORT_HINT_TYPES and ts_type not in found:
            found.append(ts_type)
    return found


def _doc_text(text: Any) -> str:
    # 주석 안에서 줄바꿈과 */ 는 주석을 깨뜨림
    return " ".join(str(text).split()).replace("*/", "*\\/")


def _doc_block(lines: List[str], indent: str = "") -> List[str]:
    out = [f"{indent}/**"]
    out.extend(f"{indent} * {line}" if line else f"{indent} *" for line in lines)
    out.append(f"{indent} */")
    return out


def _property(name: str, ts_type: str, optional: bool) -> str:
    return f"{INDENT}{name}{'?' if optional else ''}: {ts_type};"


def _interface(name: str, body: List[str], doc: Optional[List[str]] = None) -> str:
    lines: List[str] = []
    if doc:
        lines.extend(_doc_block(doc))
    lines.append(f"export interface {name} {{")
    lines.extend(body)
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_header(table: TableDescriptor, generated_at: Optional[datetime] = None) -> str:
    """
    파일 헤더 주석을 생성합니다.
    테이블명, 필드 수, 기본키 목록, 생성 시각을 포함합니다.
    """
    generated_at = generated_at or datetime.now()
    primary_keys = ", ".join(str(name) for name in table.primary_keys) or "none"

    lines = [f"TypeScript definitions for table {table.table_name}"]
    if table.comment:
        lines.append(_doc_text(table.comment))
    lines.extend([
        "",
        f"Generated at: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"Table: {table.table_name}",
        f"Field count: {len(table.fields)}",
        f"Primary keys: {primary_keys}",
        "",
        "This file is generated automatically. Do not edit it by hand.",
    ])
    return "\n".join(_doc_block(lines)) + "\n"


def render_import_hints(table: TableDescriptor) -> str:
    """Date 타입 필드가 있으면 import 힌트 주석을 생성합니다. 없으면 빈 문자열."""
    import_types = collect_import_types(table)
    if not import_types:
        return ""
    lines = ["// Type imports"]
    lines.extend(f"// import {{ {ts_type} }} from './types';" for ts_type in import_types)
    return "\n".join(lines) + "\n"


def _field_doc(col: ColumnDescriptor, ts_type: str, options: RenderOptions) -> List[str]:
    if not options.verbose_docs:
        if col.comment:
            return [f"{INDENT}/** {_doc_text(col.comment)} */"]
        return []

    lines: List[str] = []
    if col.comment:
        lines.append(_doc_text(col.comment))
    lines.append(f"Type: {_doc_text(col.source_type)} -> {ts_type}")
    if col.is_primary:
        lines.append("Primary key")
    if col.is_nullable:
        lines.append("Nullable")
    if col.default_value is not None:
        lines.append(f"Default: {_doc_text(col.default_value)}")
    return _doc_block(lines, INDENT)


def render_main_interface(table: TableDescriptor, options: Optional[RenderOptions] = None) -> str:
    """엔티티 interface: export interface <tableName> { ... }"""
    options = options or RenderOptions()
    body: List[str] = []
    for col in table.fields:
        ts_type = resolve_ts_type(col)
        body.extend(_field_doc(col, ts_type, options))
        body.append(_property(property_name(col, options), ts_type, col.is_nullable))

    doc = None
    if options.verbose_docs:
        doc = [f"{table.table_name} entity"]
        if table.comment:
            doc.append(_doc_text(table.comment))
    return _interface(table.table_name, body, doc)


def _dto_body(table: TableDescriptor, options: RenderOptions, force_optional: bool) -> List[str]:
    body: List[str] = []
    # 기본키는 DB에서 생성/관리하므로 DTO에서 제외
    for col in table.non_primary_fields:
        if options.verbose_docs:
            body.append(f"{INDENT}/** {_doc_text(col.comment or col.name)} */")
        elif col.comment:
            body.append(f"{INDENT}/** {_doc_text(col.comment)} */")
        optional = force_optional or col.is_nullable
        body.append(_property(property_name(col, options), resolve_ts_type(col), optional))
    return body


def render_create_dto(table: TableDescriptor, options: Optional[RenderOptions] = None) -> str:
    """생성 DTO: 기본키 제외, nullable 필드만 optional"""
    options = options or RenderOptions()
    doc = [f"Payload for creating a {table.table_name} record"] if options.verbose_docs else None
    return _interface(
        f"Create{table.table_name}Dto",
        _dto_body(table, options, force_optional=False),
        doc,
    )


def render_update_dto(table: TableDescriptor, options: Optional[RenderOptions] = None) -> str:
    """수정 DTO: 기본키 제외, 모든 필드 optional (부분 수정)"""
    options = options or RenderOptions()
    doc = [f"Payload for updating a {table.table_name} record"] if options.verbose_docs else None
    return _interface(
        f"Update{table.table_name}Dto",
        _dto_body(table, options, force_optional=True),
        doc,
    )


PAGINATION_PROPERTIES = (
    ("page", "number", "Page number"),
    ("pageSize", "number", "Page size"),
    ("sortBy", "string", "Sort field"),
    ("sortOrder", "'asc' | 'desc'", "Sort direction"),
)


def render_query_params(table: TableDescriptor, options: Optional[RenderOptions] = None) -> str:
    """
    조회 파라미터 interface를 생성합니다.

    - 페이지네이션/정렬: page, pageSize, sortBy, sortOrder
    - 필드별 일치 조건
    - string 필드: <field>Like 부분 일치 조건
    - number, Date 필드: <field>Min / <field>Max 범위 조건
    """
    options = options or RenderOptions()
    verbose = options.verbose_docs
    body: List[str] = []

    def add(name: str, ts_type: str, doc: str) -> None:
        if verbose:
            body.append(f"{INDENT}/** {doc} */")
        body.append(_property(name, ts_type, True))

    for name, ts_type, doc in PAGINATION_PROPERTIES:
        add(name, ts_type, doc)

    for col in table.fields:
        name = property_name(col, options)
        label = _doc_text(col.name)
        ts_type = resolve_ts_type(col)
        add(name, ts_type, f"Filter by {label}")
        if ts_type == "string":
            add(f"{name}Like", "string", f"Partial match on {label}")
        if is_range_type(ts_type):
            add(f"{name}Min", ts_type, f"Lower bound of {label}")
            add(f"{name}Max", ts_type, f"Upper bound of {label}")

    doc = [f"Query parameters for {table.table_name}"] if verbose else None
    return _interface(f"{table.table_name}QueryParams", body, doc)
