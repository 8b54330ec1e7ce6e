from modeler.renderer.formatter import normalize_code
from modeler.types.table_types import TableDescriptor


def format_code(code: str, table: TableDescriptor) -> str:
    """빈 줄과 들여쓰기를 정리합니다. table은 사용하지 않음 (단계 시그니처 통일용)"""
    return normalize_code(code)
