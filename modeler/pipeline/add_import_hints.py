from modeler.renderer.interface_renderer import render_import_hints
from modeler.types.table_types import TableDescriptor


def add_import_hints(code: str, table: TableDescriptor) -> str:
    """Date 타입 필드가 있으면 코드 맨 앞에 import 힌트 주석을 추가합니다."""
    hints = render_import_hints(table)
    if not hints or hints in code:
        return code
    return hints + "\n" + code
