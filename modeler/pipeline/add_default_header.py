import re
from datetime import datetime
from typing import Optional

from modeler.renderer.interface_renderer import TIMESTAMP_FORMAT
from modeler.types.table_types import TableDescriptor

_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def add_default_header(
    code: str,
    table: TableDescriptor,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    문서 주석(/**)이 하나도 없는 코드에 기본 헤더를 붙이고,
    3줄 이상 연속된 줄바꿈을 빈 줄 하나로 줄입니다.
    """
    if "/**" not in code:
        generated_at = generated_at or datetime.now()
        header = (
            "/**\n"
            f" * Generated TypeScript model for {table.table_name}\n"
            f" * Generated at: {generated_at.strftime(TIMESTAMP_FORMAT)}\n"
            " * Do not edit this file by hand.\n"
            " */\n\n"
        )
        code = header + code
    return _EXTRA_BLANK_LINES.sub("\n\n", code)
