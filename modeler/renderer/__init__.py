"""
TypeScript 코드 렌더링 모듈
"""

from modeler.renderer.render_options import RenderOptions
from modeler.renderer.interface_renderer import (
    render,
    render_header,
    render_import_hints,
    render_main_interface,
    render_create_dto,
    render_update_dto,
    render_query_params,
)
from modeler.renderer.formatter import normalize_code

__all__ = [
    "RenderOptions",
    "render",
    "render_header",
    "render_import_hints",
    "render_main_interface",
    "render_create_dto",
    "render_update_dto",
    "render_query_params",
    "normalize_code",
]
