"""Tests for post-processing steps."""
import pytest

from modeler.pipeline import (
    PIPELINE_STEPS,
    UnknownStepError,
    add_default_header,
    add_import_hints,
    format_code,
    resolve_steps,
)
from modeler.renderer.interface_renderer import render
from modeler.renderer.render_options import RenderOptions
from modeler.types.table_types import ColumnDescriptor, TableDescriptor


def test_add_import_hints_prepends_block(user_table):
    code = render(user_table, RenderOptions.interface_only())
    result = add_import_hints(code, user_table)

    assert result.startswith("// Type imports\n// import { Date } from './types';\n\nexport interface User {")


def test_add_import_hints_is_noop_when_present(user_table):
    code = render(user_table)
    assert add_import_hints(code, user_table) == code


def test_add_import_hints_is_noop_without_dates():
    table = TableDescriptor(table_name="T", fields=(ColumnDescriptor(name="a", source_type="int"),))
    code = render(table, RenderOptions.interface_only())
    assert add_import_hints(code, table) == code


def test_add_default_header_when_missing(user_table, fixed_time):
    code = "export interface User {\n}\n\n\n\nexport interface B {\n}\n"
    result = add_default_header(code, user_table, fixed_time)

    assert result.startswith("/**\n * Generated TypeScript model for User\n")
    assert " * Generated at: 2024-05-01 09:30:00\n" in result
    assert "\n\n\n" not in result


def test_add_default_header_keeps_existing_doc(user_table):
    code = "/** existing */\nexport interface User {\n}\n"
    assert add_default_header(code, user_table) == code


def test_format_code_step(user_table):
    assert format_code("export interface User {\nid: number;\n}", user_table) == (
        "export interface User {\n  id: number;\n}\n"
    )


def test_resolve_steps_keeps_order():
    steps = resolve_steps(["format_code", "add_import_hints"])
    assert [name for name, _ in steps] == ["format_code", "add_import_hints"]
    assert steps[0][1] is PIPELINE_STEPS["format_code"]


def test_resolve_steps_rejects_unknown_name():
    with pytest.raises(UnknownStepError, match="run_script"):
        resolve_steps(["format_code", "run_script"])
