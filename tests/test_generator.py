"""Tests for TypeScriptGenerator."""
import pytest

from modeler.config import GeneratorConfig
from modeler.generator import PipelineStepError, TypeScriptGenerator
from modeler.pipeline import PIPELINE_STEPS, UnknownStepError
from modeler.renderer.render_options import RenderOptions


@pytest.fixture
def mysql_payload():
    return {
        "tableName": "Member",
        "fields": [
            {"name": "member_id", "type": "int(11)", "isPrimary": True},
            {"name": "nick_name", "type": "varchar(32)", "comment": "Nickname"},
            {"name": "is_admin", "type": "tinyint(1)"},
            {"name": "joined_at", "type": "datetime", "isNullable": True},
            {"name": "avatar", "type": "blob", "tsType": "Uint8Array"},
        ],
    }


def test_generate_without_dialect_uses_generic_table(mysql_payload):
    generator = TypeScriptGenerator(options=RenderOptions.interface_only())
    code = generator.generate(mysql_payload)

    # 길이 정보가 붙은 타입은 기본 매핑 테이블에 없음
    assert "nickName: any;" in code
    assert "joinedAt?: Date;" in code


def test_generate_with_mysql_dialect(mysql_payload):
    generator = TypeScriptGenerator(dialect="MySQL", options=RenderOptions.interface_only())
    code = generator.generate(mysql_payload)

    assert code == (
        "export interface Member {\n"
        "  memberId: number;\n"
        "  /** Nickname */\n"
        "  nickName: string;\n"
        "  isAdmin: boolean;\n"
        "  joinedAt?: Date;\n"
        "  avatar: Uint8Array;\n"
        "}\n"
    )


def test_generate_runs_steps_in_order(mysql_payload):
    # 문서 주석이 있으면 기본 헤더가 붙지 않으므로 컬럼 주석 제거
    mysql_payload["fields"][1].pop("comment")
    generator = TypeScriptGenerator(
        dialect="mysql",
        options=RenderOptions.interface_only(),
        steps=["add_import_hints", "add_default_header", "format_code"],
    )
    code = generator.generate(mysql_payload)

    assert code.startswith("/**\n * Generated TypeScript model for Member\n")
    assert code.index("// import { Date }") < code.index("export interface Member {")
    assert code.endswith("}\n")


def test_generate_full_render_with_postgres():
    generator = TypeScriptGenerator(dialect="postgresql")
    code = generator.generate({
        "tableName": "Event",
        "fields": [
            {"name": "id", "type": "bigserial", "isPrimary": True},
            {"name": "title", "type": "character varying(200)"},
            {"name": "starts_at", "type": "timestamp with time zone"},
        ],
    })

    assert "export interface CreateEventDto {" in code
    assert "titleLike?: string;" in code
    assert "startsAtMin?: Date;" in code
    assert "idMax?: number;" in code


def test_unknown_step_fails_at_construction():
    with pytest.raises(UnknownStepError):
        TypeScriptGenerator(steps=["nope"])


def test_failing_step_is_reported(monkeypatch, user_table):
    def broken(code, table):
        raise ValueError("boom")

    monkeypatch.setitem(PIPELINE_STEPS, "broken", broken)
    generator = TypeScriptGenerator(steps=["broken"])

    with pytest.raises(PipelineStepError) as excinfo:
        generator.generate(user_table)
    assert excinfo.value.step_name == "broken"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_from_config():
    config = GeneratorConfig(
        dialect="sqlite",
        steps=("format_code",),
        options=RenderOptions.interface_only(use_raw_field_names=True),
    )
    generator = TypeScriptGenerator.from_config(config)
    code = generator.generate({"tableName": "T", "fields": [{"name": "is_ok", "type": "TINYINT(1)"}]})

    assert code == "export interface T {\n  is_ok: boolean;\n}\n"
