"""Tests for configuration loading."""
import pytest

from modeler.config import (
    ConfigError,
    GeneratorConfig,
    config_from_dict,
    load_config,
)
from modeler.renderer.render_options import RenderOptions


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("MODELER_CONFIG", "MODELER_DIALECT", "MODELER_STEPS", "MODELER_USE_RAW_FIELD_NAMES"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv가 저장소의 .env를 읽지 않도록 빈 디렉터리에서 실행
    monkeypatch.chdir(tmp_path)


def test_defaults_without_config_file():
    config = load_config()

    assert config == GeneratorConfig()
    assert config.options == RenderOptions()


def test_load_yaml_file(tmp_path):
    path = tmp_path / "modeler.yml"
    path.write_text(
        "dialect: postgres\n"
        "steps:\n"
        "  - add_import_hints\n"
        "  - format_code\n"
        "render:\n"
        "  emit_query_params: false\n"
        "  use_raw_field_names: yes\n",
        encoding="utf-8",
    )
    config = load_config(str(path))

    assert config.dialect == "postgres"
    assert config.steps == ("add_import_hints", "format_code")
    assert config.options.emit_query_params is False
    assert config.options.use_raw_field_names is True
    assert config.options.emit_create_dto is True


def test_config_path_from_env(monkeypatch, tmp_path):
    path = tmp_path / "other.yml"
    path.write_text("dialect: sqlite\n", encoding="utf-8")
    monkeypatch.setenv("MODELER_CONFIG", str(path))

    assert load_config().dialect == "sqlite"


def test_env_overrides_file(monkeypatch, tmp_path):
    path = tmp_path / "modeler.yml"
    path.write_text("dialect: postgres\nsteps: [format_code]\n", encoding="utf-8")
    monkeypatch.setenv("MODELER_DIALECT", "mysql")
    monkeypatch.setenv("MODELER_STEPS", "add_import_hints, add_default_header")
    monkeypatch.setenv("MODELER_USE_RAW_FIELD_NAMES", "true")

    config = load_config(str(path))

    assert config.dialect == "mysql"
    assert config.steps == ("add_import_hints", "add_default_header")
    assert config.options.use_raw_field_names is True


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yml"))


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == GeneratorConfig()


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("dialect: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


@pytest.mark.parametrize("data", [
    {"dialekt": "mysql"},
    {"steps": ["unknown_step"]},
    {"steps": 5},
    {"render": {"emit_dtos": True}},
    {"render": {"generated_at": "2024-01-01"}},
    {"render": {"emit_create_dto": "maybe"}},
    {"render": ["emit_create_dto"]},
])
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_top_level_must_be_mapping():
    with pytest.raises(ConfigError):
        config_from_dict(["dialect"])


def test_invalid_bool_in_env(monkeypatch):
    monkeypatch.setenv("MODELER_USE_RAW_FIELD_NAMES", "sometimes")
    with pytest.raises(ConfigError):
        load_config()
