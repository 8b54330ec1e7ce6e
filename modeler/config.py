"""
생성기 설정 로더
YAML 설정 파일과 환경 변수(.env 포함)에서 dialect, 후처리 단계, 렌더링 옵션을 읽습니다.

설정 파일 예:

    dialect: postgres
    steps:
      - add_import_hints
      - format_code
    render:
      emit_query_params: false
      use_raw_field_names: true
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from dotenv import find_dotenv, load_dotenv

from modeler.pipeline import PIPELINE_STEPS
from modeler.renderer.render_options import RENDER_OPTION_NAMES, RenderOptions
from utils.logger import setup_logger

logger = setup_logger("config")

CONFIG_ENV = "MODELER_CONFIG"
DIALECT_ENV = "MODELER_DIALECT"
STEPS_ENV = "MODELER_STEPS"
RAW_FIELD_NAMES_ENV = "MODELER_USE_RAW_FIELD_NAMES"

VALID_TOP_LEVEL_KEYS = {"dialect", "steps", "render"}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """설정 파일 또는 환경 변수 값이 잘못된 경우 발생하는 예외"""
    pass


@dataclass(frozen=True)
class GeneratorConfig:
    """생성기 설정"""
    dialect: Optional[str] = None
    steps: Tuple[str, ...] = field(default_factory=tuple)
    options: RenderOptions = field(default_factory=RenderOptions)


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} 값은 true/false 여야 합니다: {value!r}")


def _parse_steps(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"steps는 리스트여야 합니다: {value!r}")
    steps = tuple(str(step) for step in value)
    unknown = [step for step in steps if step not in PIPELINE_STEPS]
    if unknown:
        raise ConfigError(
            f"알 수 없는 후처리 단계: {', '.join(unknown)}. "
            f"사용 가능한 단계: {', '.join(sorted(PIPELINE_STEPS))}"
        )
    return steps


def _parse_render_options(data: Any) -> RenderOptions:
    if data is None:
        return RenderOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"render는 매핑이어야 합니다: {data!r}")
    # generated_at은 호출 시점에 정해지는 값이라 설정 파일에서 받지 않음
    allowed = RENDER_OPTION_NAMES - {"generated_at"}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(
            f"알 수 없는 render 옵션: {', '.join(unknown)}. "
            f"사용 가능한 옵션: {', '.join(sorted(allowed))}"
        )
    return RenderOptions(**{key: _parse_bool(f"render.{key}", value) for key, value in data.items()})


def config_from_dict(data: Dict[str, Any]) -> GeneratorConfig:
    """파싱된 YAML 딕셔너리로부터 GeneratorConfig를 생성합니다."""
    if not isinstance(data, dict):
        raise ConfigError("설정 파일 최상위는 매핑이어야 합니다.")
    unknown = sorted(set(data) - VALID_TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigError(
            f"알 수 없는 설정 키: {', '.join(unknown)}. "
            f"사용 가능한 키: {', '.join(sorted(VALID_TOP_LEVEL_KEYS))}"
        )
    dialect = data.get("dialect")
    return GeneratorConfig(
        dialect=str(dialect) if dialect else None,
        steps=_parse_steps(data.get("steps")),
        options=_parse_render_options(data.get("render")),
    )


def _apply_env_overrides(config: GeneratorConfig) -> GeneratorConfig:
    dialect = os.getenv(DIALECT_ENV)
    if dialect:
        config = replace(config, dialect=dialect)

    steps = os.getenv(STEPS_ENV)
    if steps is not None:
        config = replace(config, steps=_parse_steps(steps))

    raw_names = os.getenv(RAW_FIELD_NAMES_ENV)
    if raw_names is not None:
        options = replace(config.options, use_raw_field_names=_parse_bool(RAW_FIELD_NAMES_ENV, raw_names))
        config = replace(config, options=options)

    return config


def load_config(path: Optional[str] = None) -> GeneratorConfig:
    """
    설정을 로드합니다.

    우선순위: 환경 변수 > 설정 파일 > 기본값
    path가 없으면 MODELER_CONFIG 환경 변수의 경로를 사용하고, 그것도 없으면 기본값을 사용합니다.

    Raises:
        FileNotFoundError: 지정한 설정 파일이 없는 경우
        ConfigError: 설정 값이 잘못된 경우
    """
    load_dotenv(find_dotenv(usecwd=True))

    path = path or os.getenv(CONFIG_ENV)
    config = GeneratorConfig()
    if path:
        if not Path(path).exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"설정 파일 파싱 실패 ({path}): {e}") from e
        config = config_from_dict(data)
        logger.info("설정 파일 로드 완료: %s", path)

    return _apply_env_overrides(config)
