"""
후처리 파이프라인
이미 생성된 TypeScript 코드에 순서대로 적용되는 단계들입니다.
모든 단계는 (code, table) -> code 형태입니다.
"""
from typing import Callable, Dict, Iterable, List, Tuple

from modeler.types.table_types import TableDescriptor

from .add_import_hints import add_import_hints
from .add_default_header import add_default_header
from .format_code import format_code

PipelineStep = Callable[[str, TableDescriptor], str]


class UnknownStepError(KeyError):
    """등록되지 않은 후처리 단계 이름을 지정한 경우 발생하는 예외"""
    pass


PIPELINE_STEPS: Dict[str, PipelineStep] = {
    "add_import_hints": add_import_hints,
    "add_default_header": add_default_header,
    "format_code": format_code,
}


def resolve_steps(names: Iterable[str]) -> List[Tuple[str, PipelineStep]]:
    """
    단계 이름 목록을 (이름, 함수) 목록으로 변환합니다.

    Raises:
        UnknownStepError: 등록되지 않은 이름이 있는 경우
    """
    resolved: List[Tuple[str, PipelineStep]] = []
    for name in names:
        step = PIPELINE_STEPS.get(name)
        if step is None:
            raise UnknownStepError(
                f"알 수 없는 후처리 단계: {name}. "
                f"사용 가능한 단계: {', '.join(sorted(PIPELINE_STEPS))}"
            )
        resolved.append((name, step))
    return resolved


__all__ = [
    "PipelineStep",
    "UnknownStepError",
    "PIPELINE_STEPS",
    "resolve_steps",
    "add_import_hints",
    "add_default_header",
    "format_code",
]
