"""
TypeScript 모델 생성기
dialect별 타입 매핑 -> interface 렌더링 -> 후처리 단계 순서로 코드를 생성합니다.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Optional

from modeler.mapping.dialect_mappers import BaseTypeMapper, get_type_mapper
from modeler.pipeline import resolve_steps
from modeler.renderer.interface_renderer import TableInput, ensure_table_descriptor, render
from modeler.renderer.render_options import RenderOptions
from modeler.types.table_types import TableDescriptor
from utils.logger import setup_logger

if TYPE_CHECKING:
    from modeler.config import GeneratorConfig

logger = setup_logger("generator")


class PipelineStepError(RuntimeError):
    """후처리 단계 실행 중 오류가 발생한 경우"""

    def __init__(self, step_name: str, cause: Exception):
        super().__init__(f"후처리 단계 '{step_name}' 실행 실패: {cause}")
        self.step_name = step_name


class TypeScriptGenerator:
    """테이블 디스크립터를 TypeScript 코드로 변환하는 객체"""

    def __init__(
        self,
        dialect: Optional[str] = None,
        options: Optional[RenderOptions] = None,
        steps: Iterable[str] = (),
    ):
        self.dialect = dialect
        self.options = options or RenderOptions()
        # dialect가 없으면 기본 매핑 테이블(map_type) 사용
        self.mapper: Optional[BaseTypeMapper] = get_type_mapper(dialect) if dialect else None
        self.steps = resolve_steps(steps)

    @classmethod
    def from_config(cls, config: "GeneratorConfig") -> "TypeScriptGenerator":
        return cls(dialect=config.dialect, options=config.options, steps=config.steps)

    def apply_dialect_types(self, table: TableDescriptor) -> TableDescriptor:
        """tsType이 지정되지 않은 필드에 dialect 매퍼 결과를 채워 넣습니다."""
        if self.mapper is None:
            return table
        fields = tuple(
            col if col.ts_type else replace(col, ts_type=self.mapper.map(col.source_type))
            for col in table.fields
        )
        return replace(table, fields=fields)

    def generate(self, table: TableInput) -> str:
        table = self.apply_dialect_types(ensure_table_descriptor(table))
        code = render(table, self.options)

        for name, step in self.steps:
            try:
                code = step(code, table)
            except Exception as e:
                logger.error("후처리 단계 %s 실패 (%s): %s", name, table.table_name, str(e))
                raise PipelineStepError(name, e) from e

        logger.info(
            "%s TypeScript 코드 생성 완료 (필드 %d개, 후처리 %d단계)",
            table.table_name,
            len(table.fields),
            len(self.steps),
        )
        return code
