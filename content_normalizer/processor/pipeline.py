from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from content_normalizer.processor.models import FieldTarget, Record, RunResult


@dataclass(slots=True)
class RunContext:
    target: FieldTarget
    records: list[Record] = field(default_factory=list)
    result: RunResult | None = None
    output_filename: str = ""
    report_filename: str = ""

    def __post_init__(self) -> None:
        if self.result is None:
            self.result = RunResult(target=self.target)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: RunContext) -> RunContext:
        raise NotImplementedError
