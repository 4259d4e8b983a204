from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from atqr.ingest.models import Detection, RawPayload
from atqr.report.summary import ComplianceSummary
from atqr.validation.models import ValidationRecord


@dataclass(slots=True)
class PipelineContext:
    detections: list[Detection] = field(default_factory=list)
    payloads: list[RawPayload] = field(default_factory=list)
    records: list[ValidationRecord] = field(default_factory=list)
    summary: ComplianceSummary | None = None
    halted: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
