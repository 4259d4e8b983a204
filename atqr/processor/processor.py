from collections.abc import Sequence

from atqr.config.settings import Settings
from atqr.fields.definitions import DEFAULT_FIELD_TABLE
from atqr.ingest.factory import DetectorFactory
from atqr.logging.logger import Log
from atqr.processor.pipeline import PipelineContext, PipelineStep
from atqr.processor.steps import DetectStep, InterpretStep, MergeStep, ReportStep, SummarizeStep
from atqr.report.factory import ReportSinkFactory
from atqr.validation.interpreter import PayloadInterpreter
from atqr.validation.models import ValidationRecord

EXIT_SUCCESS = 0
EXIT_NON_COMPLIANT = 1
EXIT_ERROR = 2


class Processor:
    """Runs the extraction pipeline.

    Pipeline: detect -> merge -> interpret -> summarize -> report.
    Merging completes before interpretation starts; interpretation of one
    payload never affects another. A step may halt the run early.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self) -> PipelineContext:
        context = PipelineContext()
        for step in self._steps:
            context = step.run(context)
            if context.halted:
                break
        return context


def determine_exit_code(
    records: Sequence[ValidationRecord],
    fail_on_noncompliant: bool,
) -> int:
    """EXIT_NON_COMPLIANT only when requested and any record is non-compliant."""
    if fail_on_noncompliant and any(not r.is_compliant for r in records):
        Log.warning("Exiting with code 1 due to non-compliant QR codes")
        return EXIT_NON_COMPLIANT
    return EXIT_SUCCESS


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the configured detector and report sink."""
    return Processor(
        steps=[
            DetectStep(DetectorFactory.create(settings)),
            MergeStep(),
            InterpretStep(PayloadInterpreter(DEFAULT_FIELD_TABLE)),
            SummarizeStep(settings.max_displayed_issues),
            ReportStep(ReportSinkFactory.create(settings)),
        ]
    )
