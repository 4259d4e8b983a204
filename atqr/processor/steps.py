from atqr.ingest.base import BaseDetector
from atqr.ingest.merge import merge_payloads
from atqr.logging.logger import Log
from atqr.processor.exceptions import StepOrderError
from atqr.processor.pipeline import PipelineContext, PipelineStep
from atqr.report.base import BaseReportSink
from atqr.report.summary import ComplianceSummary
from atqr.validation.interpreter import PayloadInterpreter


def _log_no_qr_codes_guidance() -> None:
    Log.warning("No QR codes found in any files. Check that:")
    Log.warning("  - Files contain visible QR codes")
    Log.warning("  - QR codes are at least 2cm x 2cm (0.8in x 0.8in) in size")
    Log.warning("  - QR codes have sufficient contrast")
    Log.warning("  - Images are not overly compressed or degraded")


class DetectStep(PipelineStep):
    def __init__(self, detector: BaseDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        context.detections = self._detector.detect()
        files = {d.source_file for d in context.detections}
        Log.info(f"Detected {len(context.detections)} QR codes in {len(files)} files")
        return context


class MergeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.payloads = merge_payloads(context.detections)
        Log.info(
            f"Found {len(context.detections)} QR codes, {len(context.payloads)} unique"
        )
        if not context.payloads:
            _log_no_qr_codes_guidance()
            context.halted = True
        return context


class InterpretStep(PipelineStep):
    def __init__(self, interpreter: PayloadInterpreter) -> None:
        self._interpreter = interpreter

    def run(self, context: PipelineContext) -> PipelineContext:
        Log.info("Interpreting QR codes according to Portaria n.º 195/2020")
        context.records = self._interpreter.interpret_all(context.payloads)
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, max_issues: int) -> None:
        self._max_issues = max_issues

    def run(self, context: PipelineContext) -> PipelineContext:
        context.summary = ComplianceSummary.from_records(
            context.records, max_issues=self._max_issues
        )
        return context


class ReportStep(PipelineStep):
    def __init__(self, sink: BaseReportSink) -> None:
        self._sink = sink

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.summary is None:
            raise StepOrderError("PipelineContext.summary must be set before reporting")
        self._sink.write(context.records, context.summary)
        return context
