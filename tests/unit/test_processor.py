from unittest.mock import MagicMock

import pytest

from atqr.ingest.base import BaseDetector
from atqr.ingest.models import Detection, RawPayload, content_hash
from atqr.processor.exceptions import StepOrderError
from atqr.processor.pipeline import PipelineContext
from atqr.processor.processor import (
    EXIT_NON_COMPLIANT,
    EXIT_SUCCESS,
    Processor,
    determine_exit_code,
)
from atqr.processor.steps import (
    DetectStep,
    InterpretStep,
    MergeStep,
    ReportStep,
    SummarizeStep,
)
from atqr.report.base import BaseReportSink
from atqr.validation.interpreter import PayloadInterpreter
from atqr.validation.models import ValidationRecord


def _detection(text: str, source_file: str) -> Detection:
    return Detection(text=text, content_hash=content_hash(text), source_file=source_file)


def _make_processor(
    detections: list[Detection],
) -> tuple[Processor, MagicMock, MagicMock]:
    detector = MagicMock(spec=BaseDetector)
    detector.detect.return_value = detections
    sink = MagicMock(spec=BaseReportSink)
    processor = Processor(
        steps=[
            DetectStep(detector),
            MergeStep(),
            InterpretStep(PayloadInterpreter()),
            SummarizeStep(max_issues=5),
            ReportStep(sink),
        ]
    )
    return processor, detector, sink


class TestProcessor:
    def test_runs_all_steps(self, compliant_payload_text: str) -> None:
        processor, detector, sink = _make_processor([
            _detection(compliant_payload_text, "f1.pdf"),
            _detection(compliant_payload_text, "f2.pdf"),
        ])

        context = processor.process()

        detector.detect.assert_called_once()
        assert len(context.payloads) == 1
        assert len(context.records) == 1
        assert context.records[0].source_files == ("f1.pdf", "f2.pdf")
        assert context.summary is not None
        assert context.summary.compliant == 1
        sink.write.assert_called_once_with(context.records, context.summary)

    def test_records_ordered_by_hash(
        self, compliant_payload_text: str, taxed_payload_text: str
    ) -> None:
        processor, _detector, _sink = _make_processor([
            _detection(compliant_payload_text, "f1.pdf"),
            _detection(taxed_payload_text, "f2.pdf"),
        ])
        context = processor.process()
        hashes = [r.content_hash for r in context.records]
        assert hashes == sorted(hashes)

    def test_halts_when_nothing_detected(self) -> None:
        processor, _detector, sink = _make_processor([])

        context = processor.process()

        assert context.halted
        assert context.records == []
        sink.write.assert_not_called()

    def test_detector_error_propagates(self) -> None:
        processor, detector, _sink = _make_processor([])
        detector.detect.side_effect = OSError("disk gone")
        with pytest.raises(OSError):
            processor.process()


class TestReportStep:
    def test_requires_summary(self) -> None:
        step = ReportStep(MagicMock(spec=BaseReportSink))
        with pytest.raises(StepOrderError, match="summary"):
            step.run(PipelineContext())


class TestMergeStep:
    def test_merges_context_detections(self) -> None:
        context = PipelineContext(
            detections=[_detection("A:1", "a.pdf"), _detection("A:1", "b.pdf")]
        )
        context = MergeStep().run(context)
        assert context.payloads == [
            RawPayload(text="A:1", content_hash=content_hash("A:1"), source_files=("a.pdf", "b.pdf"))
        ]
        assert not context.halted


def _record(*notes: str) -> ValidationRecord:
    return ValidationRecord(content_hash="h", raw_text="", compliance_notes=notes)


class TestDetermineExitCode:
    def test_success_when_all_compliant(self) -> None:
        assert determine_exit_code([_record()], fail_on_noncompliant=True) == EXIT_SUCCESS

    def test_success_when_flag_not_set(self) -> None:
        assert determine_exit_code([_record("x")], fail_on_noncompliant=False) == EXIT_SUCCESS

    def test_non_compliant_with_flag(self) -> None:
        records = [_record(), _record("x")]
        assert determine_exit_code(records, fail_on_noncompliant=True) == EXIT_NON_COMPLIANT

    def test_empty_batch(self) -> None:
        assert determine_exit_code([], fail_on_noncompliant=True) == EXIT_SUCCESS
