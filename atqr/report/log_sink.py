from collections.abc import Sequence

from atqr.logging.logger import Log
from atqr.report.base import BaseReportSink
from atqr.report.summary import ComplianceSummary
from atqr.validation.models import ValidationRecord


class LogReportSink(BaseReportSink):
    """Writes the compliance outcome to the application log."""

    def write(self, records: Sequence[ValidationRecord], summary: ComplianceSummary) -> None:
        Log.info("Compliance check complete:")
        Log.info(f"  Compliant: {summary.compliant}")
        Log.info(f"  Non-compliant: {summary.non_compliant}")
        for stats in summary.by_document_type:
            Log.info(
                f"  Document type {stats.document_type}: {stats.compliant}/{stats.total} "
                f"compliant ({stats.compliance_ratio:.1%})"
            )
        if summary.common_issues:
            Log.info("Common issues in non-compliant codes:")
            for issue in summary.common_issues:
                Log.info(f"  - {issue.note} ({issue.occurrences} occurrences)")
        for record in records:
            if not record.is_compliant:
                Log.debug(
                    f"Non-compliant {record.content_hash} from {', '.join(record.source_files)}: "
                    f"{'; '.join(record.compliance_notes)}"
                )
