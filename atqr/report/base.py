from abc import ABC, abstractmethod
from collections.abc import Sequence

from atqr.report.summary import ComplianceSummary
from atqr.validation.models import ValidationRecord


class BaseReportSink(ABC):
    """Contract for consumers of validated records."""

    @abstractmethod
    def write(self, records: Sequence[ValidationRecord], summary: ComplianceSummary) -> None:
        """Publish validated records.

        Args:
            records: One record per unique payload, ordered by content hash.
            summary: Aggregate statistics over the same records.
        """
