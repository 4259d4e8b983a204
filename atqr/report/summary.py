"""Aggregate compliance statistics over a batch of validation records."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from atqr.validation.models import ValidationRecord

UNKNOWN_DOCUMENT_TYPE = "Unknown"


@dataclass(frozen=True)
class DocumentTypeStats:
    """Compliance counts for one document type (field D)."""

    document_type: str
    total: int
    compliant: int

    @property
    def non_compliant(self) -> int:
        return self.total - self.compliant

    @property
    def compliance_ratio(self) -> float:
        return self.compliant / self.total if self.total else 0.0


@dataclass(frozen=True)
class IssueCount:
    note: str
    occurrences: int


@dataclass(frozen=True)
class ComplianceSummary:
    total: int
    compliant: int
    by_document_type: tuple[DocumentTypeStats, ...] = ()
    common_issues: tuple[IssueCount, ...] = ()

    @property
    def non_compliant(self) -> int:
        return self.total - self.compliant

    @classmethod
    def from_records(
        cls,
        records: Sequence[ValidationRecord],
        max_issues: int = 10,
    ) -> "ComplianceSummary":
        """Build the summary; ties keep first-seen order."""
        totals: Counter[str] = Counter()
        compliant: Counter[str] = Counter()
        issues: Counter[str] = Counter()
        for record in records:
            document_type = record.field_value("D") or UNKNOWN_DOCUMENT_TYPE
            totals[document_type] += 1
            if record.is_compliant:
                compliant[document_type] += 1
            else:
                issues.update(record.compliance_notes)
        by_type = tuple(
            DocumentTypeStats(document_type=name, total=count, compliant=compliant[name])
            for name, count in totals.most_common()
        )
        common = tuple(
            IssueCount(note=note, occurrences=count)
            for note, count in issues.most_common(max_issues)
        )
        return cls(
            total=len(records),
            compliant=sum(1 for r in records if r.is_compliant),
            by_document_type=by_type,
            common_issues=common,
        )
