from dataclasses import dataclass


@dataclass(frozen=True)
class ValidatedField:
    """A single field of a payload with its per-field validation outcome."""

    code: str
    description: str
    value: str
    is_mandatory: bool
    max_length_bytes: int
    actual_length_bytes: int  # UTF-8 byte count, not characters
    is_valid: bool
    validation_message: str
    sequence_index: int


@dataclass(frozen=True)
class ValidationRecord:
    """Validated and interpreted QR payload, one per unique content hash."""

    content_hash: str
    raw_text: str
    fields: tuple[ValidatedField, ...] = ()
    compliance_notes: tuple[str, ...] = ()
    source_files: tuple[str, ...] = ()

    @property
    def is_compliant(self) -> bool:
        return not self.compliance_notes

    def field_value(self, code: str) -> str:
        """Value of the field with the given code, empty when unknown."""
        for item in self.fields:
            if item.code == code:
                return item.value
        return ""
