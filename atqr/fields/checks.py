"""Length and format check shared by the validator and the materializer."""

from dataclasses import dataclass

from atqr.fields.definitions import MONEY_PATTERN, FieldDefinition

PAYLOAD_ENCODING = "utf-8"

_FORMAT_HINTS = {
    "D": (
        "Must be a valid document type (FT, FS, FR, ND, NC, VD, TV, TD, AA, DA, GR, GT, "
        "GA, GC, GD, CM, CC, FC, FO, NE, OU, OR, PF, RP, RE, CS, LD, RA)"
    ),
    "E": "Must be N (Normal), S (Self-billing), A (Annulled), or R (Replacement)",
    "F": "Must be in YYYYMMDD format",
}
_MONEY_HINT = "Numeric value must use '.' as decimal separator with exactly 2 decimal places"
_DEFAULT_HINT = "Invalid format"


@dataclass(frozen=True)
class FieldValid:
    """The value satisfies length and format rules."""

    is_valid: bool = True

    def message(self, code: str) -> str:
        return ""


@dataclass(frozen=True)
class LengthExceeded:
    """The UTF-8 byte length is above the field maximum."""

    actual: int
    maximum: int
    is_valid: bool = False

    def message(self, code: str) -> str:
        return f"Field {code} exceeds max length of {self.maximum} bytes (actual: {self.actual})"


@dataclass(frozen=True)
class FormatMismatch:
    """The value does not match the field format pattern."""

    hint: str
    received: str
    is_valid: bool = False

    def message(self, code: str) -> str:
        return f"Field {code} invalid: {self.hint} (Received: '{self.received}')"


FieldCheck = FieldValid | LengthExceeded | FormatMismatch


def utf_8_length(value: str) -> int:
    """Byte length of value in the payload encoding."""
    return len(value.encode(PAYLOAD_ENCODING))


def format_hint(definition: FieldDefinition) -> str:
    """Human-readable description of the expected format for a field."""
    hint = _FORMAT_HINTS.get(definition.code)
    if hint is not None:
        return hint
    if definition.format_pattern is MONEY_PATTERN:
        return _MONEY_HINT
    return _DEFAULT_HINT


def check_field(definition: FieldDefinition, value: str) -> FieldCheck:
    """Check value against the definition; length is checked before format."""
    actual = utf_8_length(value)
    if actual > definition.max_length_bytes:
        return LengthExceeded(actual=actual, maximum=definition.max_length_bytes)
    pattern = definition.format_pattern
    if pattern is not None and pattern.search(value) is None:
        return FormatMismatch(hint=format_hint(definition), received=value)
    return FieldValid()
