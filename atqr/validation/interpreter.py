from collections.abc import Iterable

from atqr.fields.checks import PAYLOAD_ENCODING
from atqr.fields.definitions import DEFAULT_FIELD_TABLE, FieldDefinitionTable
from atqr.ingest.models import RawPayload
from atqr.logging.logger import Log
from atqr.validation.materializer import materialize
from atqr.validation.models import ValidatedField, ValidationRecord
from atqr.validation.parser import parse_payload
from atqr.validation.validator import StructuralValidator

INVALID_ENCODING_NOTE = "Payload is not valid UTF-8"


def is_valid_encoding(text: str) -> bool:
    """True when text survives an encode/decode round trip in the payload encoding."""
    try:
        return text.encode(PAYLOAD_ENCODING).decode(PAYLOAD_ENCODING) == text
    except UnicodeError:
        return False


class PayloadInterpreter:
    """Turns a merged RawPayload into a ValidationRecord.

    Failures are confined to the payload being interpreted: any unexpected
    error becomes a "Critical error" note and the record is non-compliant.
    """

    def __init__(
        self,
        table: FieldDefinitionTable = DEFAULT_FIELD_TABLE,
        validator: StructuralValidator | None = None,
    ) -> None:
        self._table = table
        self._validator = validator if validator is not None else StructuralValidator(table)
        self._blank_fields = tuple(materialize(table, {}))

    def interpret(self, payload: RawPayload) -> ValidationRecord:
        Log.debug(f"Interpreting QR payload {payload.content_hash}")
        try:
            if not is_valid_encoding(payload.text):
                return self._failed(payload, INVALID_ENCODING_NOTE)
            fields = parse_payload(payload.text)
            notes = self._validator.validate(fields)
            validated = materialize(self._table, fields)
        except Exception as exc:
            Log.error(f"Error interpreting QR payload {payload.content_hash}: {exc}")
            return self._failed(payload, f"Critical error: {exc}")
        return self._record(payload, tuple(validated), tuple(notes))

    def interpret_all(self, payloads: Iterable[RawPayload]) -> list[ValidationRecord]:
        return [self.interpret(payload) for payload in payloads]

    def _failed(self, payload: RawPayload, note: str) -> ValidationRecord:
        return self._record(payload, self._blank_fields, (note,))

    def _record(
        self,
        payload: RawPayload,
        fields: tuple[ValidatedField, ...],
        notes: tuple[str, ...],
    ) -> ValidationRecord:
        return ValidationRecord(
            content_hash=payload.content_hash,
            raw_text=payload.text,
            fields=fields,
            compliance_notes=notes,
            source_files=payload.source_files,
        )
