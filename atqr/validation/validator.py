"""Structural validation of a parsed AT QR payload (Portaria n.º 195/2020)."""

from collections.abc import Mapping

from atqr.fields.checks import check_field
from atqr.fields.definitions import (
    DEFAULT_FIELD_TABLE,
    NO_TAX_SENTINEL,
    TAX_REGIONS,
    FieldDefinitionTable,
)
from atqr.logging.logger import Log
from atqr.validation.parser import FIELD_SEPARATOR

_REGION_DATA_FIELDS = range(2, 9)

MISSING_TAX_REGION_NOTE = "At least one tax region (I1, J1, or K1) must be specified"
FIELD_S_SEPARATOR_NOTE = "Field S (Other Information) cannot contain asterisk (*)"


def _has_value(fields: Mapping[str, str], code: str) -> bool:
    value = fields.get(code)
    return value is not None and value.strip() != ""


class StructuralValidator:
    """Applies mandatory, format and cross-field rules to a parsed payload.

    Rules run in a fixed order so notes are reported in a stable sequence:
    mandatory presence, mandatory format/length, optional format/length,
    tax region cardinality, tax region consistency (warning only) and the
    field S separator rule. Every rule runs; violations never short-circuit.
    """

    def __init__(self, table: FieldDefinitionTable = DEFAULT_FIELD_TABLE) -> None:
        self._table = table

    def validate(self, fields: Mapping[str, str]) -> list[str]:
        """Return compliance notes; an empty list means the payload is compliant."""
        notes: list[str] = []
        self._check_mandatory(fields, notes)
        self._check_optional(fields, notes)
        self._check_tax_region_presence(fields, notes)
        for region in self.region_warnings(fields):
            Log.warning(
                f"Tax region {region}1 specified but no tax values (base/totals) provided"
            )
        self._check_other_information(fields, notes)
        return notes

    def region_warnings(self, fields: Mapping[str, str]) -> list[str]:
        """Regions declared with an identifier but without any tax values.

        Region I is exempt when I1 is "0" (no applicable tax). The sentinel
        is only defined for region I.
        """
        regions: list[str] = []
        for region in TAX_REGIONS:
            if not _has_value(fields, f"{region}1"):
                continue
            if region == "I" and fields["I1"] == NO_TAX_SENTINEL:
                continue
            if not any(_has_value(fields, f"{region}{i}") for i in _REGION_DATA_FIELDS):
                regions.append(region)
        return regions

    def _check_mandatory(self, fields: Mapping[str, str], notes: list[str]) -> None:
        for definition in self._table.mandatory():
            if not _has_value(fields, definition.code):
                notes.append(
                    f"Missing mandatory field: {definition.code} ({definition.description})"
                )
                continue
            result = check_field(definition, fields[definition.code])
            if not result.is_valid:
                notes.append(result.message(definition.code))

    def _check_optional(self, fields: Mapping[str, str], notes: list[str]) -> None:
        for definition in self._table.optional():
            value = fields.get(definition.code, "")
            if not value:
                continue
            result = check_field(definition, value)
            if not result.is_valid:
                notes.append(result.message(definition.code))

    def _check_tax_region_presence(self, fields: Mapping[str, str], notes: list[str]) -> None:
        if not any(_has_value(fields, f"{region}1") for region in TAX_REGIONS):
            notes.append(MISSING_TAX_REGION_NOTE)

    def _check_other_information(self, fields: Mapping[str, str], notes: list[str]) -> None:
        # The parser splits on '*' first, so this only fires for maps built elsewhere.
        if FIELD_SEPARATOR in fields.get("S", ""):
            notes.append(FIELD_S_SEPARATOR_NOTE)
