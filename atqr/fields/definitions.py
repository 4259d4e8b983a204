"""Field definitions from Portaria n.º 195/2020 (version 1.1, October 2020).

Every recognized QR field code with its description, mandatory flag,
maximum byte length, optional format pattern and display order.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from atqr.fields.exceptions import FieldTableError

MONEY_PATTERN = re.compile(r"^\d+\.\d{2}$")
DOCUMENT_TYPE_PATTERN = re.compile(
    r"^(FT|FS|FR|ND|NC|VD|TV|TD|AA|DA|GR|GT|GA|GC|GD|CM|CC|FC|FO|NE|OU|OR|PF|RP|RE|CS|LD|RA)$"
)
DOCUMENT_STATUS_PATTERN = re.compile(r"^[NSAR]$")
DOCUMENT_DATE_PATTERN = re.compile(r"^\d{8}$")

TAX_REGIONS = ("I", "J", "K")
NO_TAX_SENTINEL = "0"

_MONEY_MAX_BYTES = 16
_REGION_ID_MAX_BYTES = 5


@dataclass(frozen=True)
class FieldDefinition:
    """Validation rules and metadata for a single QR field."""

    code: str
    description: str
    is_mandatory: bool
    max_length_bytes: int
    sequence_index: int
    format_pattern: re.Pattern[str] | None = None


class FieldDefinitionTable:
    """Read-only registry of field definitions keyed by code."""

    def __init__(self, definitions: Iterable[FieldDefinition]) -> None:
        by_code: dict[str, FieldDefinition] = {}
        seen_indexes: set[int] = set()
        for definition in definitions:
            if definition.code in by_code:
                raise FieldTableError(f"Duplicate field code: {definition.code}")
            if definition.sequence_index in seen_indexes:
                raise FieldTableError(
                    f"Duplicate sequence index {definition.sequence_index} "
                    f"for field {definition.code}"
                )
            by_code[definition.code] = definition
            seen_indexes.add(definition.sequence_index)
        self._by_code = MappingProxyType(by_code)
        self._ordered = tuple(sorted(by_code.values(), key=lambda d: d.sequence_index))

    def lookup(self, code: str) -> FieldDefinition | None:
        return self._by_code.get(code)

    def all(self) -> tuple[FieldDefinition, ...]:
        """All definitions ordered by sequence index."""
        return self._ordered

    def mandatory(self) -> tuple[FieldDefinition, ...]:
        return tuple(d for d in self._ordered if d.is_mandatory)

    def optional(self) -> tuple[FieldDefinition, ...]:
        return tuple(d for d in self._ordered if not d.is_mandatory)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._ordered)


# Labels for region fields 2..8; field 1 is the fiscal space identifier.
_TAX_REGION_FIELDS = (
    "Tax Base (Exempt)",
    "Tax Base (Reduced Rate)",
    "Tax Total (Reduced Rate)",
    "Tax Base (Intermediate Rate)",
    "Tax Total (Intermediate Rate)",
    "Tax Base (Normal Rate)",
    "Tax Total (Normal Rate)",
)


def _tax_region_block(region: str, number: int, first_index: int) -> list[FieldDefinition]:
    prefix = f"Tax Region {number}"
    block = [
        FieldDefinition(
            f"{region}1",
            f"{prefix} - Fiscal Space",
            False,
            _REGION_ID_MAX_BYTES,
            first_index,
        )
    ]
    for offset, label in enumerate(_TAX_REGION_FIELDS, start=2):
        block.append(
            FieldDefinition(
                f"{region}{offset}",
                f"{prefix} - {label}",
                False,
                _MONEY_MAX_BYTES,
                first_index + offset - 1,
                MONEY_PATTERN,
            )
        )
    return block


def _build_default_definitions() -> list[FieldDefinition]:
    definitions = [
        FieldDefinition("A", "Tax Registration Number (Seller)", True, 9, 0),
        FieldDefinition("B", "Tax Registration Number (Buyer)", True, 30, 1),
        FieldDefinition("C", "Country Code (Buyer)", True, 12, 2),
        FieldDefinition("D", "Document Type", True, 2, 3, DOCUMENT_TYPE_PATTERN),
        FieldDefinition("E", "Document Status", True, 1, 4, DOCUMENT_STATUS_PATTERN),
        FieldDefinition("F", "Document Date", True, 8, 5, DOCUMENT_DATE_PATTERN),
        FieldDefinition("G", "Document ID", True, 60, 6),
        FieldDefinition("H", "ATCUD", True, 70, 7),
    ]
    for number, region in enumerate(TAX_REGIONS, start=1):
        definitions.extend(_tax_region_block(region, number, 8 * number))
    definitions.extend(
        [
            FieldDefinition(
                "L",
                "Non-taxable / Not subject to VAT / Other situations",
                False,
                _MONEY_MAX_BYTES,
                32,
                MONEY_PATTERN,
            ),
            FieldDefinition("M", "Stamp Duty", False, _MONEY_MAX_BYTES, 33, MONEY_PATTERN),
            FieldDefinition(
                "N", "Total Taxes (VAT + Stamp Duty)", True, _MONEY_MAX_BYTES, 34, MONEY_PATTERN
            ),
            FieldDefinition(
                "O", "Grand Total with Taxes", True, _MONEY_MAX_BYTES, 35, MONEY_PATTERN
            ),
            FieldDefinition("P", "Withholding Tax", False, _MONEY_MAX_BYTES, 36, MONEY_PATTERN),
            FieldDefinition("Q", "Hash Segment (4 chars)", True, 4, 37),
            FieldDefinition("R", "Certificate Number", True, 4, 38),
            FieldDefinition("S", "Other Information", False, 65, 39),
        ]
    )
    return definitions


DEFAULT_FIELD_TABLE = FieldDefinitionTable(_build_default_definitions())
