from collections.abc import Mapping

from atqr.fields.checks import check_field, utf_8_length
from atqr.fields.definitions import FieldDefinition, FieldDefinitionTable
from atqr.validation.models import ValidatedField

MANDATORY_FIELD_MESSAGE = "Field is mandatory"


def materialize(
    table: FieldDefinitionTable,
    fields: Mapping[str, str],
) -> list[ValidatedField]:
    """Expand every table definition into a ValidatedField, in sequence order.

    Absent fields get an empty value. Validity is decided per field with the
    same check the structural validator uses, so a whitespace-only mandatory
    value is reported as missing here as well.
    """
    return [
        _validated_field(definition, fields.get(definition.code, ""))
        for definition in table.all()
    ]


def _validated_field(definition: FieldDefinition, value: str) -> ValidatedField:
    is_valid = True
    message = ""
    if definition.is_mandatory and not value.strip():
        is_valid = False
        message = MANDATORY_FIELD_MESSAGE
    elif value:
        result = check_field(definition, value)
        is_valid = result.is_valid
        message = result.message(definition.code)
    return ValidatedField(
        code=definition.code,
        description=definition.description,
        value=value,
        is_mandatory=definition.is_mandatory,
        max_length_bytes=definition.max_length_bytes,
        actual_length_bytes=utf_8_length(value),
        is_valid=is_valid,
        validation_message=message,
        sequence_index=definition.sequence_index,
    )
