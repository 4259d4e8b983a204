FIELD_SEPARATOR = "*"
CODE_SEPARATOR = ":"


def parse_payload(raw_text: str) -> dict[str, str]:
    """Split a raw AT QR payload into a code -> value mapping.

    Segments are delimited by '*'. Each segment is CODE:VALUE split on the
    first ':'. Segments without a code (no ':' or a leading ':') are dropped
    silently; partial scans often contain such garbage. The code is stripped,
    the value is kept verbatim. A repeated code keeps its last value.
    """
    fields: dict[str, str] = {}
    for segment in raw_text.split(FIELD_SEPARATOR):
        if not segment:
            continue
        colon = segment.find(CODE_SEPARATOR)
        if colon <= 0:
            continue
        fields[segment[:colon].strip()] = segment[colon + 1:]
    return fields
