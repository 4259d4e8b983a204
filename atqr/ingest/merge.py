from collections.abc import Iterable

from atqr.ingest.models import Detection, RawPayload


def merge_payloads(items: Iterable[Detection | RawPayload]) -> list[RawPayload]:
    """Collapse payloads sharing a content hash into one, ordered by hash.

    The text of the first occurrence is kept. Source files are appended in
    first-seen order without repeats. Must run to completion before the
    merged payloads are handed to validation.
    """
    texts: dict[str, str] = {}
    sources: dict[str, list[str]] = {}
    for item in items:
        files = (item.source_file,) if isinstance(item, Detection) else item.source_files
        known = sources.get(item.content_hash)
        if known is None:
            texts[item.content_hash] = item.text
            known = sources[item.content_hash] = []
        for path in files:
            if path not in known:
                known.append(path)
    return [
        RawPayload(text=texts[digest], content_hash=digest, source_files=tuple(sources[digest]))
        for digest in sorted(texts)
    ]
