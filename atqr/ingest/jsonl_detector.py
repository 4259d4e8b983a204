import json
from pathlib import Path
from typing import Any

from atqr.ingest.base import BaseDetector
from atqr.ingest.exceptions import DetectorError
from atqr.ingest.models import Detection, content_hash
from atqr.logging.logger import Log


class JsonLinesDetector(BaseDetector):
    """Reads precomputed detector output: one JSON object per line.

    Each object carries "text" and "source_file", and optionally "hash".
    A missing hash is computed from the text.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def detect(self) -> list[Detection]:
        try:
            lines = self._path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise DetectorError(f"Cannot read detections from {self._path}: {exc}") from exc
        detections: list[Detection] = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            detections.append(self._parse_line(line, number))
        Log.info(f"Read {len(detections)} detections from {self._path}")
        return detections

    def _parse_line(self, line: str, number: int) -> Detection:
        try:
            raw: Any = json.loads(line)
        except json.JSONDecodeError as exc:
            raise DetectorError(f"Line {number}: invalid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise DetectorError(f"Line {number}: expected a JSON object")
        text = raw.get("text")
        if not isinstance(text, str):
            raise DetectorError(f"Line {number}: 'text' must be a string")
        source_file = raw.get("source_file")
        if not source_file or not isinstance(source_file, str):
            raise DetectorError(f"Line {number}: 'source_file' must be a non-empty string")
        digest = raw.get("hash")
        if digest is None:
            digest = content_hash(text)
        elif not isinstance(digest, str) or not digest:
            raise DetectorError(f"Line {number}: 'hash' must be a non-empty string")
        return Detection(text=text, content_hash=digest, source_file=source_file)
