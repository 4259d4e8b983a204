import hashlib
from dataclasses import dataclass


def content_hash(text: str) -> str:
    """SHA-256 hex digest of the UTF-8 bytes of a decoded QR payload."""
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


@dataclass(frozen=True)
class Detection:
    """One QR symbol decoded by a detector from one source file."""

    text: str
    content_hash: str
    source_file: str


@dataclass(frozen=True)
class RawPayload:
    """A unique QR payload with every file it was found in."""

    text: str
    content_hash: str
    source_files: tuple[str, ...] = ()
