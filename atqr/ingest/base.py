from abc import ABC, abstractmethod

from atqr.ingest.models import Detection


class BaseDetector(ABC):
    """Contract for all QR detector adapters."""

    @abstractmethod
    def detect(self) -> list[Detection]:
        """Return every QR payload found, one Detection per symbol per file.

        Returns:
            Detections in discovery order; the same payload may appear
            several times, from one or more source files.

        Raises:
            DetectorError: if the detector output cannot be read.
        """
