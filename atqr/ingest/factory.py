from atqr.config.settings import Settings
from atqr.ingest.base import BaseDetector
from atqr.ingest.jsonl_detector import JsonLinesDetector


class DetectorFactory:
    """Creates the configured detector adapter."""

    ENGINES = ("jsonl",)

    @classmethod
    def create(cls, settings: Settings) -> BaseDetector:
        engine = settings.detector_engine.lower()
        if engine == "jsonl":
            return JsonLinesDetector(settings.detections_path)
        raise ValueError(
            f"Unknown detector engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
