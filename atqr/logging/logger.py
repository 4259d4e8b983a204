import logging
import sys
from pathlib import Path

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Centralized logging for the extractor: console plus optional log file."""

    _logger: logging.Logger = logging.getLogger("atqr")

    @classmethod
    def configure(cls, log_level: str, log_file: Path | None = None) -> None:
        """Set the level and attach the stdout handler (and file handler) once."""
        cls._logger.setLevel(log_level.upper())
        formatter = logging.Formatter(_FORMAT)
        if not any(type(h) is logging.StreamHandler for h in cls._logger.handlers):
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            cls._logger.addHandler(console)
        if log_file is not None and not any(
            isinstance(h, logging.FileHandler) for h in cls._logger.handlers
        ):
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            cls._logger.addHandler(file_handler)

    @classmethod
    def shutdown(cls) -> None:
        """Flush and detach all handlers."""
        for handler in list(cls._logger.handlers):
            handler.flush()
            handler.close()
            cls._logger.removeHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
