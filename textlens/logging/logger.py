import logging
import sys

_LIBRARY_LOGGERS = ("httpx", "openai", "PIL", "pytesseract")


class Log:
    """Centralized logging for the pipeline; everything goes to stderr."""

    _logger: logging.Logger = logging.getLogger("textlens")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach the stderr handler once and quiet chatty libraries.

        Library loggers stay at WARNING unless the pipeline runs at DEBUG, so
        per-request httpx lines and Pillow plugin probes do not drown the output.
        """
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{log_level}'")
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
        for name in _LIBRARY_LOGGERS:
            logging.getLogger(name).setLevel(library_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message; used for prompts and raw backend responses."""
        cls._logger.debug(message, extra=kwargs)
