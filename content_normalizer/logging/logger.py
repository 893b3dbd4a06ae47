import logging
import sys


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("content_normalizer")
    _format = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, log_file: str | None = None) -> None:
        """Configure the logger with the specified level, a stdout handler and an optional file."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(cls._format))
            cls._logger.addHandler(handler)
            if log_file:
                file_handler = logging.FileHandler(log_file, encoding="utf-8")
                file_handler.setFormatter(logging.Formatter(cls._format))
                cls._logger.addHandler(file_handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def critical(cls, message: str, **kwargs: object) -> None:
        """Log a critical message."""
        cls._logger.critical(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def is_verbose(cls) -> bool:
        """True when debug output is enabled."""
        return cls._logger.isEnabledFor(logging.DEBUG)
