from contextlib import contextmanager
from typing import Iterator, Optional

from ai_gateway.logging.log_level import LogLevel
from ai_gateway.logging.logger import Logger
from ai_gateway.logging.console_logger import ConsoleLogger


class LoggerRegistry:
    """Global registry for the active logger instance."""

    _instance: Optional[Logger] = None

    @classmethod
    def get(cls) -> Logger:
        """Get the current logger, creating a default ConsoleLogger if none set."""
        if cls._instance is None:
            cls._instance = ConsoleLogger(level=LogLevel.INFO)
        return cls._instance

    @classmethod
    def set(cls, logger: Logger) -> None:
        cls._instance = logger

    @classmethod
    def configure(cls, level: LogLevel, show_timestamp: bool = False) -> Logger:
        """
        Apply startup logging settings.

        A console logger is (re)created; any other logger installed by the
        embedding application is kept and only its level is changed.
        """
        if cls._instance is None or isinstance(cls._instance, ConsoleLogger):
            cls._instance = ConsoleLogger(level=level, show_timestamp=show_timestamp)
        else:
            cls._instance.level = level
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset to no logger (next get() will create default)."""
        cls._instance = None

    @classmethod
    @contextmanager
    def use(cls, logger: Logger) -> Iterator[Logger]:
        """Temporarily install a logger, restoring the previous one on exit."""
        previous = cls._instance
        cls._instance = logger
        try:
            yield logger
        finally:
            cls._instance = previous


def get_logger() -> Logger:
    """Convenience function to get the current logger."""
    return LoggerRegistry.get()
