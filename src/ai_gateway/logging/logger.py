from abc import ABC, abstractmethod
from typing import Any, Optional

from ai_gateway.logging.log_level import LogLevel


class Logger(ABC):
    """Abstract base for all loggers.

    Keyword arguments passed to the level methods become structured context
    (model id, token counts, cost). Context values that are None are dropped
    before they reach an implementation.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO):
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel):
        self._level = value

    def should_log(self, level: LogLevel) -> bool:
        return level <= self._level

    @abstractmethod
    def _write(self, level: LogLevel, message: str, **context: Any) -> None:
        """Write one record. Implementations must override this."""

    def log(self, level: LogLevel, message: str, **context: Any) -> None:
        if self.should_log(level):
            self._write(level, message, **{key: value for key, value in context.items() if value is not None})

    def gateway_error(self, error: Exception, message: Optional[str] = None, **context: Any) -> None:
        """Log a failure at ERROR, tagged with the error's kind and model id when it has them."""
        kind = getattr(error, "kind", None)
        context.setdefault("model_id", getattr(error, "model_id", None))
        context.setdefault("kind", kind.value if kind is not None else None)
        self.log(LogLevel.ERROR, message or str(error), **context)

    def error(self, message: str, **context: Any) -> None:
        self.log(LogLevel.ERROR, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self.log(LogLevel.WARNING, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self.log(LogLevel.INFO, message, **context)

    def trace(self, message: str, **context: Any) -> None:
        self.log(LogLevel.TRACE, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, **context)
