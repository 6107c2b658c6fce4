from dataclasses import dataclass, field
from typing import Any

from ai_gateway.logging.log_level import LogLevel
from ai_gateway.logging.logger import Logger


@dataclass(frozen=True)
class LogRecord:
    level: LogLevel
    message: str
    context: dict[str, Any] = field(default_factory=dict)


class MemoryLogger(Logger):
    """Logger that keeps records in memory instead of printing them."""

    def __init__(self, level: LogLevel = LogLevel.DEBUG):
        super().__init__(level)
        self.records: list[LogRecord] = []

    def _write(self, level: LogLevel, message: str, **context: Any) -> None:
        self.records.append(LogRecord(level=level, message=message, context=dict(context)))

    def at_level(self, level: LogLevel) -> list[LogRecord]:
        return [record for record in self.records if record.level == level]

    def clear(self) -> None:
        self.records.clear()
