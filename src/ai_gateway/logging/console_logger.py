import sys
from datetime import datetime
from typing import Any, TextIO

from ai_gateway.logging.log_level import LogLevel
from ai_gateway.logging.logger import Logger


class ConsoleLogger(Logger):
    """Logger that writes to stderr with optional timestamps, level prefixes and key=value context."""

    LEVEL_COLORS = {
        LogLevel.ERROR: "\033[91m",    # Red
        LogLevel.WARNING: "\033[93m",  # Yellow
        LogLevel.INFO: "\033[0m",      # Default
        LogLevel.TRACE: "\033[96m",    # Cyan
        LogLevel.DEBUG: "\033[90m",    # Gray
    }
    RESET = "\033[0m"

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        show_timestamp: bool = False,
        show_level: bool = True,
        use_colors: bool = True,
        stream: TextIO | None = None,
    ):
        super().__init__(level)
        self.show_timestamp = show_timestamp
        self.show_level = show_level
        self.use_colors = use_colors
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so test runners that swap sys.stderr still capture output
        return self._stream if self._stream is not None else sys.stderr

    @staticmethod
    def format_context(context: dict[str, Any]) -> str:
        return " ".join(f"{key}={value}" for key, value in context.items())

    def _write(self, level: LogLevel, message: str, **context: Any) -> None:
        parts = []

        if self.show_timestamp:
            parts.append(datetime.now().strftime("[%H:%M:%S]"))

        if self.show_level:
            parts.append(f"[{level.name}]")

        parts.append(message)
        rendered_context = self.format_context(context)
        if rendered_context:
            parts.append(f"({rendered_context})")
        output = " ".join(parts)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(level, self.RESET)
            output = f"{color}{output}{self.RESET}"

        print(output, file=self.stream)
