from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""
    ERROR = 0
    WARNING = 1
    INFO = 2
    TRACE = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse a level name such as "info" or "DEBUG"."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown log level '{value}' (expected one of: {valid})") from None
