from ai_gateway.logging.log_level import LogLevel
from ai_gateway.logging.logger import Logger
from ai_gateway.logging.console_logger import ConsoleLogger
from ai_gateway.logging.memory_logger import LogRecord, MemoryLogger
from ai_gateway.logging.logger_registry import LoggerRegistry, get_logger

__all__ = [
    "LogLevel",
    "Logger",
    "ConsoleLogger",
    "LogRecord",
    "MemoryLogger",
    "LoggerRegistry",
    "get_logger",
]
