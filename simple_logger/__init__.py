"""Leveled logging facade over a line sink."""

from core.errors import InvalidLevelError, LoggerPanic
from core.levels import Level, display_name, parse_level
from core.writer import Decoration, LineSink, LineWriter
from logger import STD_LOGGER, Logger, get_logger, new_logger

__version__ = "0.1.0"

__all__ = [
    "Decoration",
    "InvalidLevelError",
    "Level",
    "LineSink",
    "LineWriter",
    "Logger",
    "LoggerPanic",
    "STD_LOGGER",
    "display_name",
    "get_logger",
    "new_logger",
    "parse_level",
]
