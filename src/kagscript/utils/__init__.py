"""Utility modules for kagscript.

Provides:
- logger: get_logger for module loggers, enable_logging for quick debugging
"""

from kagscript.utils.logger import enable_logging, get_logger

__all__ = ["enable_logging", "get_logger"]
