"""
Utilities module - logging.
"""

from archhint.utils.logger import ArchHintLogger, JsonFormatter, logger

__all__ = ["ArchHintLogger", "JsonFormatter", "logger"]
