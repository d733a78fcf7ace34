"""
Logging system for archhint.

Tracks schema loading, completion requests and the decisions taken while
synthesizing suggestions. Nothing is written to stdout, which the stdio
service reserves for the protocol.

Logs are organized in date-stamped folders with separate files for each
log level:
  logs/YYYY-MM-DD/debug.log
  logs/YYYY-MM-DD/info.log
  logs/YYYY-MM-DD/warning.log
  logs/YYYY-MM-DD/error.log
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence


class ArchHintLogger:
    """Centralized logger for engine behavior and decisions."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.logger = logging.getLogger("archhint")
            self.json_mode = False
            self.log_dir = None
            self._initialized = True

    def _get_default_log_dir(self) -> Path:
        """Get the default log directory path with today's date."""
        today = datetime.now().strftime("%Y-%m-%d")
        return Path("logs") / today

    def configure(
        self,
        level: str = "INFO",
        log_dir: Optional[str] = None,
        json_mode: bool = False,
        enable_logging: bool = True,
    ):
        """
        Configure logging output.

        Args:
            level: DEBUG, INFO, WARNING, ERROR (minimum level to log)
            log_dir: Optional directory for logs (default: logs/YYYY-MM-DD/)
            json_mode: Use JSON format for structured parsing
            enable_logging: Enable file logging (default: True)
        """
        if not enable_logging:
            return

        self.json_mode = json_mode
        self.logger.handlers.clear()
        self.logger.setLevel(logging.DEBUG)

        if log_dir:
            self.log_dir = Path(log_dir)
        else:
            self.log_dir = self._get_default_log_dir()

        self.log_dir.mkdir(parents=True, exist_ok=True)

        if json_mode:
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(component)-8s] %(message)s',
                datefmt='%H:%M:%S'
            )

        min_level = getattr(logging, level.upper(), logging.INFO)

        log_levels = [
            (logging.DEBUG, 'debug.log'),
            (logging.INFO, 'info.log'),
            (logging.WARNING, 'warning.log'),
            (logging.ERROR, 'error.log'),
        ]

        for log_level, filename in log_levels:
            if log_level >= min_level:
                handler = logging.FileHandler(self.log_dir / filename, mode='a', encoding='utf-8')
                handler.setLevel(log_level)
                handler.setFormatter(formatter)
                # exact level only
                handler.addFilter(lambda record, level=log_level: record.levelno == level)
                self.logger.addHandler(handler)

    def get_log_directory(self) -> Optional[Path]:
        """Get the current log directory path."""
        return self.log_dir

    def _log(self, level: str, component: str, msg: str, **data):
        """Core logging with structured data."""
        extra = {'component': component, **data}
        getattr(self.logger, level)(msg, extra=extra)

    # === SCHEMA ===

    def schema_loaded(self, path: str, root_properties: int):
        self._log('info', 'SCHEMA', f"Loaded {path} ({root_properties} root properties)",
                  path=path, root_properties=root_properties)

    def schema_failed(self, path: str, reason: str):
        self._log('error', 'SCHEMA', f"Failed to load {path}: {reason}",
                  path=path, reason=reason)

    # === COMPLETION ===

    def completion_request(self, line: int, character: int, trigger: Optional[str]):
        self._log('debug', 'ENGINE', f"Request at {line}:{character} (trigger={trigger!r})",
                  line=line, character=character, trigger=trigger)

    def structural_position(self, indent: int, parent_path: Optional[Sequence[str]], used: Sequence[str]):
        parent = '.'.join(parent_path) if parent_path else '<root>'
        self._log('debug', 'RESOLVER', f"indent={indent} parent={parent} used={sorted(used)}",
                  indent=indent, parent_path=list(parent_path or []))

    def node_identifiers(self, identifiers: Sequence[str]):
        self._log('debug', 'INDEX', f"Node identifiers: {list(identifiers)}",
                  count=len(identifiers))

    def dispatch(self, decision: str, reason: str):
        self._log('debug', 'DISPATCH', f"{decision}: {reason}",
                  decision=decision, reason=reason)

    def suggestions(self, branch: str, count: int):
        self._log('info', 'ENGINE', f"{count} suggestions ({branch})",
                  branch=branch, count=count)

    # === ERRORS & WARNINGS ===

    def error(self, component: str, message: str, exception: Optional[Exception] = None):
        import traceback

        error_details = message
        if exception:
            tb_str = ''.join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            error_details = f"{message}\n{tb_str}"

        self._log('error', component.upper(), f"ERROR: {error_details}",
                  error=str(exception) if exception else message)

    def warning(self, component: str, message: str):
        self._log('warning', component.upper(), f"WARNING: {message}")


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for machine parsing."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            'time': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'component': getattr(record, 'component', 'SYSTEM'),
            'message': record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k not in {'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
                        'filename', 'module', 'exc_info', 'exc_text', 'stack_info',
                        'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
                        'thread', 'threadName', 'processName', 'process', 'message',
                        'component', 'asctime', 'taskName'}:
                data[k] = v
        return json.dumps(data, default=str)


# Global instance
logger = ArchHintLogger()
