"""Logging utilities for the application."""

from __future__ import annotations
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
import traceback
from typing import Dict, List, Optional

from .config.settings import settings


LOG_TYPES = ("system", "error")


def logs_dir() -> Path:
    """Get the logs directory path."""
    log_dir = Path(settings.logs_dir or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _rotating_handler(path: Path, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


class LogManager:
    """Manager for application logs."""

    def __init__(self, log_dir: Optional[Path] = None):
        """Initialize loggers."""
        self.log_dir = log_dir or logs_dir()
        self.loggers: Dict[str, logging.Logger] = {}
        self._setup_loggers()

    def _setup_loggers(self):
        """Set up the package, system and error loggers."""
        level = getattr(logging, settings.log_level.upper(), logging.INFO)

        # Module-level loggers (logging.getLogger(__name__)) all live under "farmacia".
        # It shares one system.log handler with "farmacia.system" so rotation happens once.
        package_logger = logging.getLogger("farmacia")
        system_logger = logging.getLogger("farmacia.system")
        if not package_logger.handlers:
            system_handler = _rotating_handler(
                self.log_dir / "system.log",
                '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            )
            package_logger.addHandler(system_handler)
            package_logger.setLevel(level)
            if not system_logger.handlers:
                system_logger.addHandler(system_handler)
        system_logger.propagate = False
        system_logger.setLevel(level)
        self.loggers["system"] = system_logger

        error_logger = logging.getLogger("farmacia.error")
        error_logger.propagate = False
        error_logger.setLevel(logging.ERROR)
        if not error_logger.handlers:
            error_logger.addHandler(_rotating_handler(
                self.log_dir / "error.log",
                '%(asctime)s - %(levelname)s - %(message)s\n%(pathname)s:%(lineno)d',
            ))
        self.loggers["error"] = error_logger

    def log_system(self, message: str, level: str = "INFO"):
        """Log a system message."""
        if level == "INFO":
            self.loggers["system"].info(message)
        elif level == "WARNING":
            self.loggers["system"].warning(message)
        elif level == "ERROR":
            self.loggers["system"].error(message)
            self.loggers["error"].error(f"SYSTEM: {message}")
        elif level == "DEBUG":
            self.loggers["system"].debug(message)

    def log_error(self, message: str, exception: Optional[BaseException] = None):
        """Log an error with optional exception details."""
        if exception is not None:
            tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
            self.loggers["error"].error(f"{message}\n{tb}")
        else:
            self.loggers["error"].error(message)

    def read_logs(self, log_type: str, max_lines: int = 1000, search_text: str = None, level_filter: str = None) -> List[Dict]:
        """Read logs from the specified log file with optional filtering."""
        log_file = self.log_dir / f"{log_type}.log"

        if not log_file.exists():
            return []

        try:
            with open(log_file, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as e:
            return [{
                "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                "level": "ERROR",
                "message": f"Failed to read log file: {str(e)}"
            }]

        lines = lines[-max_lines:]

        processed_logs = []
        for line in lines:
            # '2026-03-10 12:34:56,789 - INFO - message'
            # or '2026-03-10 12:34:56,789 - INFO - farmacia.module - message'
            parts = line.split(" - ", 3)
            if len(parts) >= 3:
                timestamp = parts[0]
                level = parts[1]
                message = parts[-1]

                if search_text and search_text.lower() not in line.lower():
                    continue
                if level_filter and level.strip() != level_filter:
                    continue

                processed_logs.append({
                    "timestamp": timestamp.strip(),
                    "level": level.strip(),
                    "message": message.strip()
                })
            elif processed_logs:
                # Continuation line (tracebacks, pathname suffix)
                processed_logs[-1]["message"] += "\n" + line.strip()

        # Newest first
        return list(reversed(processed_logs))


_log_manager: Optional[LogManager] = None


def get_log_manager() -> LogManager:
    """Get the log manager instance, creating it on first use."""
    global _log_manager
    if _log_manager is None:
        _log_manager = LogManager()
    return _log_manager


def log_system(message: str, level: str = "INFO"):
    """Log a system message."""
    get_log_manager().log_system(message, level)


def log_error(message: str, exception: Optional[BaseException] = None):
    """Log an error with optional exception details."""
    get_log_manager().log_error(message, exception)


def read_logs(log_type: str, max_lines: int = 1000, search_text: str = None, level_filter: str = None) -> List[Dict]:
    """Read logs from the specified log file with optional filtering."""
    return get_log_manager().read_logs(log_type, max_lines, search_text, level_filter)
