#!/usr/bin/env python3
"""
sm-menu Logging System
Centralized logging with file rotation; the console only sees warnings
and above so log output does not interleave with the menu.
"""

import logging
import os
import time
from logging.handlers import RotatingFileHandler
from datetime import datetime
from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler


DEFAULT_LOGS_DIR = Path.home() / ".sm-menu" / "logs"


class SmMenuLogger:
    """Centralized logging system for sm-menu"""

    _instance = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, logs_dir=None):
        if SmMenuLogger._initialized:
            return

        self.console = Console(stderr=True)
        self.logs_dir = Path(logs_dir) if logs_dir else DEFAULT_LOGS_DIR

        # Create main logger
        self.logger = logging.getLogger("sm_menu")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers.clear()

        # File handler with rotation, skipped when the directory is not writable
        try:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.logs_dir / f"sm_menu_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5
            )
        except OSError:
            file_handler = None

        if file_handler is not None:
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

        console_handler = RichHandler(console=self.console, show_level=True, show_time=False)
        console_handler.setLevel(logging.WARNING)
        self.logger.addHandler(console_handler)

        SmMenuLogger._initialized = True

    def get_logger(self, name=None):
        """Get a logger instance"""
        if name:
            return logging.getLogger(f"sm_menu.{name}")
        return self.logger

    def debug(self, message, **kwargs):
        """Log debug message"""
        self.logger.debug(message, **kwargs)

    def info(self, message, **kwargs):
        """Log info message"""
        self.logger.info(message, **kwargs)

    def warning(self, message, **kwargs):
        """Log warning message"""
        self.logger.warning(message, **kwargs)

    def error(self, message, **kwargs):
        """Log error message"""
        self.logger.error(message, **kwargs)

    def critical(self, message, **kwargs):
        """Log critical message"""
        self.logger.critical(message, **kwargs)

    def set_level(self, level):
        """Set logging level"""
        self.logger.setLevel(level)

    def clear_old_logs(self, days=7):
        """Clear logs older than specified days"""
        current_time = time.time()
        for log_file in self.logs_dir.glob("*.log*"):
            if os.path.getmtime(log_file) < current_time - days * 86400:
                try:
                    os.remove(log_file)
                    self.info(f"Removed old log file: {log_file}")
                except OSError as e:
                    self.error(f"Failed to remove old log file: {e}")


# Singleton instance
logger = SmMenuLogger()
