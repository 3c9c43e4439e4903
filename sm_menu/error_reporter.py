#!/usr/bin/env python3
"""
sm-menu Crash Report Writer
Local-only crash reports for failures that escape the dispatch loop,
scrubbed of personal data before they touch the disk.
"""

import re
import json
import time
import hashlib
import traceback
import platform
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass
from pathlib import Path
from datetime import datetime
from rich.markup import escape

DEFAULT_REPORT_DIR = Path.home() / ".sm-menu" / "crashes"


@dataclass
class ErrorReport:
    """A single crash report"""
    error_type: str
    message: str
    traceback: str
    module: str
    timestamp: str
    system_info: Dict[str, str]
    error_hash: str

    def render(self) -> str:
        return (
            f"Error Type: {self.error_type}\n"
            f"Module: {self.module}\n"
            f"Time: {self.timestamp}\n"
            f"Hash: {self.error_hash}\n"
            f"System: {self.system_info}\n"
            f"\nMessage:\n{self.message}\n"
            f"\nTraceback:\n{self.traceback}\n"
        )


class DataSanitizer:
    """Scrubs personal data out of report text"""

    PATTERNS = [
        (r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b', '[EMAIL]'),
        (r'(?:password|passwd|token|secret|api[_-]?key)["\s:=]+[^\s,;}\]]+', '[CREDENTIAL]'),
        (r'/home/[^/\s]+', '/home/[USER]'),
        (r'/Users/[^/\s]+', '/Users/[USER]'),
        (r'C:\\Users\\[^\\\s]+', r'C:\\Users\\[USER]'),
    ]

    def __init__(self):
        self._patterns = [(re.compile(p, re.IGNORECASE), r) for p, r in self.PATTERNS]

    def sanitize(self, text: str) -> str:
        if not text:
            return text
        result = str(text)
        for pattern, replacement in self._patterns:
            result = pattern.sub(replacement, result)
        return result


class ErrorLogger:
    """Writes crash reports once per distinct error"""

    INDEX_FILE = "reported.json"

    def __init__(self, log_dir=None):
        self.log_dir = Path(log_dir) if log_dir else DEFAULT_REPORT_DIR
        self.sanitizer = DataSanitizer()
        self._reported = self._load_reported()

    def _load_reported(self) -> set:
        hash_file = self.log_dir / self.INDEX_FILE
        if hash_file.exists():
            try:
                with open(hash_file) as f:
                    return set(json.load(f).get('hashes', []))
            except (OSError, ValueError):
                return set()
        return set()

    def _save_reported(self):
        with open(self.log_dir / self.INDEX_FILE, 'w') as f:
            json.dump({'hashes': sorted(self._reported)[-100:]}, f)

    @staticmethod
    def _compute_hash(error_type: str, message: str) -> str:
        content = f"{error_type}:{message[:100]}"
        return hashlib.sha256(content.encode()).hexdigest()[:12]

    @staticmethod
    def _get_system_info() -> Dict[str, str]:
        return {
            'python': platform.python_version(),
            'os': platform.system(),
            'arch': platform.machine(),
        }

    def prepare_report(self, exception: BaseException, module: str = "unknown") -> ErrorReport:
        """
        Build a sanitized report for an exception

        Args:
            exception: The failure to describe
            module: Where it happened

        Returns:
            ErrorReport with a 12 hex digit hash of type and message
        """
        error_type = type(exception).__name__
        message = str(exception)
        tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))

        return ErrorReport(
            error_type=error_type,
            message=self.sanitizer.sanitize(message),
            traceback=self.sanitizer.sanitize(tb),
            module=module,
            timestamp=datetime.now().isoformat(),
            system_info=self._get_system_info(),
            error_hash=self._compute_hash(error_type, message)
        )

    def log_error(self, error: ErrorReport) -> Tuple[bool, str]:
        """
        Write the report unless the same error was already written

        Returns:
            (written, path or reason)
        """
        if error.error_hash in self._reported:
            return False, "Already logged"

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"error_{error.error_hash}.log"
            log_file.write_text(error.render())

            self._reported.add(error.error_hash)
            self._save_reported()
        except OSError as e:
            return False, f"Failed: {e}"

        return True, str(log_file)

    def list_errors(self, limit: int = 10) -> List[Path]:
        """Most recent reports first"""
        if not self.log_dir.exists():
            return []
        logs = sorted(self.log_dir.glob("error_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
        return logs[:limit]

    def view_error(self, error_hash: str) -> Optional[str]:
        log_file = self.log_dir / f"error_{error_hash}.log"
        if log_file.exists():
            return log_file.read_text()
        return None

    def clear_old_logs(self, days: int = 30) -> int:
        """Delete reports older than `days`; returns how many were removed"""
        cutoff = time.time() - (days * 86400)
        removed = 0
        for log_file in self.log_dir.glob("error_*.log"):
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                removed += 1
        return removed


def report_fatal_error(exception: BaseException, module: str = "unknown", console=None,
                       reporter: Optional[ErrorLogger] = None) -> Optional[str]:
    """
    Record a fatal failure without asking the user anything

    Returns:
        Path of the written report, or None if nothing was written
    """
    if console is None:
        from rich.console import Console
        console = Console(stderr=True)

    reporter = reporter or ErrorLogger()
    report = reporter.prepare_report(exception, module)

    console.print(f"\n[bold magenta]💥 Fatal error: {report.error_type}[/bold magenta]")
    console.print(f"[dim]{escape(report.message[:100])}[/dim]")

    written, detail = reporter.log_error(report)
    if written:
        console.print(f"[dim]Crash report saved to: {escape(detail)}[/dim]")
        return detail
    return None
