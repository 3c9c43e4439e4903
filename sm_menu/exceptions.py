#!/usr/bin/env python3
"""
sm-menu Exception Hierarchy
Every fallible menu operation raises a CliError subclass; the dispatch loop
is the single place that catches and renders them.
"""

from enum import Enum


class ErrorSeverity(Enum):
    """Display-only classification of an error"""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


SEVERITY_ICONS = {
    ErrorSeverity.WARNING: "⚠️",
    ErrorSeverity.ERROR: "❌",
    ErrorSeverity.CRITICAL: "💥",
}


class CliError(Exception):
    """Base exception for all sm-menu errors"""

    severity = ErrorSeverity.ERROR

    def __init__(self, message, code=None, details=None):
        self.message = message
        self.code = code or "UNKNOWN_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    @property
    def icon(self):
        """Icon shown next to the error message"""
        return SEVERITY_ICONS[self.severity]

    def to_dict(self):
        """Convert exception to dict for logging/output"""
        return {
            "error": self.code,
            "severity": self.severity.value,
            "message": self.message,
            "details": self.details
        }


class InvalidCommandError(CliError):
    """Raised when no command in the current menu matches the input"""
    severity = ErrorSeverity.WARNING

    def __init__(self, command):
        self.command = command
        super().__init__(f"Invalid command: '{command}'", "INVALID_COMMAND", {"command": command})


class InvalidInputError(CliError):
    """Raised when an argument has an invalid format or content"""
    severity = ErrorSeverity.WARNING

    def __init__(self, reason):
        super().__init__(f"Invalid input: {reason}", "INVALID_INPUT", {"reason": reason})


class CliIOError(CliError):
    """Generic wrapper for I/O failures that have no dedicated kind"""

    def __init__(self, reason, errno=None):
        details = {"reason": str(reason)}
        if errno is not None:
            details["errno"] = errno
        super().__init__(f"IO error: {reason}", "IO_ERROR", details)


class EmptyInputError(CliError):
    """Raised when input was required but none was given"""
    severity = ErrorSeverity.WARNING

    def __init__(self):
        super().__init__("Empty input provided", "EMPTY_INPUT")


class TooManyArgumentsError(CliError):
    """Raised when a command receives more arguments than it accepts"""
    severity = ErrorSeverity.WARNING

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Too many arguments: expected {expected}, found {found}",
            "TOO_MANY_ARGUMENTS",
            {"expected": expected, "found": found}
        )


class TooFewArgumentsError(CliError):
    """Raised when a command receives fewer arguments than it requires"""
    severity = ErrorSeverity.WARNING

    def __init__(self, expected, found):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Too few arguments: expected {expected}, found {found}",
            "TOO_FEW_ARGUMENTS",
            {"expected": expected, "found": found}
        )


class ExecutionError(CliError):
    """Raised when a command fails while performing its effect"""

    def __init__(self, reason):
        super().__init__(f"Command execution failed: {reason}", "EXECUTION_ERROR", {"reason": reason})


class PermissionDeniedError(CliError):
    """Raised when access to a resource is refused"""

    def __init__(self, resource):
        super().__init__(f"Permission denied: {resource}", "PERMISSION_DENIED", {"resource": resource})


class MissingFileError(CliError):
    """Raised when a file does not exist"""

    def __init__(self, path):
        super().__init__(f"File not found: {path}", "FILE_NOT_FOUND", {"path": path})


class InvalidFileFormatError(CliError):
    """Raised when file content cannot be understood"""

    def __init__(self, reason):
        super().__init__(f"Invalid file format: {reason}", "INVALID_FILE_FORMAT", {"reason": reason})


class OperationInterruptedError(CliError):
    """Raised when the user interrupts an operation"""

    def __init__(self):
        super().__init__("Operation interrupted by user", "INTERRUPTED")


class TerminalError(CliError):
    """Raised when a terminal operation fails"""

    def __init__(self, reason):
        super().__init__(f"Terminal error: {reason}", "TERMINAL_ERROR", {"reason": reason})


class InternalError(CliError):
    """Raised on broken invariants; should not occur in normal operation"""
    severity = ErrorSeverity.CRITICAL

    def __init__(self, reason):
        super().__init__(f"Internal error: {reason} (please report this bug)", "INTERNAL_ERROR", {"reason": reason})


class OtherError(CliError):
    """Generic error with context"""

    def __init__(self, reason):
        super().__init__(f"Error: {reason}", "OTHER", {"reason": reason})


class ConfigurationError(CliError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message, config_key=None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIG_ERROR", details)


def from_os_error(exc):
    """
    Map a lower-level OSError onto the CliError taxonomy

    Args:
        exc: OSError raised by a filesystem or terminal call

    Returns:
        The matching CliError instance (not raised)
    """
    target = str(exc.filename) if exc.filename else (exc.strerror or str(exc))
    if isinstance(exc, FileNotFoundError):
        return MissingFileError(target)
    if isinstance(exc, PermissionError):
        return PermissionDeniedError(target)
    if isinstance(exc, InterruptedError):
        return OperationInterruptedError()
    return CliIOError(exc.strerror or str(exc), errno=exc.errno)
