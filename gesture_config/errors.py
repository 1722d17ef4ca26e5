"""
Error handling for gesture configuration loading.

Errors carry a structured code so callers can tell fatal startup failures
(no home directory, broken installation, unparsable initial config) apart
from runtime failures that only degrade hot-reload.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any, Union


class ErrorCode(Enum):
    """
    Error codes for gesture configuration loading.

    Custom codes:
    - 1100-1199: Configuration errors
    - 1200-1299: File system errors
    - 1500-1599: Watcher/state errors
    """

    # Configuration errors (1100-1199)
    DOCUMENT_INVALID = 1100

    # File system errors (1200-1299)
    HOME_UNRESOLVABLE = 1200
    DEFAULT_CONFIG_MISSING = 1201
    FILE_WRITE_ERROR = 1202

    # Watcher/state errors (1500-1599)
    WATCH_UNAVAILABLE = 1500

    @property
    def is_fatal(self) -> bool:
        """Whether this kind of error must abort daemon startup."""
        return self in _FATAL_CODES


_FATAL_CODES = frozenset({
    ErrorCode.DOCUMENT_INVALID,
    ErrorCode.HOME_UNRESOLVABLE,
    ErrorCode.DEFAULT_CONFIG_MISSING,
    ErrorCode.FILE_WRITE_ERROR,
})

BUG_REPORT_SUGGESTION = "Please file a bug report including your environment details"


class ConfigError(Exception):
    """Base exception for gesture configuration errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize configuration error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    @property
    def is_fatal(self) -> bool:
        return self.code.is_fatal

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result

    def user_message(self) -> str:
        """Message plus suggestion, as printed at the process entry point."""
        if self.suggestion:
            return f"{self.message}\n{self.suggestion}"
        return self.message


class HomeUnresolvable(ConfigError):
    """Neither $HOME nor the account database yields a home directory."""

    def __init__(self, reason: str):
        super().__init__(
            code=ErrorCode.HOME_UNRESOLVABLE,
            message=f"Error getting your home directory path ({reason})",
            suggestion=BUG_REPORT_SUGGESTION,
            context={"reason": reason}
        )


class DefaultConfigMissing(ConfigError):
    """The system default configuration file is not installed."""

    def __init__(self, file_path: Union[str, Path]):
        super().__init__(
            code=ErrorCode.DEFAULT_CONFIG_MISSING,
            message=f"File {file_path} not found",
            suggestion="Reinstall the gesture daemon to solve this issue",
            context={"file_path": str(file_path)}
        )


class BootstrapFailed(ConfigError):
    """Copying the system default into the user config directory failed."""

    def __init__(self, file_path: Union[str, Path], reason: str):
        super().__init__(
            code=ErrorCode.FILE_WRITE_ERROR,
            message=f"Failed to create configuration file {file_path}: {reason}",
            suggestion="Check permissions and free space in your home directory",
            context={"file_path": str(file_path), "reason": reason}
        )


class DocumentInvalid(ConfigError):
    """Configuration file is unreadable or not well-formed XML."""

    def __init__(
        self,
        file_path: Union[str, Path],
        reason: str,
        line_number: Optional[int] = None,
        column: Optional[int] = None
    ):
        """
        Initialize document error.

        Args:
            file_path: Path to configuration file
            reason: Underlying parser or I/O diagnostic
            line_number: Line of the XML error, when known
            column: Column of the XML error, when known
        """
        context: Dict[str, Any] = {"file_path": str(file_path), "reason": reason}
        if line_number:
            context["line_number"] = line_number
        if column is not None:
            context["column"] = column

        super().__init__(
            code=ErrorCode.DOCUMENT_INVALID,
            message=f"Error parsing configuration file {file_path}: {reason}",
            suggestion="Check the file syntax",
            context=context
        )


class WatchUnavailable(ConfigError):
    """The filesystem watch could not be initialized or registered."""

    def __init__(self, file_path: Union[str, Path], reason: str):
        super().__init__(
            code=ErrorCode.WATCH_UNAVAILABLE,
            message=(
                "It was not possible to monitor your configuration file for changes: "
                f"{reason}"
            ),
            suggestion=(
                "Your configuration will not be reloaded automatically when you "
                "change it. You will need to restart the daemon to apply your "
                "configuration changes"
            ),
            context={"file_path": str(file_path), "reason": reason}
        )
