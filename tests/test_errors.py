"""
Error kind tests.
"""

from gesture_config.errors import (
    DefaultConfigMissing,
    DocumentInvalid,
    ErrorCode,
    WatchUnavailable,
)
from gesture_config.models import ReloadResult


class TestErrorKinds:
    """Test the startup/runtime split carried by error codes."""

    def test_fatal_codes(self):
        assert ErrorCode.HOME_UNRESOLVABLE.is_fatal
        assert ErrorCode.DEFAULT_CONFIG_MISSING.is_fatal
        assert ErrorCode.DOCUMENT_INVALID.is_fatal
        assert not ErrorCode.WATCH_UNAVAILABLE.is_fatal

    def test_to_dict(self):
        error = DocumentInvalid("/tmp/touchegg.conf", "syntax error", line_number=3, column=7)

        assert error.to_dict() == {
            "code": ErrorCode.DOCUMENT_INVALID.value,
            "message": "Error parsing configuration file /tmp/touchegg.conf: syntax error",
            "suggestion": "Check the file syntax",
            "context": {
                "file_path": "/tmp/touchegg.conf",
                "reason": "syntax error",
                "line_number": 3,
                "column": 7,
            },
        }

    def test_user_message_includes_suggestion(self):
        error = DefaultConfigMissing("/usr/share/touchegg/touchegg.conf")

        assert error.user_message() == (
            "File /usr/share/touchegg/touchegg.conf not found\n"
            "Reinstall the gesture daemon to solve this issue"
        )

    def test_watch_unavailable_is_not_fatal(self):
        assert not WatchUnavailable("/tmp/x", "no inotify").is_fatal

    def test_failed_reload_result_carries_code(self):
        result = ReloadResult(success=False, error_code=ErrorCode.DOCUMENT_INVALID)

        assert not result.success
        assert result.error_code == ErrorCode.DOCUMENT_INVALID
        assert not hasattr(result, "is_fatal")
