"""
Base exception hierarchy for gpg-keytag operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class KeytagError(Exception):
    """Base exception for gpg-keytag operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class KeyfileParseError(KeytagError, ValueError):
    """Raised when a key file buffer is not a valid token tree."""

    code_name = "PARSE_ERROR"

    def __init__(self, message: str, offset: int = None, details: dict = None):
        """
        Initialize parse error.

        Args:
            message: Error message
            offset: Byte offset in the input where the error was detected
            details: Optional additional details
        """
        details = dict(details or {})
        if offset is not None:
            details.setdefault("offset", offset)
            message = f"{message} (at byte {offset})"
        super().__init__(message, code=self.code_name, details=details)
        self.offset = offset


class MalformedLengthError(KeyfileParseError):
    """Raised when a leaf length prefix cannot be converted to an integer."""

    code_name = "MALFORMED_LENGTH"


class MalformedTokenError(KeyfileParseError):
    """Raised when the ':' separator after a length prefix is missing."""

    code_name = "MALFORMED_TOKEN"


class TruncatedInputError(KeyfileParseError):
    """Raised when fewer bytes remain than a leaf declares."""

    code_name = "TRUNCATED_INPUT"


class UnterminatedNodeError(KeyfileParseError):
    """Raised when input ends inside an open node."""

    code_name = "UNTERMINATED_NODE"


class NoMatchError(KeyfileParseError):
    """Raised when the input does not start a valid tree."""

    code_name = "NO_MATCH"


class TrailingDataError(KeyfileParseError):
    """Raised in strict mode when bytes follow the top-level tree."""

    code_name = "TRAILING_DATA"


class SettingsError(KeytagError):
    """Raised when settings validation fails."""

    def __init__(self, message: str, field: str = None, details: dict = None):
        """
        Initialize settings error.

        Args:
            message: Error message
            field: Optional setting name that failed validation
            details: Optional additional details
        """
        super().__init__(message, code="SETTINGS_ERROR", details=details)
        self.field = field
