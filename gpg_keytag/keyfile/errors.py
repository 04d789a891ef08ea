"""
Errors for the key file codec.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from ..core.exceptions import (
    KeyfileParseError,
    MalformedLengthError,
    MalformedTokenError,
    NoMatchError,
    TrailingDataError,
    TruncatedInputError,
    UnterminatedNodeError,
)

__all__ = [
    "KeyfileParseError",
    "MalformedLengthError",
    "MalformedTokenError",
    "NoMatchError",
    "TrailingDataError",
    "TruncatedInputError",
    "UnterminatedNodeError",
]
