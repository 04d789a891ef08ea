"""
Core functionality for gpg-keytag.

This module contains field access on key file trees, the exception
hierarchy, constants and settings.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .exceptions import KeytagError, KeyfileParseError, SettingsError
from .fields import get_comment, get_field, upsert_comment, upsert_field
from .settings_manager import KeytagSettings, SettingsManager

__all__ = [
    "KeytagError",
    "KeyfileParseError",
    "SettingsError",
    "get_comment",
    "get_field",
    "upsert_comment",
    "upsert_field",
    "KeytagSettings",
    "SettingsManager",
]
