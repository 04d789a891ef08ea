"""
gpg-keytag - read and edit comments in GnuPG private key files.

Key files use the canonical length-prefixed S-expression format. The codec
lives in ``gpg_keytag.keyfile``; comment access in ``gpg_keytag.core``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .keyfile import (
    KeyfileParseError,
    Leaf,
    Node,
    TokenTree,
    parse,
    serialize,
    serialize_to_bytes,
)
from .core.fields import get_comment, get_field, upsert_comment, upsert_field

__version__ = "0.1.0"

__all__ = [
    "KeyfileParseError",
    "Leaf",
    "Node",
    "TokenTree",
    "parse",
    "serialize",
    "serialize_to_bytes",
    "get_comment",
    "get_field",
    "upsert_comment",
    "upsert_field",
]
