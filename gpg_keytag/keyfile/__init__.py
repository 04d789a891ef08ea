"""
Keyfile - codec for canonical length-prefixed token trees.

This is the on-disk format of GnuPG private key files
(``~/.gnupg/private-keys-v1.d/*.key``). The package does no I/O of its own.

Public API:
  - parse(data: bytes, *, strict: bool = False) -> TokenTree
  - parse_prefix(data: bytes) -> tuple[TokenTree, int]
  - serialize(tree: TokenTree, sink) -> None
  - serialize_to_bytes(tree: TokenTree) -> bytes
  - Leaf, Node, TokenTree
  - KeyfileParseError and its subclasses

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .errors import (
    KeyfileParseError,
    MalformedLengthError,
    MalformedTokenError,
    NoMatchError,
    TrailingDataError,
    TruncatedInputError,
    UnterminatedNodeError,
)
from .tree import Leaf, Node, TokenTree, is_leaf, is_node, make_field
from .parser import parse, parse_prefix
from .serializer import serialize, serialize_to_bytes

__all__ = [
    "KeyfileParseError",
    "MalformedLengthError",
    "MalformedTokenError",
    "NoMatchError",
    "TrailingDataError",
    "TruncatedInputError",
    "UnterminatedNodeError",
    "Leaf",
    "Node",
    "TokenTree",
    "is_leaf",
    "is_node",
    "make_field",
    "parse",
    "parse_prefix",
    "serialize",
    "serialize_to_bytes",
]
