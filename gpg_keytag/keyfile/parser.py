"""
Key file parser.

Grammar (canonical length-prefixed S-expressions):
- tree := node | leaf
- node := "(" tree* ")"
- leaf := digits ":" <digits bytes>

Notes:
- Leaf content is opaque and never re-parsed as tokens.
- Open nodes are kept on an explicit stack, so nesting depth is limited only
  by memory, not by the interpreter recursion limit.
- Bytes after the first complete tree are ignored unless ``strict=True``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import re
import sys
from typing import List, Tuple, Union

from ..core.constants import LENGTH_SEPARATOR, NODE_CLOSE, NODE_OPEN
from ..core.exceptions import (
    MalformedLengthError,
    MalformedTokenError,
    NoMatchError,
    TrailingDataError,
    TruncatedInputError,
    UnterminatedNodeError,
)
from .tree import Leaf, Node, TokenTree

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

_OPEN = NODE_OPEN[0]
_CLOSE = NODE_CLOSE[0]
_SEPARATOR = LENGTH_SEPARATOR[0]
_DIGITS_RE = re.compile(rb"[0-9]+")
_MAX_LENGTH_DIGITS = len(str(sys.maxsize))


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")


def _read_leaf(buf: bytes, start: int) -> Tuple[Leaf, int]:
    """Read ``digits ":" bytes`` starting at ``start`` (a digit)."""
    m = _DIGITS_RE.match(buf, start)
    pos = m.end()
    # Lengths are sizes: at most sys.maxsize. Longer digit runs are never converted.
    digits = m.group().lstrip(b"0") or b"0"
    length = int(digits) if len(digits) <= _MAX_LENGTH_DIGITS else None
    if length is None or length > sys.maxsize:
        raise MalformedLengthError(
            f"Leaf length overflows the maximum size {sys.maxsize}",
            offset=start,
            details={"digits": len(digits)},
        )

    if pos >= len(buf) or buf[pos] != _SEPARATOR:
        raise MalformedTokenError("Expected ':' after leaf length", offset=pos)
    pos += 1

    available = len(buf) - pos
    if available < length:
        raise TruncatedInputError(
            f"Leaf declares {length} bytes but only {available} remain",
            offset=pos,
            details={"declared": length, "available": available},
        )
    return Leaf(buf[pos : pos + length]), pos + length


def parse_prefix(data: BytesLike) -> Tuple[TokenTree, int]:
    """
    Parse the first complete token tree in data.

    Returns:
        (tree, consumed) where consumed is the number of bytes the tree used.

    Raises:
        KeyfileParseError subclass describing the first problem found.
    """
    buf = _as_bytes(data)
    end = len(buf)
    pos = 0
    # (offset of "(", children collected so far) for every open node.
    stack: List[Tuple[int, List[TokenTree]]] = []

    while True:
        if pos >= end:
            if stack:
                raise UnterminatedNodeError(
                    "Input ended inside a node",
                    offset=end,
                    details={"node_offset": stack[-1][0], "depth": len(stack)},
                )
            raise NoMatchError("Empty input", offset=pos)

        byte = buf[pos]
        if byte == _OPEN:
            stack.append((pos, []))
            pos += 1
            continue

        if byte == _CLOSE and stack:
            _, children = stack.pop()
            tree: TokenTree = Node(children)
            pos += 1
        elif 0x30 <= byte <= 0x39:
            tree, pos = _read_leaf(buf, pos)
        else:
            expected = "'(', ')' or a digit" if stack else "'(' or a digit"
            raise NoMatchError(
                f"Unexpected byte 0x{byte:02x}, expected {expected}", offset=pos
            )

        if not stack:
            return tree, pos
        stack[-1][1].append(tree)


def parse(data: BytesLike, *, strict: bool = False) -> TokenTree:
    """
    Parse a key file buffer into a token tree.

    Args:
        data: Raw key file contents.
        strict: Reject bytes following the top-level tree instead of
            ignoring them.

    Raises:
        KeyfileParseError
    """
    buf = _as_bytes(data)
    tree, consumed = parse_prefix(buf)
    trailing = len(buf) - consumed
    if trailing:
        if strict:
            raise TrailingDataError(
                f"{trailing} unexpected byte(s) after top-level tree",
                offset=consumed,
                details={"trailing": trailing},
            )
        logger.debug(f"Ignoring {trailing} trailing byte(s) after offset {consumed}")
    return tree
