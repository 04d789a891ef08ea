"""
Key file serializer.

Writes the canonical encoding: ``<len>:<bytes>`` for leaves, ``(...)`` for
nodes, no separators. Output of ``serialize(parse(data))`` is byte-identical
to any input the parser consumes fully.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator, List

from ..core.constants import LENGTH_SEPARATOR, NODE_CLOSE, NODE_OPEN
from .tree import TokenTree, is_leaf, is_node

_END = object()


def serialize(tree: TokenTree, sink: BinaryIO) -> None:
    """
    Write tree to sink in canonical form.

    Args:
        tree: Leaf or Node to encode.
        sink: Any object with a ``write(bytes)`` method. Its errors propagate.
    """
    write = sink.write
    # One iterator per open node; the bottom entry yields just the root.
    stack: List[Iterator[TokenTree]] = [iter((tree,))]
    while stack:
        item = next(stack[-1], _END)
        if item is _END:
            stack.pop()
            if stack:
                write(NODE_CLOSE)
        elif is_leaf(item):
            write(str(len(item.value)).encode("ascii"))
            write(LENGTH_SEPARATOR)
            write(item.value)
        elif is_node(item):
            write(NODE_OPEN)
            stack.append(iter(item.children))
        else:
            raise TypeError(f"Not a token tree: {type(item).__name__}")


def serialize_to_bytes(tree: TokenTree) -> bytes:
    """Return the canonical encoding of tree."""
    buf = io.BytesIO()
    serialize(tree, buf)
    return buf.getvalue()
