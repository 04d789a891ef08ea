"""
Pytest fixtures for gpg-keytag tests.

Provides sample key file bytes/trees and keeps the package logger clean
between tests.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging

import pytest

from gpg_keytag.keyfile import Leaf, Node

SAMPLE_KEY = (
    b"(11:private-key"
    b"(3:ecc(5:curve7:Ed25519)(1:q3:abc))"
    b"(7:comment8:work key))"
)

SAMPLE_KEY_NO_COMMENT = b"(11:private-key(3:ecc(5:curve7:Ed25519)(1:q3:abc)))"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so they never outlive a test."""
    yield
    pkg_logger = logging.getLogger("gpg_keytag")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_key():
    """Raw bytes of a private key file with a comment."""
    return SAMPLE_KEY


@pytest.fixture
def sample_tree():
    """Tree equal to parse(SAMPLE_KEY)."""
    return Node(
        [
            Leaf(b"private-key"),
            Node(
                [
                    Leaf(b"ecc"),
                    Node([Leaf(b"curve"), Leaf(b"Ed25519")]),
                    Node([Leaf(b"q"), Leaf(b"abc")]),
                ]
            ),
            Node([Leaf(b"comment"), Leaf(b"work key")]),
        ]
    )


@pytest.fixture
def key_file(tmp_path):
    """Key file with a comment."""
    path = tmp_path / "ABCDEF.key"
    path.write_bytes(SAMPLE_KEY)
    return path


@pytest.fixture
def key_file_no_comment(tmp_path):
    """Key file without a comment."""
    path = tmp_path / "012345.key"
    path.write_bytes(SAMPLE_KEY_NO_COMMENT)
    return path
