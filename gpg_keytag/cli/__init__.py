"""
CLI commands for gpg-keytag.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .main import cli

__all__ = ["cli"]
