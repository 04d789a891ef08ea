"""
Unified logging package: format with importance (0-10) for gpg-keytag log output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from gpg_keytag.logging.unified_logging import (
    LEVEL_TO_IMPORTANCE,
    UNIFIED_DATE_FMT,
    UNIFIED_FORMAT_STR,
    UnifiedFormatter,
    configure_cli_logging,
    create_unified_formatter,
    importance_from_level,
)

__all__ = [
    "LEVEL_TO_IMPORTANCE",
    "UNIFIED_DATE_FMT",
    "UNIFIED_FORMAT_STR",
    "UnifiedFormatter",
    "configure_cli_logging",
    "create_unified_formatter",
    "importance_from_level",
]
