"""
Project-wide constants.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# ============================================================================
# Token format
# ============================================================================

NODE_OPEN = b"("
NODE_CLOSE = b")"
LENGTH_SEPARATOR = b":"

# ============================================================================
# Key file fields
# ============================================================================

# Field name GnuPG uses for the user-visible key annotation.
COMMENT_FIELD = "comment"

# Printed by the CLI when a key has no comment.
NO_COMMENT_PLACEHOLDER = "(none)"

# ============================================================================
# Settings defaults
# ============================================================================

ENV_PREFIX = "GPG_KEYTAG_"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STRICT = False
