"""
Main CLI entry point for gpg-keytag.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# mypy: ignore-errors

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

import click

from ..core.constants import NO_COMMENT_PLACEHOLDER
from ..core.exceptions import KeytagError
from ..core.fields import get_comment, upsert_comment
from ..core.settings_manager import LOG_LEVELS, SettingsManager
from ..keyfile import parse, serialize_to_bytes
from ..logging import configure_cli_logging

logger = logging.getLogger(__name__)


def _load_tree(keyfile: Path, strict: bool):
    content = keyfile.read_bytes()
    logger.debug(f"Read {len(content)} bytes from {keyfile}")
    return parse(content, strict=strict)


def _replace_file(target: Path, data: bytes) -> None:
    """
    Write data to a temporary file beside target and move it into place.

    The original file is untouched unless the whole write succeeds.
    The temporary file takes over the permission bits of target.
    """
    temp_fd, temp_path_str = tempfile.mkstemp(
        suffix=".tmp", prefix=f".{target.name}.", dir=target.parent
    )
    temp_file = Path(temp_path_str)
    try:
        with os.fdopen(temp_fd, "wb") as f:
            f.write(data)
        os.chmod(temp_file, stat.S_IMODE(target.stat().st_mode))
        os.replace(str(temp_file), str(target))
        temp_file = None  # Moved into place
    finally:
        if temp_file is not None and temp_file.exists():
            temp_file.unlink()


@click.command(name="gpg-keytag")
@click.argument(
    "keyfile",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@click.argument("comment", required=False)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject key files with data after the top-level expression "
    "(default: GPG_KEYTAG_STRICT or off)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level for diagnostics on stderr (default: GPG_KEYTAG_LOG_LEVEL or WARNING)",
)
def cli(
    keyfile: Path,
    comment: Optional[str],
    strict: Optional[bool],
    log_level: Optional[str],
) -> None:
    """Add a comment to your GPG key.

    KEYFILE is a private key file, usually in ~/.gnupg/private-keys-v1.d/.
    With only KEYFILE, print the current comment. With COMMENT as well,
    replace the current comment with the new one.
    """
    manager = SettingsManager()
    manager.set_cli_overrides({"strict": strict, "log_level": log_level})
    try:
        settings = manager.resolve()
    except KeytagError as e:
        raise click.ClickException(str(e))
    configure_cli_logging(settings.log_level)

    try:
        tree = _load_tree(keyfile, settings.strict)
    except KeytagError as e:
        raise click.ClickException(f"Failed to parse {keyfile}: {e}")
    except OSError as e:
        raise click.ClickException(f"Failed to read {keyfile}: {e}")

    if comment is None:
        current = get_comment(tree)
        click.echo(current if current is not None else NO_COMMENT_PLACEHOLDER)
        return

    # Raw argv bytes, including ones that are not valid UTF-8.
    upsert_comment(tree, os.fsencode(comment))
    output = serialize_to_bytes(tree)
    try:
        _replace_file(keyfile, output)
    except OSError as e:
        raise click.ClickException(f"Failed to write {keyfile}: {e}")
    logger.info(f"Updated comment in {keyfile} ({len(output)} bytes)")


if __name__ == "__main__":
    cli()
