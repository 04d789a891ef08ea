"""
Allow ``python -m gpg_keytag``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from gpg_keytag.cli.main import cli

if __name__ == "__main__":
    cli()
