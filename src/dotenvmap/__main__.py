# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the dotenvmap CLI (run via ``dotenvmap`` or ``python -m dotenvmap``).

The parser itself only needs the standard library; the CLI needs ``click``
and ``rich``, so a failed import here points at those.
"""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI with ``prog_name`` fixed, so help reads the same under ``python -m``."""
    try:
        from dotenvmap.cli import cli
    except ImportError as e:
        sys.stderr.write(
            f"dotenvmap CLI needs click and rich ({e}). "
            "Library use (dotenvmap.parse, load_dotenv) works without them.\n"
        )
        sys.exit(1)
    cli(prog_name="dotenvmap")


if __name__ == "__main__":
    main()
