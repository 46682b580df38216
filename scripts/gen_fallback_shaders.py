"""Generate a fallback shader header from a source checkout.

Thin wrapper around :mod:`shdr.cli` for build systems that call a script path
instead of the installed ``shdr2h`` command.  Arguments are passed through
unchanged.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shdr.cli import run  # noqa: E402


if __name__ == "__main__":
    run()
