from __future__ import annotations

"""
Main Entry Point.

Allows 'python -m assetbrowser.main' from a source checkout and is the target
of the 'assetbrowser' console script.
"""

import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from assetbrowser.interface.cli.app import main as cli_main  # noqa: E402


def main() -> None:
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
