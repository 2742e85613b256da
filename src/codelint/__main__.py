# SPDX-License-Identifier: MIT
"""Package entry point — run codelint via `python -m codelint`."""

import sys

from codelint.cli import main

if __name__ == "__main__":
    sys.exit(main())
