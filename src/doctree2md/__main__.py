#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for running doctree2md as a module.

This allows the package to be executed as:
    python -m doctree2md [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
