#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for ``python -m adoctree``."""

import sys

from adoctree.cli import main

if __name__ == "__main__":
    sys.exit(main())
