# src/plancli/__main__.py
"""Allow ``python -m plancli``."""

from __future__ import annotations

import sys

from plancli.main import app

if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)
