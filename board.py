#!/usr/bin/env python3
"""
board.py - render the skills board from a running API.

Usage:
    python board.py                      # show every theme with its skills
    python board.py themes               # list theme ids
    python board.py add "Rust" 40 2      # add a skill, then show the board

The API root is read from API_URL (configured in .env, defaults to
http://localhost:4242) or passed with --api-url.
"""

from __future__ import annotations

import os
import sys

# Ensure the src/ directory is on the path so package imports resolve
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)


if __name__ == "__main__":
    # Deferred so sys.path manipulation above takes effect first.
    from skills_api.board import run

    run()
