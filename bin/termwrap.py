#!/usr/bin/env python3
"""Launcher for running termwrap from a source checkout.

  ./bin/termwrap.py DEBUG --stderr --width=40 notes.txt
  ./bin/termwrap.py --tui notes.txt
"""
from __future__ import annotations

import sys
from pathlib import Path

# Add project root so `termwrap.*` works when running from bin/
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from termwrap.cli import main  # noqa: E402


if __name__ == '__main__':
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        raise SystemExit(130)
