"""Test configuration for Lachesis."""

from __future__ import annotations

import sys
from pathlib import Path


def _ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    root_path = str(root)
    if root_path not in sys.path:
        sys.path.insert(0, root_path)


_ensure_root_on_path()
