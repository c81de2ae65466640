"""Vercel serverless entrypoint."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from exercise_tracker.api.app import create_app  # noqa: E402
from exercise_tracker.containers import build_container  # noqa: E402

app = create_app(build_container())

__all__ = ["app"]
