"""Shared defaults for scripts and the game session."""

from __future__ import annotations

import os
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = ROOT / "data"

HASH_BUCKETS = 101
GUILTY_THRESHOLD = 2

DEFAULT_LOG_LEVEL = os.getenv("QUEST_LOG_LEVEL", "WARNING").upper()
