"""Runtime configuration defaults for the record store, menu and logging."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("MINIMARKET_DB_PATH", "data/minimarket.db")
DEBUG_LOG_PATH = os.environ.get("MINIMARKET_DEBUG_LOG", "/tmp/minimarket-debug.log")
# Optional JSON file loaded into an empty record store at startup.
SEED_PATH = os.environ.get("MINIMARKET_SEED")

PAGE_SIZE = 5

# Full-travel duration; partial travel is scaled by the remaining distance.
MENU_ANIMATION_SECONDS = 0.3
MENU_FRAME_SECONDS = 1 / 60
DRAWER_WIDTH_RATIO = 0.7
