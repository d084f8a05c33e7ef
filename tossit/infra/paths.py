from pathlib import Path

from tossit.utilities.config import DATA_DIR as _DATA_DIR, ITEMS_FILE as _ITEMS_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_DATA_DIR).resolve()
ITEMS_FILE = Path(_ITEMS_FILE).resolve()

__all__ = ['DATA_DIR', 'ITEMS_FILE']
