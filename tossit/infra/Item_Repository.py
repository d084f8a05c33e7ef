"""Food item snapshot source (read-only JSON file)."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from tossit.domain.FoodItem import FoodItem
from tossit.infra import paths

logger = logging.getLogger(__name__)


def reading_from_items(path: Optional[Path] = None) -> List[FoodItem]:
    """Load food items from the JSON snapshot; a missing or corrupt file yields an empty list."""
    items_file = Path(path) if path is not None else paths.ITEMS_FILE
    try:
        with open(items_file, 'r', encoding='utf-8') as f:
            item_data = json.load(f)
    except FileNotFoundError:
        logger.warning("Items snapshot not found: %s", items_file)
        return []
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Error reading items snapshot %s: %s", items_file, e)
        return []
    if not isinstance(item_data, list):
        logger.warning("Items snapshot %s is not a list; ignoring", items_file)
        return []
    return [FoodItem.from_dict(entry) for entry in item_data if isinstance(entry, dict)]
