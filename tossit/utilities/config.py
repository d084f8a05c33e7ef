"""Configuration management for the freshness calendar host."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Calendar Settings
REMINDER_DAYS: Final[int] = int(os.getenv('REMINDER_DAYS', '7'))
WEEK_START_DAY: Final[str] = os.getenv('WEEK_START_DAY', 'sunday').strip().lower()
ROW_HEIGHT_PX: Final[int] = int(os.getenv('ROW_HEIGHT_PX', '44'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
ITEMS_FILE: Final[Path] = Path(os.getenv('ITEMS_FILE', str(DATA_DIR / 'food_items.json')))
