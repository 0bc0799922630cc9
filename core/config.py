"""
Environment configuration for the prompt deck.

Values are read from the process environment (and a local .env file)
each time a getter is called.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_PROMPTS_PATH = PROJECT_ROOT / "data" / "prompts.json"
DEFAULT_FILTER_MODE = "categories"
DEFAULT_PLAYERS_DB_NAME = "prompt_deck"
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


def get_prompts_path() -> Path:
    """Get the prompt data file path."""
    return Path(os.getenv("PROMPTS_PATH", str(DEFAULT_PROMPTS_PATH)))


def get_filter_mode() -> str:
    """Get the card filtering mode ("categories" or "wildcard")."""
    return os.getenv("FILTER_MODE", DEFAULT_FILTER_MODE).strip().lower()


def reveal_on_retreat() -> bool:
    """Check whether stepping back shows the previous card face up."""
    return _env_flag("REVEAL_ON_RETREAT")


def get_mongo_uri() -> str | None:
    return os.getenv("MONGO_URI") or None


def get_players_db_name() -> str:
    return os.getenv("PLAYERS_DB_NAME", DEFAULT_PLAYERS_DB_NAME)
