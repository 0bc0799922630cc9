"""
Prompt repository.

Loads the static prompt data file into an immutable PromptPool.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from core import config
from core.schemas import PromptPool

# Pool cached for the process lifetime
_pool: Optional[PromptPool] = None


def load_prompt_pool(path: Path | str) -> PromptPool:
    """
    Load prompts from a JSON file.

    Args:
        path: File holding a list of {id, text, wildcard?, category?} records

    Returns:
        PromptPool with every record validated

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a list of records or ids repeat
        pydantic.ValidationError: If a record is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")

    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    # Accept {"prompts": [...]} as well as a bare list
    if isinstance(data, dict):
        data = data.get("prompts")
    if not isinstance(data, list):
        raise ValueError(f"Prompt file must contain a list of prompts: {path}")

    pool = PromptPool.from_records(data)
    print(f"[PROMPTS] Loaded {len(pool)} prompts ({pool.wildcard_count()} wildcards) from {path}")
    return pool


def get_prompt_pool() -> PromptPool:
    """
    Get the shared prompt pool, loading it on first use.
    """
    global _pool

    if _pool is not None:
        return _pool

    _pool = load_prompt_pool(config.get_prompts_path())
    return _pool


def clear_cache() -> None:
    global _pool
    _pool = None
