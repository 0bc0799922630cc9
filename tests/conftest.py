"""Shared pytest fixtures for prompt deck tests."""
import sys
import random
from pathlib import Path

# Add project root to path BEFORE any other imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from core.schemas import Prompt, PromptPool


@pytest.fixture
def five_prompts():
    """Five universal prompts A-E."""
    return PromptPool(
        Prompt(id=i, text=f"Prompt {letter}")
        for i, letter in enumerate("ABCDE", start=1)
    )


@pytest.fixture
def category_pool():
    """Prompts spread over categories, plus uncategorized ones."""
    records = [
        {"id": 1, "text": "Reflection one", "category": "Reflection"},
        {"id": 2, "text": "Reflection two", "category": "Reflection"},
        {"id": 3, "text": "Family one", "category": "Family"},
        {"id": 4, "text": "Wildcard one", "category": "Wildcard", "wildcard": True},
        {"id": 5, "text": "Wildcard two", "category": "Wildcard", "wildcard": True},
        {"id": 6, "text": "Connection one", "category": "Connection"},
        {"id": 7, "text": "No category"},
    ]
    return PromptPool.from_records(records)


@pytest.fixture
def wildcard_pool():
    """Three wildcard prompts and seven regular ones."""
    prompts = [Prompt(id=i, text=f"Wildcard {i}", wildcard=True) for i in range(1, 4)]
    prompts += [Prompt(id=i, text=f"Regular {i}") for i in range(4, 11)]
    return PromptPool(prompts)


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles."""
    return random.Random(1234)
