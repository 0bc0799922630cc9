"""
Pydantic models for the prompt card pool.

These models define the structure of records in the prompt data file
and the immutable pool built from them.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Category used when counting prompts that carry no category label
UNCATEGORIZED = "Uncategorized"


class Prompt(BaseModel):
    """A single prompt card."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable unique id within the pool")
    text: str = Field(..., min_length=1, description="Prompt text shown on the card")
    wildcard: bool = Field(default=False, description="Special/bonus prompt")
    category: Optional[str] = Field(default=None, description="Card set label; None means universal")

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt text must not be blank")
        return value

    @field_validator("category")
    @classmethod
    def _blank_category_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class PromptPool:
    """
    Immutable collection of every prompt loaded at startup.
    """

    def __init__(self, prompts: Iterable[Prompt]):
        prompts = tuple(prompts)
        by_id: dict[int, Prompt] = {}
        for prompt in prompts:
            if prompt.id in by_id:
                raise ValueError(f"Duplicate prompt id: {prompt.id}")
            by_id[prompt.id] = prompt
        self._prompts = prompts
        self._by_id = by_id

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "PromptPool":
        return cls(Prompt.model_validate(record) for record in records)

    @property
    def prompts(self) -> tuple[Prompt, ...]:
        return self._prompts

    def get(self, prompt_id: int) -> Optional[Prompt]:
        return self._by_id.get(prompt_id)

    def category_counts(self) -> dict[str, int]:
        """
        Count prompts per category label (uncategorized prompts grouped together).
        """
        counts = Counter(prompt.category or UNCATEGORIZED for prompt in self._prompts)
        return dict(counts)

    def wildcard_count(self) -> int:
        return sum(1 for prompt in self._prompts if prompt.wildcard)

    def __iter__(self) -> Iterator[Prompt]:
        return iter(self._prompts)

    def __len__(self) -> int:
        return len(self._prompts)
