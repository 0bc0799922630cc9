"""
Prompt Pool Tests - record validation and loading from the data file.

Run with: pytest tests/test_prompt_repo.py -v
"""
import json

import pytest
from pydantic import ValidationError

from core import config, prompt_repo
from core.schemas import UNCATEGORIZED, Prompt, PromptPool


# =============================================================================
# Schemas
# =============================================================================

class TestPrompt:

    def test_defaults(self):
        prompt = Prompt(id=1, text="Hello")
        assert prompt.wildcard is False
        assert prompt.category is None

    def test_is_immutable(self):
        prompt = Prompt(id=1, text="Hello")
        with pytest.raises(ValidationError):
            prompt.text = "Changed"

    def test_blank_text_rejected(self):
        with pytest.raises(ValidationError):
            Prompt(id=1, text="   ")

    def test_blank_category_means_universal(self):
        assert Prompt(id=1, text="Hi", category="").category is None


class TestPromptPool:

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate prompt id"):
            PromptPool.from_records([
                {"id": 1, "text": "One"},
                {"id": 1, "text": "Also one"},
            ])

    def test_lookup_and_counts(self, category_pool):
        assert category_pool.get(3).category == "Family"
        assert category_pool.get(99) is None
        counts = category_pool.category_counts()
        assert counts["Reflection"] == 2
        assert counts[UNCATEGORIZED] == 1
        assert category_pool.wildcard_count() == 2


# =============================================================================
# Loading
# =============================================================================

class TestLoadPromptPool:

    def test_loads_list(self, tmp_path):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps([
            {"id": 1, "text": "One", "category": "Family"},
            {"id": 2, "text": "Two", "wildcard": True},
        ]), encoding="utf-8")

        pool = prompt_repo.load_prompt_pool(path)
        assert len(pool) == 2
        assert pool.get(2).wildcard

    def test_loads_wrapped_list(self, tmp_path):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps({"prompts": [{"id": 1, "text": "One"}]}), encoding="utf-8")
        assert len(prompt_repo.load_prompt_pool(path)) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            prompt_repo.load_prompt_pool(tmp_path / "nope.json")

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")
        with pytest.raises(ValueError):
            prompt_repo.load_prompt_pool(path)

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps([{"id": "one"}]), encoding="utf-8")
        with pytest.raises(ValidationError):
            prompt_repo.load_prompt_pool(path)

    def test_shipped_data_file_is_valid(self):
        pool = prompt_repo.load_prompt_pool(config.DEFAULT_PROMPTS_PATH)
        assert len(pool) > 0
        assert pool.wildcard_count() > 0

    def test_get_prompt_pool_uses_env_path_and_caches(self, tmp_path, monkeypatch):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps([{"id": 1, "text": "One"}]), encoding="utf-8")
        monkeypatch.setenv("PROMPTS_PATH", str(path))
        prompt_repo.clear_cache()
        try:
            pool = prompt_repo.get_prompt_pool()
            assert len(pool) == 1
            assert prompt_repo.get_prompt_pool() is pool
        finally:
            prompt_repo.clear_cache()


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("FILTER_MODE", "REVEAL_ON_RETREAT", "MONGO_URI", "PROMPTS_PATH"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_filter_mode() == "categories"
        assert config.reveal_on_retreat() is False
        assert config.get_mongo_uri() is None
        assert config.get_prompts_path() == config.DEFAULT_PROMPTS_PATH

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("FILTER_MODE", "Wildcard")
        monkeypatch.setenv("REVEAL_ON_RETREAT", "TRUE")
        assert config.get_filter_mode() == "wildcard"
        assert config.reveal_on_retreat() is True

    @pytest.mark.parametrize("value", ["1", "yes", "on", " True "])
    def test_reveal_flag_truthy_spellings(self, monkeypatch, value):
        monkeypatch.setenv("REVEAL_ON_RETREAT", value)
        assert config.reveal_on_retreat() is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_reveal_flag_falsy_spellings(self, monkeypatch, value):
        monkeypatch.setenv("REVEAL_ON_RETREAT", value)
        assert config.reveal_on_retreat() is False
