"""
Tests for settings storage, the settings source and web search capability lookup.
"""

import json

from chatshelf.config.models_config import DEFAULT_MODELS, DEFAULT_PROVIDER, get_web_search_support
from chatshelf.models.session_state import WebSearchSupport
from chatshelf.services.settings_source import SettingsSource
from chatshelf.storage.settings import SettingsStorage


# ── Web search capability ──────────────────────────────────────────

class TestWebSearchSupport:

    def test_model_entry_wins(self):
        assert get_web_search_support("openai", "o4-mini-deep-research") is WebSearchSupport.REQUIRED
        assert get_web_search_support("openai", "o1") is WebSearchSupport.UNSUPPORTED

    def test_provider_default(self):
        assert get_web_search_support("anthropic", "anything") is WebSearchSupport.OPTIONAL
        assert get_web_search_support("openrouter", "openrouter/auto") is WebSearchSupport.UNSUPPORTED

    def test_provider_is_case_insensitive(self):
        assert get_web_search_support("OpenAI", "gpt-4o") is WebSearchSupport.OPTIONAL

    def test_unknown_provider(self):
        assert get_web_search_support("nobody", "x") is WebSearchSupport.UNSUPPORTED
        assert get_web_search_support(None, "x") is WebSearchSupport.UNSUPPORTED


# ── Settings storage ───────────────────────────────────────────────

class TestSettingsStorage:

    def test_defaults_when_missing(self, tmp_path):
        settings = SettingsStorage(tmp_path).load()
        assert settings.selectedProvider == DEFAULT_PROVIDER
        assert settings.selectedModel == DEFAULT_MODELS[DEFAULT_PROVIDER]

    def test_defaults_when_corrupt(self, tmp_path):
        (tmp_path / "settings.json").write_text("not json")
        settings = SettingsStorage(tmp_path).load()
        assert settings.selectedProvider == DEFAULT_PROVIDER

    def test_reads_existing(self, tmp_path):
        (tmp_path / "settings.json").write_text(json.dumps({
            "currentUser": "alice",
            "selectedProvider": "google",
            "selectedModel": "gemini-2.5-flash",
        }))
        settings = SettingsStorage(tmp_path).load()
        assert settings.currentUser == "alice"
        assert settings.selectedModel == "gemini-2.5-flash"


# ── Settings source ────────────────────────────────────────────────

class TestSettingsSource:

    def test_select_persists(self, tmp_path):
        source = SettingsSource(SettingsStorage(tmp_path))
        source.select("openai", "o4-mini-deep-research")

        assert source.current_model == "o4-mini-deep-research"
        assert source.web_search_support is WebSearchSupport.REQUIRED

        reloaded = SettingsSource(SettingsStorage(tmp_path))
        assert reloaded.current_provider == "openai"
        assert reloaded.current_model == "o4-mini-deep-research"
