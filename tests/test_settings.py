"""
Unit tests for the settings models.
"""

import math

import pytest
from pydantic import ValidationError

from vaultconfig.settings import AppSettings, ContextSettings, EmbedderSettings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_embedder_defaults(self):
        settings = EmbedderSettings()

        assert settings.dim == 128
        assert settings.prior_seed == 1729
        assert settings.default_idf == pytest.approx(math.log(100))

    def test_context_defaults(self):
        settings = ContextSettings()

        assert settings.total_budget_chars == 12000
        assert settings.pinned_doc_chars == 1500
        assert settings.excerpt_chars == 500
        assert settings.ellipsis == "..."

    def test_app_defaults(self):
        settings = AppSettings()

        assert settings.notes_folder is None
        assert settings.provider.name == "extractive"


class TestSettingsValidation:
    """Tests for field constraints."""

    def test_ratios_must_increase(self):
        with pytest.raises(ValidationError):
            ContextSettings(pinned_ratio=0.9, relevant_ratio=0.8)

    def test_ratio_above_one(self):
        with pytest.raises(ValidationError):
            ContextSettings(metadata_ratio=1.5)

    def test_reserved_below_max(self):
        with pytest.raises(ValidationError):
            ContextSettings(max_tokens=1000, reserved_tokens=1000)

    def test_dimension_positive(self):
        with pytest.raises(ValidationError):
            EmbedderSettings(dim=0)


class TestFromEnv:
    """Tests for AppSettings.from_env."""

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VAULTCORE_NOTES_FOLDER", str(tmp_path))
        monkeypatch.setenv("VAULTCORE_LOG_LEVEL", "debug")
        monkeypatch.setenv("VAULTCORE_STRUCTURED_LOGS", "true")
        monkeypatch.setenv("VAULTCORE_EMBEDDING_DIM", "64")

        settings = AppSettings.from_env()

        assert settings.notes_folder == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.structured_logs is True
        assert settings.embedder.dim == 64

    def test_no_overrides(self, monkeypatch):
        for name in ("VAULTCORE_NOTES_FOLDER", "VAULTCORE_EMBEDDING_DIM", "VAULTCORE_PROVIDER"):
            monkeypatch.delenv(name, raising=False)

        settings = AppSettings.from_env()

        assert settings.embedder.dim == 128
        assert settings.notes_folder is None

    def test_invalid_log_level_fails_at_load(self, monkeypatch):
        monkeypatch.setenv("VAULTCORE_LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            AppSettings.from_env()

    def test_invalid_dimension_fails_at_load(self, monkeypatch):
        monkeypatch.setenv("VAULTCORE_EMBEDDING_DIM", "0")

        with pytest.raises(ValidationError):
            AppSettings.from_env()
