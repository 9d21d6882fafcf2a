"""Unit tests for refstore.config module."""

import os

import pytest

from refstore.config import RefStoreConfig
from refstore.constants import DEFAULT_LOG_LEVEL, DEFAULT_MAX_QUERY_SIZE


def _clear_env(monkeypatch):
    for key in list(os.environ.keys()):
        if key.startswith("REFSTORE_"):
            monkeypatch.delenv(key, raising=False)


class TestRefStoreConfig:
    """Tests for RefStoreConfig dataclass."""

    @pytest.mark.unit
    def test_default_values(self):
        config = RefStoreConfig()
        assert config.reference is None
        assert config.uppercase is True
        assert config.max_query_size == DEFAULT_MAX_QUERY_SIZE
        assert config.log_level == DEFAULT_LOG_LEVEL

    @pytest.mark.unit
    def test_log_level_normalized(self):
        assert RefStoreConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            RefStoreConfig(log_level="loud")

    @pytest.mark.unit
    def test_invalid_max_query_size(self):
        with pytest.raises(ValueError, match="max_query_size must be at least 1"):
            RefStoreConfig(max_query_size=0)

    @pytest.mark.unit
    def test_from_env_defaults(self, monkeypatch):
        _clear_env(monkeypatch)
        config = RefStoreConfig.from_env()
        assert config.reference is None
        assert config.uppercase is True
        assert config.max_query_size == DEFAULT_MAX_QUERY_SIZE
        assert config.log_level == DEFAULT_LOG_LEVEL

    @pytest.mark.unit
    def test_from_env_custom(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("REFSTORE_REFERENCE", "/data/hg38.fa")
        monkeypatch.setenv("REFSTORE_UPPERCASE", "false")
        monkeypatch.setenv("REFSTORE_MAX_QUERY_SIZE", "5000")
        monkeypatch.setenv("REFSTORE_LOG_LEVEL", "info")

        config = RefStoreConfig.from_env()
        assert config.reference == "/data/hg38.fa"
        assert config.uppercase is False
        assert config.max_query_size == 5000
        assert config.log_level == "INFO"

    @pytest.mark.unit
    def test_from_env_empty_reference(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("REFSTORE_REFERENCE", "")
        assert RefStoreConfig.from_env().reference is None

    @pytest.mark.unit
    def test_from_env_invalid_value(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("REFSTORE_MAX_QUERY_SIZE", "-1")
        with pytest.raises(ValueError):
            RefStoreConfig.from_env()
