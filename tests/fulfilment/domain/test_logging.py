"""Tests for environment-driven logging settings."""

import pytest
from fulfilment.utils.logging import current_environment, get_log_level


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLogSettings:
    def test_defaults_to_development(self, clean_env):
        assert current_environment() == "development"
        assert get_log_level() == "DEBUG"

    def test_env_takes_precedence_over_protean_env(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "test")
        clean_env.setenv("ENV", "Production")
        assert current_environment() == "production"
        assert get_log_level() == "INFO"

    def test_test_environment_is_quiet(self, clean_env):
        clean_env.setenv("PROTEAN_ENV", "test")
        assert get_log_level() == "WARNING"

    def test_explicit_level_wins(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "staging")
        clean_env.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"

    def test_unknown_environment_logs_info(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "qa")
        assert get_log_level() == "INFO"
