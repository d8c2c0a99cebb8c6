"""Tests for library settings."""

import pytest

from hypermath.core.config import Settings, get_settings


ENV_NAMES = [
    "HYPERMATH_LOG_LEVEL",
    "HYPERMATH_LOG_FORMAT",
    "HYPERMATH_LOG_FILE",
    "HYPERMATH_DEFAULT_PRECISION",
    "HYPERMATH_DEFAULT_ROUNDING",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestSettingsDefaults:
    """Test built-in values."""

    def test_defaults(self, clean_env):
        """Test settings without any environment."""
        settings = Settings()
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "text"
        assert settings.LOG_FILE is None
        assert settings.DEFAULT_PRECISION == 34
        assert settings.DEFAULT_ROUNDING == "HALF_EVEN"


class TestSettingsEnvironment:
    """Test environment overrides."""

    def test_environment_overrides(self, clean_env):
        """Test prefixed variables are read."""
        clean_env.setenv("HYPERMATH_LOG_LEVEL", "DEBUG")
        clean_env.setenv("HYPERMATH_LOG_FORMAT", "json")
        clean_env.setenv("HYPERMATH_DEFAULT_PRECISION", "12")
        settings = Settings()
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"
        assert settings.DEFAULT_PRECISION == 12

    def test_unprefixed_variables_ignored(self, clean_env):
        """Test only HYPERMATH_ variables apply."""
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "WARNING"

    def test_dotenv_file(self, clean_env, tmp_path):
        """Test values from a .env file in the working directory."""
        (tmp_path / ".env").write_text("HYPERMATH_DEFAULT_ROUNDING=FLOOR\n")
        assert Settings().DEFAULT_ROUNDING == "FLOOR"

    def test_get_settings_is_cached(self, clean_env):
        """Test the same instance is returned until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first
        get_settings.cache_clear()
        clean_env.setenv("HYPERMATH_LOG_LEVEL", "ERROR")
        assert get_settings().LOG_LEVEL == "ERROR"
