"""Tests for client settings."""

import pytest

from polytoria_api.config import Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HANDLE_RATELIMITS", "PT_AUTH_COOKIE", "DEBUG", "RATELIMIT_MAX_RETRIES"):
            monkeypatch.delenv(f"POLYTORIA_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.handle_ratelimits is True
        assert settings.pt_auth_cookie is None
        assert settings.debug is True
        assert settings.ratelimit_max_retries is None
        assert settings.api_base_url == "https://api.polytoria.com/v1"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POLYTORIA_PT_AUTH_COOKIE", "from-env")
        monkeypatch.setenv("POLYTORIA_HANDLE_RATELIMITS", "false")
        monkeypatch.setenv("POLYTORIA_RATELIMIT_MAX_RETRIES", "5")

        settings = Settings(_env_file=None)

        assert settings.pt_auth_cookie == "from-env"
        assert settings.handle_ratelimits is False
        assert settings.ratelimit_max_retries == 5

    def test_rejects_negative_delay(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, ratelimit_base_delay_seconds=-1)
