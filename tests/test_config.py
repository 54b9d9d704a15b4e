from types import SimpleNamespace

import pytest

import config


def test_jobs_api_key_resolution_order(monkeypatch):
    fake_secrets: dict[str, object] = {"JOBS_API_KEY": "secret-key"}
    fake_streamlit = SimpleNamespace(secrets=fake_secrets)
    monkeypatch.setattr(config, "st", fake_streamlit, raising=False)
    monkeypatch.setenv("JOBS_API_KEY", "env-key")

    # Direct Streamlit secret wins over environment variables.
    assert config.get_secret("JOBS_API_KEY") == "secret-key"

    # Nested supabase section is used when the top-level key is missing.
    fake_secrets.pop("JOBS_API_KEY")
    fake_secrets["supabase"] = {"JOBS_API_KEY": "section-key"}
    assert config.get_secret("JOBS_API_KEY") == "section-key"

    # Environment variable is the final fallback.
    fake_secrets["supabase"].pop("JOBS_API_KEY")  # type: ignore[union-attr]
    assert config.get_secret("JOBS_API_KEY") == "env-key"

    monkeypatch.delenv("JOBS_API_KEY", raising=False)
    assert config.get_secret("JOBS_API_KEY") == ""


def test_alias_names_are_checked_in_order(monkeypatch):
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={}), raising=False)
    monkeypatch.delenv("JOBS_API_URL", raising=False)
    monkeypatch.setenv("SUPABASE_URL", "  https://demo.supabase.co  ")

    assert config.get_secret("JOBS_API_URL", "SUPABASE_URL") == "https://demo.supabase.co"


def test_broken_secrets_fall_back_to_environment(monkeypatch):
    class _BrokenSecrets:
        def __contains__(self, key: object) -> bool:
            raise FileNotFoundError("no secrets.toml")

    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=_BrokenSecrets()), raising=False)
    monkeypatch.setenv("JOBS_API_KEY", "env-key")

    assert config.get_secret("JOBS_API_KEY") == "env-key"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("verbose", "INFO"), (None, "INFO")],
)
def test_normalise_log_level(value, expected):
    assert config.normalise_log_level(value) == expected


def test_timeout_falls_back_on_invalid_values():
    assert config._normalise_timeout("2.5", default=10.0) == 2.5
    assert config._normalise_timeout("", default=10.0) == 10.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_timeout("soon", default=10.0) == 10.0
    with pytest.warns(RuntimeWarning):
        assert config._normalise_timeout("-1", default=10.0) == 10.0


def test_max_tries_must_be_positive():
    assert config._parse_positive_int("5", env_var="JOBS_API_MAX_TRIES", default=3) == 5
    assert config._parse_positive_int("0", env_var="JOBS_API_MAX_TRIES", default=3) == 3
    with pytest.warns(RuntimeWarning):
        assert config._parse_positive_int("many", env_var="JOBS_API_MAX_TRIES", default=3) == 3


def test_backend_configured_requires_url_and_key(monkeypatch):
    monkeypatch.setattr(config, "JOBS_API_URL", "https://demo.supabase.co")
    monkeypatch.setattr(config, "JOBS_API_KEY", "")
    assert config.is_backend_configured() is False

    monkeypatch.setattr(config, "JOBS_API_KEY", "anon")
    assert config.is_backend_configured() is True
