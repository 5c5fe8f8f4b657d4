import pytest
from pydantic import ValidationError
from keyset.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for var in ["KEYSET_LOG_LEVEL", "LOG_LEVEL", "KEYSET_VALIDATE_KEYS"]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()

    assert settings.LOG_LEVEL == "INFO"
    assert settings.VALIDATE_KEYS is True


def test_log_level_from_env(clean_env):
    clean_env.setenv("LOG_LEVEL", "warning")
    assert Settings.load().LOG_LEVEL == "WARNING"

    # Package specific variable wins
    clean_env.setenv("KEYSET_LOG_LEVEL", "debug")
    assert Settings.load().LOG_LEVEL == "DEBUG"


def test_invalid_log_level(clean_env):
    clean_env.setenv("KEYSET_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings.load()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("false", False),
        ("0", False),
        ("OFF", False),
        ("n", False),
        ("yes", True),
        ("t", True),
    ],
)
def test_validate_keys_flag(clean_env, raw, expected):
    clean_env.setenv("KEYSET_VALIDATE_KEYS", raw)
    assert Settings.load().VALIDATE_KEYS is expected


def test_validate_keys_flag_rejects_garbage(clean_env):
    clean_env.setenv("KEYSET_VALIDATE_KEYS", "maybe")
    with pytest.raises(ValidationError, match="VALIDATE_KEYS"):
        Settings.load()
