from __future__ import annotations

import os
from decimal import Decimal

import pytest

from suite_prices.config import (
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_MAX_AMOUNT,
    ENV_DECIMAL_PRECISION,
    ENV_MAX_AMOUNT,
    PricesSettings,
    get_settings,
    load_settings,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv + delenv restores the original environment after the test
    for name in (ENV_DECIMAL_PRECISION, ENV_MAX_AMOUNT):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults_without_environment(clean_env):
    settings = load_settings()

    assert settings.decimal_precision == DEFAULT_DECIMAL_PRECISION
    assert settings.max_amount == DEFAULT_MAX_AMOUNT


def test_values_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv(ENV_DECIMAL_PRECISION, "34")
    monkeypatch.setenv(ENV_MAX_AMOUNT, "1000000")

    settings = load_settings()

    assert settings.decimal_precision == 34
    assert settings.max_amount == Decimal("1000000")


def test_values_from_dotenv_file(clean_env):
    dotenv_file = clean_env / ".env"
    dotenv_file.write_text(f"{ENV_DECIMAL_PRECISION}=40\n")

    settings = load_settings(str(dotenv_file))

    assert settings.decimal_precision == 40


def test_environment_wins_over_dotenv_file(clean_env, monkeypatch):
    (clean_env / ".env").write_text(f"{ENV_DECIMAL_PRECISION}=40\n")
    monkeypatch.setenv(ENV_DECIMAL_PRECISION, "30")

    # No explicit path: `.env` is found in the working directory
    assert load_settings().decimal_precision == 30


@pytest.mark.parametrize("name, value", [(ENV_DECIMAL_PRECISION, "many"), (ENV_MAX_AMOUNT, "lots")])
def test_unparseable_values_are_rejected(clean_env, monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match="Cannot call `load_settings`"):
        load_settings()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"decimal_precision": 0},
        {"max_amount": Decimal("0")},
        {"max_amount": Decimal("Infinity")},
    ],
)
def test_settings_validate_values(kwargs):
    with pytest.raises(ValueError):
        PricesSettings(**kwargs)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_dotenv_file_does_not_leak_into_environment(clean_env, monkeypatch):
    monkeypatch.delenv("UNRELATED_SECRET", raising=False)
    (clean_env / ".env").write_text(f"UNRELATED_SECRET=leak\n{ENV_MAX_AMOUNT}=500\n")

    settings = load_settings()

    assert settings.max_amount == Decimal("500")
    assert "UNRELATED_SECRET" not in os.environ
    assert ENV_MAX_AMOUNT not in os.environ
