from pathlib import Path

import pytest
from pydantic import ValidationError as SettingsError

from app.core.config import Settings

ENV_EXAMPLE = Path(__file__).resolve().parent.parent / ".env.example"


def example_secret():
    for line in ENV_EXAMPLE.read_text().splitlines():
        if line.startswith("JWT_SECRET="):
            return line.split("=", 1)[1]
    raise AssertionError("JWT_SECRET missing from .env.example")


def build(**overrides):
    values = {"DATABASE_URL": "sqlite://", "JWT_SECRET": "a" * 40}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.mark.parametrize("secret", [example_secret(), "change_me_" + "x" * 32, "CHANGE-ME-" + "x" * 32])
def test_production_rejects_placeholder_secret(secret):
    with pytest.raises(SettingsError, match="JWT_SECRET must be changed"):
        build(ENV="production", JWT_SECRET=secret)


def test_development_accepts_example_secret():
    assert build(ENV="dev", JWT_SECRET=example_secret()).is_development


def test_production_accepts_real_secret():
    settings = build(ENV="prod", JWT_SECRET="k8s-generated-" + "z" * 40)
    assert settings.ENV == "prod"
    assert not settings.is_development
