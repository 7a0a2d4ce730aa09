"""Secrets Manager overlay: credentials replaced only on a good secret."""

import json

import pytest
from botocore.exceptions import ClientError

from museum_api.config import Settings
from museum_api.infrastructure import secret_manager


class _FakeSecretsClient:
    def __init__(self, secret_string=None, error=None):
        self.secret_string = secret_string
        self.error = error
        self.requested = []

    def get_secret_value(self, SecretId):
        self.requested.append(SecretId)
        if self.error:
            raise self.error
        return {"SecretString": self.secret_string}


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        db_host="db", db_user="env-user", db_pass="env-pass",
        use_secrets_manager=True, secret_name="museum/db",
    )


def _patch_client(monkeypatch, fake):
    regions = []

    def factory(region):
        regions.append(region)
        return fake

    monkeypatch.setattr(secret_manager, "_secrets_client", factory)
    return regions


def test_disabled_leaves_settings_untouched(monkeypatch, settings):
    disabled = settings.model_copy(update={"use_secrets_manager": False})
    _patch_client(monkeypatch, _FakeSecretsClient(error=AssertionError("called")))
    assert secret_manager.apply_secret_credentials(disabled) is disabled


def test_secret_credentials_replace_env(monkeypatch, settings):
    fake = _FakeSecretsClient(
        json.dumps({"username": "admin", "password": "s3cret"}),
    )
    regions = _patch_client(monkeypatch, fake)

    updated = secret_manager.apply_secret_credentials(settings)

    assert (updated.db_user, updated.db_pass) == ("admin", "s3cret")
    assert fake.requested == ["museum/db"]
    assert regions == ["ap-northeast-2"]


def test_client_error_keeps_env_credentials(monkeypatch, settings):
    error = ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "nope"}},
        "GetSecretValue",
    )
    _patch_client(monkeypatch, _FakeSecretsClient(error=error))

    updated = secret_manager.apply_secret_credentials(settings)

    assert (updated.db_user, updated.db_pass) == ("env-user", "env-pass")


def test_malformed_secret_keeps_env_credentials(monkeypatch, settings):
    _patch_client(monkeypatch, _FakeSecretsClient('{"user": "x"}'))
    updated = secret_manager.apply_secret_credentials(settings)
    assert updated.db_user == "env-user"
