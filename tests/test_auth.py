from __future__ import annotations

import os

import pytest
from ibm_cloud_sdk_core.authenticators import BearerTokenAuthenticator, NoAuthAuthenticator

from watson_cli.auth import resolve_authenticator, resolve_service_url
from watson_cli.errors import ConfigError
from watson_cli.services import get_registry


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    for key in list(os.environ):
        if key.startswith("NATURAL_LANGUAGE_CLASSIFIER_") or key == "VCAP_SERVICES":
            monkeypatch.delenv(key, raising=False)
    credentials = tmp_path / "ibm-credentials.env"
    credentials.write_text("", encoding="utf-8")
    monkeypatch.setenv("IBM_CREDENTIALS_FILE", str(credentials))
    monkeypatch.chdir(tmp_path)
    return credentials


def test_no_auth_from_environment(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_AUTH_TYPE", "noAuth")
    assert isinstance(resolve_authenticator("natural_language_classifier"), NoAuthAuthenticator)


def test_bearer_token_from_credentials_file(clean_env) -> None:
    clean_env.write_text(
        "NATURAL_LANGUAGE_CLASSIFIER_AUTH_TYPE=bearerToken\n"
        "NATURAL_LANGUAGE_CLASSIFIER_BEARER_TOKEN=token-123\n",
        encoding="utf-8",
    )
    authenticator = resolve_authenticator("natural_language_classifier")
    assert isinstance(authenticator, BearerTokenAuthenticator)
    assert authenticator.bearer_token == "token-123"


def test_missing_credentials_raise_config_error(clean_env) -> None:
    with pytest.raises(ConfigError, match="NATURAL_LANGUAGE_CLASSIFIER_APIKEY"):
        resolve_authenticator("natural_language_classifier")


def test_incomplete_credentials_raise_config_error(clean_env, monkeypatch) -> None:
    monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_AUTH_TYPE", "bearerToken")
    with pytest.raises(ConfigError, match="invalid credentials for natural_language_classifier"):
        resolve_authenticator("natural_language_classifier")


def test_service_url_defaults_and_overrides(clean_env, monkeypatch) -> None:
    service = get_registry().resolve("nlc-v1")

    endpoint = resolve_service_url(service)
    assert endpoint.url == service.default_url
    assert endpoint.disable_ssl_verification is False

    monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_URL", "https://private.example/nlc")
    monkeypatch.setenv("NATURAL_LANGUAGE_CLASSIFIER_DISABLE_SSL", "true")
    endpoint = resolve_service_url(service)
    assert endpoint.url == "https://private.example/nlc"
    assert endpoint.disable_ssl_verification is True
