"""Resolve per-service credentials and endpoints from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ibm_cloud_sdk_core import get_authenticator_from_environment
from ibm_cloud_sdk_core.utils import read_external_sources

from watson_cli.errors import ConfigError
from watson_cli.registry import ServiceSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceEndpoint:
    url: str
    disable_ssl_verification: bool = False


def _credential_hint(auth_key: str) -> str:
    prefix = auth_key.upper()
    return (
        f"set {prefix}_APIKEY, or {prefix}_AUTH_TYPE with its matching credentials "
        f"({prefix}_BEARER_TOKEN, {prefix}_USERNAME/{prefix}_PASSWORD), "
        "in the environment or in ibm-credentials.env"
    )


def resolve_authenticator(auth_key: str) -> Any:
    """Return the authenticator configured for ``auth_key``.

    Lookup is delegated to the IBM Cloud SDK core, which reads environment
    variables, credential files and ``VCAP_SERVICES``.
    """
    try:
        authenticator = get_authenticator_from_environment(auth_key)
    except ValueError as exc:
        raise ConfigError(f"invalid credentials for {auth_key}: {exc}") from exc
    if authenticator is None:
        raise ConfigError(f"no credentials found for {auth_key}; {_credential_hint(auth_key)}")
    logger.debug("resolved %s authenticator for %s", type(authenticator).__name__, auth_key)
    return authenticator


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1", "yes", "on"}


def resolve_service_url(service: ServiceSpec) -> ServiceEndpoint:
    try:
        properties = read_external_sources(service.auth_key) or {}
    except ValueError as exc:
        raise ConfigError(f"invalid configuration for {service.auth_key}: {exc}") from exc
    url = str(properties.get("URL") or "").strip() or service.default_url
    return ServiceEndpoint(
        url=url,
        disable_ssl_verification=_to_bool(properties.get("DISABLE_SSL", False)),
    )
