from __future__ import annotations

from watson_cli.auth import ServiceEndpoint
from watson_cli.handler import InvocationContext, build_client
from watson_cli.services import get_registry


def _patch_sources(monkeypatch, authenticator) -> None:  # noqa: ANN001
    monkeypatch.setattr(
        "watson_cli.handler.resolve_service_url",
        lambda service: ServiceEndpoint(
            url=f"https://{service.auth_key}.example", disable_ssl_verification=True
        ),
    )
    monkeypatch.setattr("watson_cli.handler.resolve_authenticator", lambda auth_key: authenticator)


def test_build_client_uses_version_only_for_versioned_services(monkeypatch) -> None:
    authenticator = object()
    _patch_sources(monkeypatch, authenticator)

    versioned = build_client(get_registry().resolve("nlu-v1"), version="2020-01-01", timeout=5)
    assert versioned.version == "2020-01-01"
    assert versioned.service_url == "https://natural_language_understanding.example"
    assert versioned.authenticator is authenticator
    assert versioned.disable_ssl_verification is True
    assert versioned.timeout == 5

    unversioned = build_client(get_registry().resolve("nlc-v1"), version="2020-01-01", timeout=5)
    assert unversioned.version is None


def test_context_reads_common_flags() -> None:
    service = get_registry().resolve("vr-v3")
    operation = service.operation("get-core-ml-model")
    context = InvocationContext.from_values(
        service,
        operation,
        {"classifier_id": "x", "version": "2020-01-01", "output_file": "model.mlmodel"},
    )
    assert context.service_version == "2020-01-01"
    assert context.output_format == "table"
    assert context.jmes_query is None
    assert context.output_file == "model.mlmodel"
    assert context.set_names == frozenset({"classifier_id", "version", "output_file"})
