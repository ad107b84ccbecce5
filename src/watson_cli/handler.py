"""Shared handler that runs one registered operation end to end."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Any, Mapping, TextIO

from watson_cli.auth import resolve_authenticator, resolve_service_url
from watson_cli.binder import bind
from watson_cli.cli.config import CLIConfig
from watson_cli.client import ServiceClient
from watson_cli.errors import EXIT_SUCCESS
from watson_cli.options import OperationOptions
from watson_cli.registry import DEFAULT_OUTPUT_FORMAT, OperationSpec, ReturnKind, ServiceSpec
from watson_cli.render import Renderer

logger = logging.getLogger(__name__)


@dataclass
class InvocationContext:
    service: ServiceSpec
    operation: OperationSpec
    # Supplied flags only, keyed by flag name.
    values: dict[str, Any]
    options: OperationOptions | None = None
    authenticator: Any = None
    service_version: str | None = None
    output_format: str = DEFAULT_OUTPUT_FORMAT
    jmes_query: str | None = None
    output_file: str | None = None

    @property
    def set_names(self) -> frozenset[str]:
        return frozenset(self.values)

    @classmethod
    def from_values(
        cls, service: ServiceSpec, operation: OperationSpec, values: Mapping[str, Any]
    ) -> InvocationContext:
        return cls(
            service=service,
            operation=operation,
            values=dict(values),
            service_version=values.get("version"),
            output_format=values.get("output", DEFAULT_OUTPUT_FORMAT),
            jmes_query=values.get("jmes_query"),
            output_file=values.get("output_file"),
        )


def build_client(service: ServiceSpec, *, version: str | None, timeout: float) -> ServiceClient:
    endpoint = resolve_service_url(service)
    authenticator = resolve_authenticator(service.auth_key)
    return ServiceClient(
        service_url=endpoint.url,
        authenticator=authenticator,
        version=version if service.versioned else None,
        timeout=timeout,
        disable_ssl_verification=endpoint.disable_ssl_verification,
    )


def run_operation(
    service: ServiceSpec,
    operation: OperationSpec,
    values: Mapping[str, Any],
    *,
    config: CLIConfig,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    context = InvocationContext.from_values(service, operation, values)
    renderer = Renderer(stdout, stderr)
    if operation.confirm and context.output_format == "table" and config.progress_notices:
        print(f"Running {service.id} {operation.verb}...", file=stderr)

    client = build_client(service, version=context.service_version, timeout=config.timeout)
    context.authenticator = client.authenticator
    logger.debug("invoking %s %s with %s", service.id, operation.verb, sorted(context.set_names))

    with ExitStack() as uploads:
        context.options = bind(operation, context.values, uploads=uploads)
        result = client.invoke(operation, context.options)

    if operation.returns is ReturnKind.ACK:
        renderer.ok()
    elif operation.returns is ReturnKind.STREAM:
        renderer.write_binary(result, context.output_file)
    else:
        renderer.render(result, context.output_format, context.jmes_query)
    return EXIT_SUCCESS
