"""HTTP transport for Watson service operations."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping
from urllib.parse import quote

from watson_cli import __version__
from watson_cli.errors import TransportError
from watson_cli.options import OperationOptions
from watson_cli.registry import FlagKind, Location, OperationSpec, ReturnKind

logger = logging.getLogger(__name__)

USER_AGENT = f"watson-cli/{__version__}"
STREAM_CHUNK_SIZE = 64 * 1024
_ERROR_FIELDS = ("error", "errors", "message", "description")


@dataclass
class PreparedCall:
    method: str
    path: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: dict[str, Any] | None = None
    data: Any = None
    files: list[tuple[str, tuple[str, Any, str | None]]] = field(default_factory=list)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return ",".join(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _stream_name(stream: Any) -> str:
    return os.path.basename(str(getattr(stream, "name", "") or "upload"))


def compose_request(
    operation: OperationSpec,
    supplied: Mapping[str, Any],
    *,
    version: str | None = None,
) -> PreparedCall:
    """Place each supplied value where its flag's location says it belongs."""
    endpoint = operation.endpoint
    call = PreparedCall(method=endpoint.method.upper(), path=endpoint.path)
    call.headers.update(dict(endpoint.headers))
    if version is not None:
        call.params["version"] = version

    flags = {flag.name: flag for flag in operation.flags}
    body: dict[str, Any] = {}
    form: dict[str, str] = {}
    part_meta: dict[str, dict[str, str]] = {}
    media_type: str | None = None
    for name, value in supplied.items():
        flag = flags[name]
        if flag.location in (Location.FILENAME, Location.CONTENT_TYPE):
            part_meta.setdefault(flag.wire_name, {})[flag.location.value] = value

    for name, value in supplied.items():
        flag = flags[name]
        location = flag.location
        if location is Location.PATH:
            placeholder = "{" + flag.name + "}"
            call.path = call.path.replace(placeholder, quote(str(value), safe=""))
        elif location is Location.QUERY:
            call.params[flag.wire_name] = _scalar(value)
        elif location is Location.HEADER:
            call.headers[flag.wire_name] = _scalar(value)
        elif location is Location.BODY:
            body[flag.wire_name] = value
        elif location is Location.FORM:
            form[flag.wire_name] = _scalar(value)
        elif location is Location.RAW:
            media_type = flag.media_type or media_type
            if isinstance(value, (dict, list)):
                call.json = value
            else:
                call.data = value.encode("utf-8") if isinstance(value, str) else value
        elif location is Location.FILE:
            meta = part_meta.get(flag.name, {})
            call.files.extend(_file_parts(flag.wire_name, flag.kind, value, meta))

    if call.files:
        form.update({key: _scalar(value) for key, value in body.items()})
        body = {}
    if form:
        call.data = form
    if body:
        call.json = body
    if media_type is not None:
        call.headers.setdefault("Content-Type", media_type)
    if operation.returns is ReturnKind.VALUE:
        call.headers.setdefault("Accept", "application/json")
    return call


def _file_parts(
    wire: str, kind: FlagKind, value: Any, meta: Mapping[str, str]
) -> list[tuple[str, tuple[str, Any, str | None]]]:
    if kind is FlagKind.FILE_PATH:
        filename = meta.get("filename") or _stream_name(value)
        return [(wire, (filename, value, meta.get("content_type")))]
    if isinstance(value, dict):
        parts = []
        for key, stream in value.items():
            part = wire.format(key=key) if "{key}" in wire else key
            parts.append((part, (_stream_name(stream), stream, "application/octet-stream")))
        return parts
    return [
        (wire, (record["filename"], record["data"], record.get("content_type")))
        for record in value
    ]


@dataclass
class ServiceClient:
    service_url: str
    authenticator: Any = None
    version: str | None = None
    timeout: float = 60.0
    disable_ssl_verification: bool = False

    def __post_init__(self) -> None:
        try:
            import requests
        except Exception as exc:  # pragma: no cover
            raise TransportError(f"requests stack unavailable: {exc}") from exc

        self._requests = requests
        self._session = requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.service_url.rstrip('/')}/{path.lstrip('/')}"

    def _authenticate(self, headers: dict[str, str]) -> None:
        if self.authenticator is None:
            return
        try:
            self.authenticator.authenticate({"headers": headers})
        except Exception as exc:
            raise TransportError(f"authentication failed: {exc}") from exc

    def invoke(self, operation: OperationSpec, options: OperationOptions) -> Any:
        """Perform the single HTTP exchange for ``operation``.

        Returns the decoded body for value operations, an iterator of byte chunks
        for stream operations and ``None`` for acknowledgement-only operations.
        """
        call = compose_request(operation, options.supplied(), version=self.version)
        headers = {"User-Agent": USER_AGENT, **call.headers}
        self._authenticate(headers)
        streaming = operation.returns is ReturnKind.STREAM
        url = self._url(call.path)
        logger.debug("%s %s", call.method, url)
        try:
            response = self._session.request(
                call.method,
                url,
                params=call.params or None,
                headers=headers,
                json=call.json,
                data=call.data,
                files=call.files or None,
                timeout=self.timeout,
                verify=not self.disable_ssl_verification,
                stream=streaming,
            )
        except self._requests.RequestException as exc:
            raise TransportError(f"{operation.verb}: {exc}") from exc
        logger.debug("response status %s", response.status_code)

        if response.status_code >= 400:
            error = self._error(response)
            response.close()
            raise error
        if operation.returns is ReturnKind.ACK:
            response.close()
            return None
        if streaming:
            return self._iter_stream(operation, response)
        return self._decode(response)

    def _iter_stream(self, operation: OperationSpec, response: Any) -> Iterator[bytes]:
        try:
            yield from response.iter_content(chunk_size=STREAM_CHUNK_SIZE)
        except self._requests.RequestException as exc:
            raise TransportError(f"{operation.verb}: download interrupted: {exc}") from exc
        finally:
            response.close()

    @staticmethod
    def _decode(response: Any) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error(response: Any) -> TransportError:
        body: object | None = None
        detail: object | None = None
        try:
            body = response.json()
        except Exception:
            body = None
        if isinstance(body, dict):
            for key in _ERROR_FIELDS:
                candidate = body.get(key)
                if isinstance(candidate, list) and candidate:
                    first = candidate[0]
                    candidate = first.get("message") if isinstance(first, dict) else first
                if isinstance(candidate, str) and candidate:
                    detail = candidate
                    break
        if isinstance(detail, str):
            message = f"{response.status_code} {detail}"
        else:
            message = f"{response.status_code} {response.text or response.reason}"
        return TransportError(message, status_code=response.status_code, detail=detail, body=body)

