"""Bind supplied command-line flags onto an operation's options payload."""

from __future__ import annotations

import json
import logging
import os
from contextlib import ExitStack
from typing import IO, Any, Mapping

from pydantic import ValidationError

from watson_cli.errors import DecodeError, LocalIOError, UsageError
from watson_cli.options import OperationOptions, options_model
from watson_cli.registry import FlagKind, FlagSpec, OperationSpec

logger = logging.getLogger(__name__)

_JSON_KINDS = (FlagKind.JSON_OBJECT, FlagKind.JSON_ARRAY)


def bind(
    operation: OperationSpec,
    values: Mapping[str, Any],
    *,
    uploads: ExitStack,
    options: OperationOptions | None = None,
) -> OperationOptions:
    """Populate ``options`` from ``values``, which holds only the flags the user supplied.

    Flags are visited in registry declaration order and each supplied flag results in
    exactly one ``set_field`` call. Streams opened for file flags are registered on
    ``uploads`` so the caller releases them once the request finishes.
    """
    payload = options if options is not None else options_model(operation)()
    for flag in operation.flags:
        if flag.name not in values or flag.kind is FlagKind.OUTPUT_PATH:
            continue
        value = _convert(flag, values[flag.name], uploads)
        try:
            payload.set_field(flag.name, value)
        except ValidationError as exc:
            message = exc.errors()[0].get("msg", str(exc))
            if flag.kind in _JSON_KINDS:
                raise DecodeError(f"--{flag.name}: {message}") from exc
            raise UsageError(f"--{flag.name}: {message}") from exc
    logger.debug("bound flags for %s: %s", operation.verb, sorted(payload.model_fields_set))
    return payload


def _convert(flag: FlagSpec, raw: Any, uploads: ExitStack) -> Any:
    if flag.kind is FlagKind.JSON_OBJECT:
        decoded = decode_json(flag, raw, expect=dict)
        if flag.uploads:
            return _open_keyed(flag, decoded, uploads)
        return decoded
    if flag.kind is FlagKind.JSON_ARRAY:
        decoded = decode_json(flag, raw, expect=list)
        if flag.uploads:
            return _open_records(flag, decoded, uploads)
        _check_items(flag, decoded)
        return decoded
    if flag.kind is FlagKind.FILE_PATH:
        return _open(flag, raw, uploads)
    return raw


def decode_json(flag: FlagSpec, raw: str, *, expect: type) -> Any:
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"--{flag.name}: invalid JSON: {exc}") from exc
    if not isinstance(decoded, expect):
        noun = "object" if expect is dict else "array"
        raise DecodeError(f"--{flag.name}: expected a JSON {noun}")
    return decoded


def _check_items(flag: FlagSpec, items: list) -> None:
    expect = str if flag.item == "string" else dict
    for index, item in enumerate(items):
        if not isinstance(item, expect):
            noun = "string" if expect is str else "object"
            raise DecodeError(f"--{flag.name}: element {index} must be a JSON {noun}")


def _open(flag: FlagSpec, path: str, stack: ExitStack) -> IO[bytes]:
    try:
        stream = open(os.path.expanduser(path), "rb")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise LocalIOError(f"--{flag.name}: cannot open {path}: {reason}") from exc
    return stack.enter_context(stream)


def _open_keyed(flag: FlagSpec, mapping: dict, uploads: ExitStack) -> dict[str, IO[bytes]]:
    for key, path in mapping.items():
        if not isinstance(path, str) or not path:
            raise DecodeError(f"--{flag.name}: value for {key!r} must be a file path")
    streams: dict[str, IO[bytes]] = {}
    with ExitStack() as opened:
        for key, path in mapping.items():
            streams[key] = _open(flag, path, opened)
        uploads.push(opened.pop_all())
    return streams


def _open_records(flag: FlagSpec, records: list, uploads: ExitStack) -> list[dict[str, Any]]:
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not isinstance(record.get("data"), str):
            raise DecodeError(f"--{flag.name}: element {index} needs a 'data' file path")
    files: list[dict[str, Any]] = []
    with ExitStack() as opened:
        for record in records:
            path = record["data"]
            files.append(
                {
                    "data": _open(flag, path, opened),
                    "filename": record.get("filename") or os.path.basename(path),
                    "content_type": record.get("content_type"),
                }
            )
        uploads.push(opened.pop_all())
    return files
