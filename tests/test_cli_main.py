from __future__ import annotations

import io
import json

import pytest
import requests

from watson_cli.cli.main import _build_parser, main, parse_invocation
from watson_cli.client import ServiceClient
from watson_cli.errors import ConfigError, TransportError, UsageError
from watson_cli.registry import FlagKind
from watson_cli.services import get_registry


class _FakeClient:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.authenticator = object()
        self.calls: list[tuple[object, dict]] = []
        self.versions: list[str | None] = []

    def invoke(self, operation, options):  # noqa: ANN001
        self.calls.append((operation, options.supplied()))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr("watson_cli.cli.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.toml")
    monkeypatch.delenv("WATSON_CLI_TIMEOUT", raising=False)
    monkeypatch.delenv("WATSON_CLI_LOG_LEVEL", raising=False)


@pytest.fixture
def fake_client(monkeypatch) -> _FakeClient:
    client = _FakeClient()

    def _build_client(service, *, version, timeout):  # noqa: ANN001
        client.versions.append(version)
        return client

    monkeypatch.setattr("watson_cli.handler.build_client", _build_client)
    return client


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    rc = main(argv, stdout=out, stderr=err)
    return rc, out.getvalue(), err.getvalue()


def test_message_binds_only_supplied_flags(fake_client) -> None:
    fake_client.result = {"intents": [{"intent": "hello", "confidence": 1}]}

    rc, out, err = _run(
        [
            "assistant-v1",
            "message",
            "--workspace_id",
            "ws-1",
            "--version",
            "2020-01-01",
            "--alternate_intents=false",
        ]
    )

    assert rc == 0
    assert len(fake_client.calls) == 1
    operation, supplied = fake_client.calls[0]
    assert operation.verb == "message"
    assert supplied == {"workspace_id": "ws-1", "alternate_intents": False}
    assert fake_client.versions == ["2020-01-01"]
    assert "hello" in out and "confidence" in out
    assert "Running assistant-v1 message..." in err


def test_missing_required_flag_is_usage_error(fake_client) -> None:
    rc, out, err = _run(["assistant-v1", "message", "--version", "2020-01-01"])
    assert rc == 1
    assert fake_client.calls == []
    assert out == ""
    assert err.startswith("usage error:")
    assert "--workspace_id" in err


def test_classify_renders_json_and_query(fake_client) -> None:
    fake_client.result = {"classifier_id": "c1", "top_class": "greeting", "classes": []}

    rc, out, err = _run(
        ["nlc-v1", "classify", "--classifier_id", "c1", "--text", "hello", "--output", "json"]
    )
    assert rc == 0
    assert json.loads(out) == fake_client.result
    assert fake_client.calls[0][1] == {"classifier_id": "c1", "text": "hello"}
    assert fake_client.versions == [None]

    rc, out, _ = _run(
        [
            "nlc-v1",
            "classify",
            "--classifier_id",
            "c1",
            "--text",
            "hello",
            "--output",
            "json",
            "-q",
            ".top_class",
        ]
    )
    assert rc == 0
    assert json.loads(out) == "greeting"


def test_json_object_flag_is_decoded(fake_client) -> None:
    fake_client.result = {"keywords": []}
    rc, _, _ = _run(
        [
            "nlu-v1",
            "analyze",
            "--features",
            '{"keywords":{}}',
            "--text",
            "foo",
            "--version",
            "2020-01-01",
        ]
    )
    assert rc == 0
    assert len(fake_client.calls) == 1
    assert fake_client.calls[0][1] == {"features": {"keywords": {}}, "text": "foo"}


def test_malformed_json_flag_stops_before_transport(fake_client) -> None:
    rc, _, err = _run(
        ["nlu-v1", "analyze", "--features", '{"keywords":', "--version", "2020-01-01"]
    )
    assert rc == 4
    assert fake_client.calls == []
    assert "decode error: --features: invalid JSON" in err


def test_stream_is_written_to_output_file(fake_client, tmp_path) -> None:
    target = tmp_path / "model.mlmodel"
    fake_client.result = iter([b"\x00\x01", b"\x02"])

    rc, out, err = _run(
        [
            "vr-v3",
            "get-core-ml-model",
            "--classifier_id",
            "x",
            "--version",
            "2020-01-01",
            "--output_file",
            str(target),
            "--output",
            "json",
            "-q",
            "foo",
        ]
    )

    assert rc == 0
    assert target.read_bytes() == b"\x00\x01\x02"
    assert out == f"OK\nOutput written to {target}\n"
    assert err == ""


def test_stream_operation_requires_output_file(fake_client) -> None:
    rc, _, err = _run(
        ["vr-v3", "get-core-ml-model", "--classifier_id", "x", "--version", "2020-01-01"]
    )
    assert rc == 1
    assert "--output_file" in err
    assert fake_client.calls == []


def test_unreadable_keyed_upload_stops_before_transport(fake_client, tmp_path) -> None:
    negative = tmp_path / "neg.zip"
    negative.write_bytes(b"zip")
    rc, _, err = _run(
        [
            "vr-v3",
            "create-classifier",
            "--version",
            "2020-01-01",
            "--name",
            "pets",
            "--positive_examples",
            '{"dogs":"/no/such/file"}',
            "--negative_examples",
            str(negative),
        ]
    )
    assert rc == 5
    assert fake_client.calls == []
    assert "io error: --positive_examples: cannot open /no/such/file" in err


def test_unknown_operation_for_service_is_usage_error(fake_client) -> None:
    rc, _, err = _run(
        [
            "stt-v1",
            "create-classifier",
            "--positive_examples",
            '{"dogs":"/no/such/file"}',
            "--negative_examples",
            "neg.zip",
        ]
    )
    assert rc == 1
    assert fake_client.calls == []
    assert "create-classifier" in err


def test_ack_operation_prints_ok(fake_client) -> None:
    rc, out, _ = _run(["nlc-v1", "delete-classifier", "--classifier_id", "c1"])
    assert rc == 0
    assert out == "OK\n"


def test_confirm_notice_only_for_table_output(fake_client) -> None:
    fake_client.result = {"models": []}
    rc, out, err = _run(["lt-v3", "list-models", "--version", "2018-05-01", "--output", "yaml"])
    assert rc == 0
    assert out == "models: []\n"
    assert "Running" not in err


def test_progress_notices_can_be_disabled(fake_client, tmp_path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("[cli]\nprogress_notices = false\n", encoding="utf-8")
    fake_client.result = {"models": []}
    rc, out, err = _run(
        ["--config", str(config_path), "lt-v3", "list-models", "--version", "2018-05-01"]
    )
    assert rc == 0
    assert out == "Nothing to show.\n"
    assert "Running" not in err


def test_transport_error_is_reported_and_redacted(fake_client) -> None:
    fake_client.error = TransportError("401 invalid apikey=abc123", status_code=401)
    rc, out, err = _run(["nlc-v1", "list-classifiers"])
    assert rc == 2
    assert out == ""
    assert "transport error: 401 invalid apikey=[REDACTED]" in err
    assert "abc123" not in err


def test_missing_credentials_are_config_error(monkeypatch) -> None:
    def _no_credentials(auth_key: str):
        raise ConfigError(f"no credentials found for {auth_key}")

    monkeypatch.setattr("watson_cli.handler.resolve_authenticator", _no_credentials)
    rc, _, err = _run(["nlc-v1", "list-classifiers"])
    assert rc == 3
    assert err.startswith("config error: no credentials found for natural_language_classifier")


def test_no_service_prints_usage(fake_client) -> None:
    rc, out, err = _run([])
    assert rc == 1
    assert err.startswith("usage: watson")
    assert "usage error: a service and operation are required" in err
    assert out == ""


def test_unknown_service_is_usage_error() -> None:
    rc, _, err = _run(["nope-v1", "list"])
    assert rc == 1
    assert err.startswith("usage error:")


def test_invalid_log_level_is_config_error() -> None:
    rc, _, err = _run(["--log-level", "loud", "nlc-v1", "list-classifiers"])
    assert rc == 3
    assert "log_level must be one of" in err


def test_help_exits_zero(capsys) -> None:
    rc, _, _ = _run(["nlc-v1", "classify", "--help"])
    assert rc == 0
    captured = capsys.readouterr()
    assert "--classifier_id" in captured.out
    assert "(required)" in captured.out


def _argv_value(kind: FlagKind) -> str:
    return {
        FlagKind.BOOL: "true",
        FlagKind.INT: "1",
        FlagKind.FLOAT: "0.5",
        FlagKind.STRING_LIST: "a,b",
        FlagKind.JSON_OBJECT: "{}",
        FlagKind.JSON_ARRAY: "[]",
    }.get(kind, "x")


_REQUIRED_CASES = [
    (service.id, operation.verb, flag.name)
    for service, operation in get_registry().enumerate()
    if operation is not None
    for flag in operation.all_flags
    if flag.required
]


@pytest.mark.parametrize(
    "service_id, verb, missing",
    _REQUIRED_CASES,
    ids=[" ".join(case) for case in _REQUIRED_CASES],
)
def test_each_required_flag_is_enforced(service_id, verb, missing) -> None:
    registry = get_registry()
    operation = registry.resolve(service_id).operation(verb)
    argv = [service_id, verb]
    for flag in operation.all_flags:
        if flag.required and flag.name != missing:
            argv.append(f"--{flag.name}={_argv_value(flag.kind)}")

    with pytest.raises(UsageError, match=f"--{missing}"):
        parse_invocation(argv, registry)

    argv.append(f"--{missing}={_argv_value(operation.flag(missing).kind)}")
    invocation = parse_invocation(argv, registry)
    assert invocation.operation == operation
    assert set(invocation.values) == operation.required_names


def test_parser_help_is_stable() -> None:
    first = _build_parser(get_registry()).format_help()
    second = _build_parser(get_registry()).format_help()
    assert first == second
    assert "natural-language-classifier-v1 (nlc-v1)" in first


def _required_argv(operation) -> list[str]:  # noqa: ANN001
    return [
        f"--{flag.name}={_argv_value(flag.kind)}" for flag in operation.all_flags if flag.required
    ]


def test_aliases_resolve_to_the_same_operations() -> None:
    registry = get_registry()
    aliased = [service for service in registry.root().services.values() if service.aliases]
    assert aliased
    for service in aliased:
        for alias in service.aliases:
            assert registry.resolve(alias) is service
            for operation in service.operations.values():
                flags = _required_argv(operation)
                by_alias = parse_invocation([alias, operation.verb, *flags], registry)
                by_id = parse_invocation([service.id, operation.verb, *flags], registry)
                assert by_alias == by_id
                assert by_alias.operation is operation


class _DroppedConnection:
    status_code = 200

    def iter_content(self, chunk_size):  # noqa: ANN001
        yield b"abc"
        raise requests.exceptions.ChunkedEncodingError("connection broken")

    def close(self) -> None:
        pass


def test_interrupted_download_exits_with_transport_code(monkeypatch, tmp_path) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    monkeypatch.setattr(
        client._session, "request", lambda method, url, **kwargs: _DroppedConnection()
    )
    monkeypatch.setattr(
        "watson_cli.handler.build_client", lambda service, *, version, timeout: client
    )
    target = tmp_path / "model.mlmodel"

    rc, out, err = _run(
        [
            "vr-v3",
            "get-core-ml-model",
            "--classifier_id",
            "x",
            "--version",
            "2020-01-01",
            "--output_file",
            str(target),
        ]
    )

    assert rc == 2
    assert out == ""
    assert err.startswith("transport error: get-core-ml-model: download interrupted")
    assert target.read_bytes() == b"abc"


def test_list_flag_help_mentions_comma_splitting(capsys) -> None:
    rc, _, _ = _run(["stt-v1", "recognize", "--help"])
    assert rc == 0
    assert "elements cannot contain commas" in " ".join(capsys.readouterr().out.split())
