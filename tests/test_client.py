from __future__ import annotations

import io
import json
import types

import pytest
import requests

from watson_cli.client import USER_AGENT, ServiceClient, compose_request
from watson_cli.errors import TransportError
from watson_cli.options import options_model
from watson_cli.services import get_registry


def _operation(service: str, verb: str):
    return get_registry().resolve(service).operation(verb)


def _options(operation, **values):
    options = options_model(operation)()
    for name, value in values.items():
        options.set_field(name, value)
    return options


def _response(status_code: int = 200, payload=None, *, text: str | None = None):
    if text is None:
        text = "" if payload is None else json.dumps(payload)

    def _json():
        if payload is None:
            raise ValueError("no JSON")
        return payload

    return types.SimpleNamespace(
        status_code=status_code,
        content=text.encode("utf-8"),
        text=text,
        reason="Reason",
        json=_json,
        close=lambda: None,
        iter_content=lambda chunk_size: iter([b"ab", b"cd"]),
    )


class _BearerAuthenticator:
    def authenticate(self, req) -> None:  # noqa: ANN001
        req["headers"]["Authorization"] = "Bearer test-token"


def test_path_and_body_placement() -> None:
    call = compose_request(
        _operation("nlc-v1", "classify"),
        {"classifier_id": "c 1/x", "text": "hello"},
    )
    assert call.method == "POST"
    assert call.path == "/v1/classifiers/c%201%2Fx/classify"
    assert call.json == {"text": "hello"}
    assert call.params == {}


def test_query_values_and_version() -> None:
    call = compose_request(
        _operation("vr-v3", "list-classifiers"),
        {"verbose": False},
        version="2018-03-19",
    )
    assert call.method == "GET"
    assert call.params == {"version": "2018-03-19", "verbose": "false"}
    assert call.json is None


def test_renamed_body_fields_use_wire_names() -> None:
    call = compose_request(
        _operation("assistant-v1", "update-intent"),
        {"workspace_id": "ws", "intent": "greet", "new_intent": "hello"},
    )
    assert call.path == "/v1/workspaces/ws/intents/greet"
    assert call.json == {"intent": "hello"}


def test_keyed_uploads_become_named_parts() -> None:
    dogs = io.BytesIO(b"d")
    cats = io.BytesIO(b"c")
    call = compose_request(
        _operation("vr-v3", "create-classifier"),
        {"name": "pets", "positive_examples": {"dogs": dogs, "cats": cats}},
    )
    assert [name for name, _ in call.files] == ["dogs_positive_examples", "cats_positive_examples"]
    assert call.files[0][1][1] is dogs
    assert call.data == {"name": "pets"}
    assert call.json is None


def test_file_part_annotations() -> None:
    document = io.BytesIO(b"<html/>")
    call = compose_request(
        _operation("lt-v3", "translate-document"),
        {
            "file": document,
            "filename": "page.html",
            "file_content_type": "text/html",
            "model_id": "en-de",
        },
    )
    assert call.files == [("file", ("page.html", document, "text/html"))]
    assert call.data == {"model_id": "en-de"}


def test_raw_audio_with_header_and_joined_query() -> None:
    audio = io.BytesIO(b"RIFF")
    call = compose_request(
        _operation("stt-v1", "recognize"),
        {"audio": audio, "content_type": "audio/wav", "keywords": ["one", "two"]},
    )
    assert call.data is audio
    assert call.headers["Content-Type"] == "audio/wav"
    assert call.params == {"keywords": "one,two"}
    assert call.json is None


def test_invoke_sends_request_and_decodes_json(monkeypatch) -> None:
    client = ServiceClient(
        service_url="https://example.test/api/",
        authenticator=_BearerAuthenticator(),
        version="2019-02-01",
        timeout=5,
    )
    captured: dict[str, object] = {}

    def fake_request(method, url, **kwargs):  # noqa: ANN001
        captured["method"] = method
        captured["url"] = url
        captured.update(kwargs)
        return _response(payload={"top_class": "c1"})

    monkeypatch.setattr(client._session, "request", fake_request)
    operation = _operation("nlc-v1", "classify")

    result = client.invoke(operation, _options(operation, classifier_id="c1", text="hi"))

    assert result == {"top_class": "c1"}
    assert captured["method"] == "POST"
    assert captured["url"] == "https://example.test/api/v1/classifiers/c1/classify"
    assert captured["json"] == {"text": "hi"}
    assert captured["params"] == {"version": "2019-02-01"}
    assert captured["headers"]["Authorization"] == "Bearer test-token"
    assert captured["headers"]["User-Agent"] == USER_AGENT
    assert captured["timeout"] == 5
    assert captured["verify"] is True
    assert captured["stream"] is False


def test_invoke_ack_and_stream_results(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    monkeypatch.setattr(client._session, "request", lambda method, url, **kwargs: _response())

    delete = _operation("nlc-v1", "delete-classifier")
    assert client.invoke(delete, _options(delete, classifier_id="c1")) is None

    download = _operation("vr-v3", "get-core-ml-model")
    chunks = client.invoke(download, _options(download, classifier_id="x"))
    assert b"".join(chunks) == b"abcd"


def test_invoke_returns_text_for_non_json_body(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    monkeypatch.setattr(
        client._session, "request", lambda method, url, **kwargs: _response(text="a,b\n1,2\n")
    )
    operation = _operation("nlc-v1", "list-classifiers")
    assert client.invoke(operation, _options(operation)) == "a,b\n1,2\n"


def test_http_error_maps_to_transport_error(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    monkeypatch.setattr(
        client._session,
        "request",
        lambda method, url, **kwargs: _response(404, {"code": 404, "error": "Model not found"}),
    )
    operation = _operation("nlc-v1", "get-classifier")

    with pytest.raises(TransportError) as exc_info:
        client.invoke(operation, _options(operation, classifier_id="nope"))

    assert str(exc_info.value) == "404 Model not found"
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Model not found"
    assert exc_info.value.body == {"code": 404, "error": "Model not found"}


def test_error_list_and_plain_bodies(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    operation = _operation("nlc-v1", "list-classifiers")

    monkeypatch.setattr(
        client._session,
        "request",
        lambda method, url, **kwargs: _response(400, {"errors": [{"message": "bad input"}]}),
    )
    with pytest.raises(TransportError, match="^400 bad input$"):
        client.invoke(operation, _options(operation))

    monkeypatch.setattr(
        client._session,
        "request",
        lambda method, url, **kwargs: _response(502, text="upstream down"),
    )
    with pytest.raises(TransportError, match="^502 upstream down$"):
        client.invoke(operation, _options(operation))


def test_network_failure_maps_to_transport_error(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")

    def fake_request(method, url, **kwargs):  # noqa: ANN001
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(client._session, "request", fake_request)
    operation = _operation("nlc-v1", "list-classifiers")

    with pytest.raises(TransportError, match="list-classifiers: connection refused"):
        client.invoke(operation, _options(operation))


def test_disable_ssl_verification_is_passed(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api", disable_ssl_verification=True)
    captured: dict[str, object] = {}

    def fake_request(method, url, **kwargs):  # noqa: ANN001
        captured.update(kwargs)
        return _response(payload=[])

    monkeypatch.setattr(client._session, "request", fake_request)
    operation = _operation("nlc-v1", "list-classifiers")
    assert client.invoke(operation, _options(operation)) == []
    assert captured["verify"] is False


def test_plain_text_body_is_sent_as_text_plain() -> None:
    tone = _operation("ta-v3", "tone")
    call = compose_request(tone, {"body": "I am happy"}, version="2017-09-21")
    prepared = requests.Request(
        call.method, f"https://example.test{call.path}", headers=call.headers, data=call.data
    ).prepare()
    assert prepared.headers["Content-Type"] == "text/plain"
    assert prepared.body == b"I am happy"

    for verb in ("profile", "profile-as-csv"):
        call = compose_request(_operation("pi-v3", verb), {"body": "some text"})
        assert call.headers["Content-Type"] == "text/plain"


def test_json_input_and_explicit_content_type() -> None:
    tone = _operation("ta-v3", "tone")
    call = compose_request(tone, {"tone_input": {"text": "I am happy"}})
    assert call.json == {"text": "I am happy"}
    assert call.headers["Content-Type"] == "application/json"

    call = compose_request(tone, {"body": "<p>happy</p>", "content_type": "text/html"})
    assert call.headers["Content-Type"] == "text/html"


def test_value_operations_accept_json_unless_fixed() -> None:
    call = compose_request(_operation("nlc-v1", "list-classifiers"), {})
    assert call.headers["Accept"] == "application/json"

    call = compose_request(_operation("pi-v3", "profile-as-csv"), {"body": "text"})
    assert call.headers["Accept"] == "text/csv"

    call = compose_request(_operation("nlc-v1", "delete-classifier"), {"classifier_id": "c1"})
    assert "Accept" not in call.headers


class _BrokenDownload:
    status_code = 200

    def __init__(self) -> None:
        self.closed = False

    def iter_content(self, chunk_size):  # noqa: ANN001
        yield b"abc"
        raise requests.exceptions.ChunkedEncodingError("connection broken")

    def close(self) -> None:
        self.closed = True


def test_interrupted_download_is_transport_error(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    response = _BrokenDownload()
    monkeypatch.setattr(client._session, "request", lambda method, url, **kwargs: response)
    download = _operation("vr-v3", "get-core-ml-model")

    chunks = client.invoke(download, _options(download, classifier_id="x"))
    assert next(chunks) == b"abc"
    with pytest.raises(TransportError, match="get-core-ml-model: download interrupted"):
        next(chunks)
    assert response.closed is True


def test_completed_download_closes_response(monkeypatch) -> None:
    client = ServiceClient(service_url="https://example.test/api")
    closed: list[bool] = []
    response = _response()
    response.close = lambda: closed.append(True)
    monkeypatch.setattr(client._session, "request", lambda method, url, **kwargs: response)
    download = _operation("vr-v3", "get-core-ml-model")

    assert b"".join(client.invoke(download, _options(download, classifier_id="x"))) == b"abcd"
    assert closed == [True]
