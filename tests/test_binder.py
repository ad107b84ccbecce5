from __future__ import annotations

import json
from contextlib import ExitStack

import pytest

from watson_cli.binder import bind, decode_json
from watson_cli.errors import DecodeError, LocalIOError
from watson_cli.options import OperationOptions, field_name, options_model
from watson_cli.registry import FlagKind, FlagSpec, OperationSpec
from watson_cli.services import get_registry

_OPERATIONS = [
    (service, operation)
    for service, operation in get_registry().enumerate()
    if operation is not None
]


def _ids(entry) -> str:
    service, operation = entry
    return f"{service.id} {operation.verb}"


def _sample(flag: FlagSpec, upload_path: str, *, zero: bool = False):
    kind = flag.kind
    if kind is FlagKind.BOOL:
        return False if zero else True
    if kind is FlagKind.INT:
        return 0 if zero else 3
    if kind is FlagKind.FLOAT:
        return 0.0 if zero else 0.5
    if kind is FlagKind.STRING_LIST:
        return [] if zero else ["a", "b"]
    if kind is FlagKind.JSON_OBJECT:
        if zero:
            return "{}"
        return json.dumps({"a": upload_path} if flag.uploads else {"k": "v"})
    if kind is FlagKind.JSON_ARRAY:
        if zero:
            return "[]"
        if flag.uploads:
            return json.dumps([{"data": upload_path}])
        return json.dumps(["a"] if flag.item == "string" else [{"k": "v"}])
    if kind is FlagKind.FILE_PATH:
        return upload_path
    return "" if zero else "x"


def _required_values(operation: OperationSpec, upload_path: str) -> dict:
    return {
        flag.name: _sample(flag, upload_path)
        for flag in operation.flags
        if flag.required
    }


@pytest.fixture
def setter_calls(monkeypatch) -> list[tuple[str, object]]:
    calls: list[tuple[str, object]] = []
    original = OperationOptions.set_field

    def _spy(self, name, value):  # noqa: ANN001
        calls.append((name, value))
        original(self, name, value)

    monkeypatch.setattr(OperationOptions, "set_field", _spy)
    return calls


@pytest.fixture
def upload_path(tmp_path) -> str:
    path = tmp_path / "upload.bin"
    path.write_bytes(b"payload")
    return str(path)


@pytest.mark.parametrize("entry", _OPERATIONS, ids=_ids)
def test_only_supplied_flags_reach_the_payload(entry, setter_calls, upload_path) -> None:
    _, operation = entry
    required = _required_values(operation, upload_path)
    declared = [flag.name for flag in operation.flags]

    with ExitStack() as uploads:
        options = bind(operation, required, uploads=uploads)
    assert [name for name, _ in setter_calls] == [name for name in declared if name in required]
    assert set(options.supplied()) == set(required)

    for flag in operation.flags:
        if flag.required:
            continue
        setter_calls.clear()
        zero = _sample(flag, upload_path, zero=True)
        values = {**required, flag.name: zero}
        with ExitStack() as uploads:
            options = bind(operation, values, uploads=uploads)

        names = [name for name, _ in setter_calls]
        assert names == [name for name in declared if name in values]
        assert names.count(flag.name) == 1
        bound = dict(setter_calls)[flag.name]
        if flag.kind in (FlagKind.JSON_OBJECT, FlagKind.JSON_ARRAY):
            assert bound == json.loads(zero)
        elif flag.kind is not FlagKind.FILE_PATH:
            assert bound == zero
        assert flag.name in options.supplied()


def test_alternate_intents_false_is_bound(setter_calls) -> None:
    operation = get_registry().resolve("assistant-v1").operation("message")

    with ExitStack() as uploads:
        options = bind(
            operation,
            {"workspace_id": "ws-1", "alternate_intents": False},
            uploads=uploads,
        )

    assert setter_calls == [("workspace_id", "ws-1"), ("alternate_intents", False)]
    assert options.supplied() == {"workspace_id": "ws-1", "alternate_intents": False}
    assert options.model_fields_set == {"workspace_id", "alternate_intents"}


def test_json_object_flag_decodes_to_mapping() -> None:
    operation = get_registry().resolve("nlu-v1").operation("analyze")

    with ExitStack() as uploads:
        options = bind(operation, {"features": '{"k":"v"}', "text": "foo"}, uploads=uploads)

    assert options.supplied()["features"] == {"k": "v"}


@pytest.mark.parametrize("raw", ['{"k":', "not json", "[1, 2]"])
def test_malformed_json_object_raises_decode_error(raw) -> None:
    operation = get_registry().resolve("nlu-v1").operation("analyze")
    with ExitStack() as uploads:
        with pytest.raises(DecodeError, match="--features"):
            bind(operation, {"features": raw}, uploads=uploads)


def test_json_array_checks_element_types() -> None:
    flag = FlagSpec("collection", FlagKind.JSON_ARRAY)
    assert decode_json(flag, '[{"text": "a"}]', expect=list) == [{"text": "a"}]

    operation = get_registry().resolve("nlc-v1").operation("classify-collection")
    with ExitStack() as uploads:
        with pytest.raises(DecodeError, match="element 0"):
            bind(operation, {"classifier_id": "c1", "collection": '["a"]'}, uploads=uploads)


def test_missing_file_raises_local_io_error(tmp_path) -> None:
    operation = get_registry().resolve("nlc-v1").operation("create-classifier")
    metadata = tmp_path / "metadata.json"
    metadata.write_text("{}", encoding="utf-8")
    values = {
        "training_metadata": str(metadata),
        "training_data": str(tmp_path / "missing.csv"),
    }
    with ExitStack() as uploads:
        with pytest.raises(LocalIOError, match="--training_data: cannot open"):
            bind(operation, values, uploads=uploads)


def test_keyed_upload_failure_opens_nothing(tmp_path, monkeypatch) -> None:
    readable = tmp_path / "dogs.zip"
    readable.write_bytes(b"zip")
    opened = []

    def _tracking_open(path, mode="r", *args, **kwargs):  # noqa: ANN001
        stream = open(path, mode, *args, **kwargs)
        opened.append(stream)
        return stream

    monkeypatch.setattr("watson_cli.binder.open", _tracking_open, raising=False)
    operation = get_registry().resolve("vr-v3").operation("create-classifier")
    positive = json.dumps({"dogs": str(readable), "cats": str(tmp_path / "missing.zip")})

    with ExitStack() as uploads:
        with pytest.raises(LocalIOError, match="--positive_examples"):
            bind(operation, {"name": "pets", "positive_examples": positive}, uploads=uploads)
        assert opened and all(stream.closed for stream in opened)


def test_keyed_upload_binds_open_streams(tmp_path) -> None:
    dogs = tmp_path / "dogs.zip"
    cats = tmp_path / "cats.zip"
    dogs.write_bytes(b"d")
    cats.write_bytes(b"c")
    operation = get_registry().resolve("vr-v3").operation("create-classifier")
    positive = json.dumps({"dogs": str(dogs), "cats": str(cats)})

    with ExitStack() as uploads:
        options = bind(operation, {"name": "pets", "positive_examples": positive}, uploads=uploads)
        streams = options.supplied()["positive_examples"]
        assert list(streams) == ["dogs", "cats"]
        assert streams["dogs"].read() == b"d"
    assert streams["dogs"].closed and streams["cats"].closed


def test_upload_records_default_filename(tmp_path) -> None:
    image = tmp_path / "cat.jpg"
    image.write_bytes(b"jpg")
    operation = get_registry().resolve("vr-v4").operation("analyze")
    flag = next(flag for flag in operation.flags if flag.uploads)
    values = _required_values(operation, str(image))
    values[flag.name] = json.dumps([{"data": str(image), "content_type": "image/jpeg"}])

    with ExitStack() as uploads:
        options = bind(operation, values, uploads=uploads)
        records = options.supplied()[flag.name]
        assert records[0]["filename"] == "cat.jpg"
        assert records[0]["content_type"] == "image/jpeg"
        assert records[0]["data"].read() == b"jpg"


def test_upload_record_needs_data_path() -> None:
    operation = get_registry().resolve("vr-v4").operation("analyze")
    flag = next(flag for flag in operation.flags if flag.uploads)
    with ExitStack() as uploads:
        with pytest.raises(DecodeError, match="needs a 'data' file path"):
            bind(operation, {flag.name: '[{"filename": "x.jpg"}]'}, uploads=uploads)


def test_options_model_is_cached_and_keyword_safe() -> None:
    operation = get_registry().resolve("discovery-v1").operation("query")
    model = options_model(operation)
    assert options_model(operation) is model
    assert model.__name__ == "QueryOptions"
    assert field_name("return") == "return_"
    assert field_name("json") == "json_"
    assert field_name("text") == "text"

    options = model()
    options.set_field("return", "title")
    assert options.supplied() == {"return": "title"}
