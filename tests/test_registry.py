from __future__ import annotations

import pytest

from watson_cli.errors import RegistryError, UsageError
from watson_cli.registry import (
    Endpoint,
    FlagKind,
    FlagSpec,
    Location,
    OperationSpec,
    Registry,
    ReturnKind,
    ServiceSpec,
    file_path,
    json_object,
    string,
)
from watson_cli.services import build_registry, get_registry


def _service(
    service_id: str = "demo-v1", *, aliases=(), auth_key: str = "demo", **kwargs
) -> ServiceSpec:
    operations = kwargs.pop(
        "operations",
        (
            OperationSpec(
                "get-thing",
                "Get a thing",
                Endpoint("GET", "/v1/things/{thing_id}"),
                flags=(string("thing_id", "Thing ID.", required=True),),
            ),
        ),
    )
    return ServiceSpec(
        id=service_id,
        short_help="Demo service",
        auth_key=auth_key,
        default_url="https://example.test/api",
        operations=operations,
        aliases=tuple(aliases),
        **kwargs,
    )


def test_locations_follow_method_and_path() -> None:
    op = OperationSpec(
        "update-thing",
        "Update a thing",
        Endpoint("POST", "/v1/things/{thing_id}"),
        flags=(
            string("thing_id", required=True),
            string("name"),
            file_path("data"),
            string("mode", location=Location.QUERY),
        ),
    )
    locations = {flag.name: flag.location for flag in op.flags}
    assert locations == {
        "thing_id": Location.PATH,
        "name": Location.BODY,
        "data": Location.FILE,
        "mode": Location.QUERY,
    }

    listing = OperationSpec(
        "list-things", "List things", Endpoint("GET", "/v1/things"), flags=(string("name"),)
    )
    assert listing.flag("name").location is Location.QUERY


def test_reserved_flag_names_are_rejected() -> None:
    with pytest.raises(RegistryError, match="reserved"):
        OperationSpec("x", "x", Endpoint("GET", "/x"), flags=(string("output"),))


def test_duplicate_flag_names_are_rejected() -> None:
    with pytest.raises(RegistryError, match="duplicate flag"):
        OperationSpec("x", "x", Endpoint("GET", "/x"), flags=(string("a"), string("a")))


def test_path_parameter_needs_required_flag() -> None:
    with pytest.raises(RegistryError, match="path parameter"):
        OperationSpec("x", "x", Endpoint("GET", "/x/{x_id}"))
    with pytest.raises(RegistryError, match="must be required"):
        OperationSpec("x", "x", Endpoint("GET", "/x/{x_id}"), flags=(string("x_id"),))


def test_part_annotations_must_target_file_flag() -> None:
    with pytest.raises(RegistryError, match="annotate a file flag"):
        OperationSpec(
            "x",
            "x",
            Endpoint("POST", "/x"),
            flags=(
                string("data"),
                string("data_filename", location=Location.FILENAME, wire="data"),
            ),
        )


def test_flag_validation() -> None:
    with pytest.raises(RegistryError, match="single character"):
        FlagSpec("name", short="nm")
    with pytest.raises(RegistryError, match="cannot carry a default"):
        FlagSpec("name", required=True, default="x")
    with pytest.raises(RegistryError, match="only JSON flags"):
        FlagSpec("name", FlagKind.STRING, uploads=True)


def test_common_flags_depend_on_versioning_and_return_kind() -> None:
    value_op = OperationSpec("get", "get", Endpoint("GET", "/x"))
    ack_op = OperationSpec("delete", "delete", Endpoint("DELETE", "/x"), returns=ReturnKind.ACK)
    stream_op = OperationSpec(
        "download", "download", Endpoint("GET", "/x"), returns=ReturnKind.STREAM
    )

    unversioned = _service(operations=(value_op, ack_op, stream_op))
    assert unversioned.operations["get"].common_flag_set == "output"
    assert unversioned.operations["delete"].common_flag_set == "none"
    assert [flag.name for flag in unversioned.operations["download"].common_flags] == [
        "output",
        "jmes_query",
        "output_file",
    ]

    versioned = _service(operations=(value_op, ack_op), versioned=True)
    get = versioned.operations["get"]
    assert get.common_flag_set == "versioned+output"
    assert [flag.name for flag in get.common_flags] == ["version", "output", "jmes_query"]
    assert get.flag("version").required is True
    assert get.flag("version").short == "v"
    assert get.flag("jmes_query").short == "q"
    assert versioned.operations["delete"].common_flag_set == "versioned"


def test_version_can_be_optional_per_operation() -> None:
    op = OperationSpec("get", "get", Endpoint("GET", "/x"), version_required=False)
    service = _service(operations=(op,), versioned=True)
    assert service.operations["get"].flag("version").required is False
    assert "version" not in service.operations["get"].required_names


def test_service_binds_confirm_setting() -> None:
    explicit = OperationSpec("quiet", "quiet", Endpoint("GET", "/q"), confirm=False)
    inherited = OperationSpec("loud", "loud", Endpoint("GET", "/l"))
    service = _service(operations=(explicit, inherited), confirm_running=True)
    assert service.operations["quiet"].confirm is False
    assert service.operations["loud"].confirm is True


def test_register_is_idempotent_and_rejects_conflicts() -> None:
    registry = Registry("watson")
    service = _service(aliases=("d1",))
    assert registry.register(service) is service
    assert registry.register(_service(aliases=("d1",))) is service

    with pytest.raises(RegistryError, match="different definition"):
        registry.register(_service(aliases=("other",)))
    with pytest.raises(RegistryError, match="'d1'"):
        registry.register(_service("second-v1", aliases=("d1",), auth_key="second"))
    with pytest.raises(RegistryError, match="auth key"):
        registry.register(_service("second-v1", auth_key="demo"))


def test_register_operation_extends_service() -> None:
    registry = Registry("watson")
    registry.register(_service(versioned=True))
    extra = OperationSpec("list-things", "List things", Endpoint("GET", "/v1/things"))

    bound = registry.register_operation(extra, under="demo-v1")

    assert bound.versioned is True
    assert list(registry.resolve("demo-v1").operations) == ["get-thing", "list-things"]
    assert registry.register_operation(extra, under="demo-v1") == bound
    with pytest.raises(RegistryError, match="already registered"):
        registry.register_operation(
            OperationSpec("list-things", "Other", Endpoint("GET", "/v1/other")), under="demo-v1"
        )


def test_frozen_registry_rejects_changes() -> None:
    registry = Registry("watson").freeze()
    assert registry.frozen
    with pytest.raises(RegistryError, match="frozen"):
        registry.register(_service())


def test_resolve_by_alias_and_unknown_names() -> None:
    registry = Registry("watson")
    registry.register(_service(aliases=("d1",)))
    assert registry.resolve("d1") is registry.resolve("demo-v1")
    with pytest.raises(UsageError, match="unknown service"):
        registry.resolve("nope")
    with pytest.raises(UsageError, match="unknown operation"):
        registry.resolve("d1").operation("nope")


def test_enumerate_lists_each_service_before_its_operations() -> None:
    registry = get_registry()
    entries = registry.enumerate()
    seen_services: list[str] = []
    for service, operation in entries:
        if operation is None:
            seen_services.append(service.id)
        else:
            assert seen_services[-1] == service.id
    assert seen_services == list(registry.root().services)


def test_registry_build_is_deterministic() -> None:
    first = build_registry()
    second = build_registry()

    def _names(registry: Registry) -> list[str]:
        return [
            service.id if operation is None else f"{service.id} {operation.verb}"
            for service, operation in registry.enumerate()
        ]

    assert _names(first) == _names(second)
    assert first.frozen and second.frozen


def test_builtin_services_use_distinct_credentials() -> None:
    services = list(get_registry().root().services.values())
    assert len(services) == 13
    assert len({service.auth_key for service in services}) == len(services)


def test_keyed_upload_flag_shape() -> None:
    op = get_registry().resolve("vr-v3").operation("create-classifier")
    flag = op.flag("positive_examples")
    assert flag.kind is FlagKind.JSON_OBJECT
    assert flag.uploads is True
    assert flag.location is Location.FILE
    assert flag.wire_name == "{key}_positive_examples"


def test_json_object_helper_defaults() -> None:
    flag = json_object("features")
    assert flag.kind is FlagKind.JSON_OBJECT
    assert flag.required is False
    assert flag.wire_name == "features"
