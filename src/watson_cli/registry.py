"""Declarative command registry: services, operations and their flags."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from watson_cli.errors import RegistryError, UsageError

OUTPUT_FORMATS = ("json", "yaml", "table")
DEFAULT_OUTPUT_FORMAT = "table"
RESERVED_FLAG_NAMES = frozenset({"output", "jmes_query", "version", "output_file"})

_PATH_PARAM = re.compile(r"{(\w+)}")
_QUERY_METHODS = frozenset({"GET", "DELETE", "HEAD"})


class FlagKind(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING_LIST = "stringList"
    JSON_OBJECT = "jsonObject"
    JSON_ARRAY = "jsonArray"
    FILE_PATH = "filePath"
    OUTPUT_PATH = "outputPath"


class Location(str, Enum):
    """Where a bound flag value goes in the outbound request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    FORM = "form"
    FILE = "file"
    HEADER = "header"
    RAW = "raw"
    # Annotate the multipart part named by ``FlagSpec.wire``.
    FILENAME = "filename"
    CONTENT_TYPE = "content_type"


class ReturnKind(str, Enum):
    VALUE = "value"
    STREAM = "stream"
    ACK = "ack"


@dataclass(frozen=True)
class FlagSpec:
    name: str
    kind: FlagKind = FlagKind.STRING
    short: str | None = None
    default: object | None = None
    required: bool = False
    help: str = ""
    choices: tuple[str, ...] | None = None
    location: Location | None = None
    wire: str | None = None
    item: str = "object"
    uploads: bool = False
    media_type: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise RegistryError("flag name must not be empty")
        if self.short is not None and len(self.short) != 1:
            raise RegistryError(f"--{self.name}: short flag must be a single character")
        if self.required and self.default is not None:
            raise RegistryError(f"--{self.name}: a required flag cannot carry a default")
        if self.uploads and self.kind not in (FlagKind.JSON_OBJECT, FlagKind.JSON_ARRAY):
            raise RegistryError(f"--{self.name}: only JSON flags can describe uploads")
        if self.item not in ("object", "string"):
            raise RegistryError(f"--{self.name}: item must be 'object' or 'string'")

    @property
    def wire_name(self) -> str:
        return self.wire or self.name


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(_PATH_PARAM.findall(self.path))


VERSION_FLAG = FlagSpec(
    "version",
    short="v",
    help='The API version date to use with the service, in "YYYY-MM-DD" format.',
)
OUTPUT_FLAG = FlagSpec(
    "output",
    default=DEFAULT_OUTPUT_FORMAT,
    choices=OUTPUT_FORMATS,
    help="Choose an output format - can be `json`, `yaml`, or `table`.",
)
JMES_QUERY_FLAG = FlagSpec(
    "jmes_query",
    short="q",
    help="Provide a JMESPath query to customize output.",
)
OUTPUT_FILE_FLAG = FlagSpec(
    "output_file",
    FlagKind.OUTPUT_PATH,
    required=True,
    help="Filename/path to write the resulting output to.",
)


def _resolve_location(flag: FlagSpec, endpoint: Endpoint) -> FlagSpec:
    if flag.location is not None:
        location = flag.location
    elif flag.name in endpoint.path_params:
        location = Location.PATH
    elif flag.kind is FlagKind.FILE_PATH or flag.uploads:
        location = Location.FILE
    elif endpoint.method.upper() in _QUERY_METHODS:
        location = Location.QUERY
    else:
        location = Location.BODY
    if location is flag.location:
        return flag
    return dataclasses.replace(flag, location=location)


@dataclass(frozen=True)
class OperationSpec:
    verb: str
    short_help: str
    endpoint: Endpoint
    flags: tuple[FlagSpec, ...] = ()
    returns: ReturnKind = ReturnKind.VALUE
    long_help: str = ""
    aliases: tuple[str, ...] = ()
    version_required: bool = True
    # None inherits the owning service's confirm_running setting.
    confirm: bool | None = None
    # Set by the owning ServiceSpec.
    versioned: bool = False

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for flag in self.flags:
            if flag.name in RESERVED_FLAG_NAMES:
                raise RegistryError(f"{self.verb}: --{flag.name} is reserved")
            if flag.name in seen:
                raise RegistryError(f"{self.verb}: duplicate flag --{flag.name}")
            seen.add(flag.name)
        resolved = tuple(_resolve_location(flag, self.endpoint) for flag in self.flags)
        object.__setattr__(self, "flags", resolved)

        by_name = {flag.name: flag for flag in resolved}
        for param in self.endpoint.path_params:
            flag = by_name.get(param)
            if flag is None or flag.location is not Location.PATH:
                raise RegistryError(f"{self.verb}: path parameter {{{param}}} has no flag")
            if not flag.required:
                raise RegistryError(f"{self.verb}: path flag --{param} must be required")
        for flag in resolved:
            if flag.location in (Location.FILENAME, Location.CONTENT_TYPE):
                target = by_name.get(flag.wire or "")
                if target is None or target.kind is not FlagKind.FILE_PATH:
                    raise RegistryError(
                        f"{self.verb}: --{flag.name} must annotate a file flag via wire="
                    )

    @property
    def common_flag_set(self) -> str:
        renders = self.returns is not ReturnKind.ACK
        if self.versioned and renders:
            return "versioned+output"
        if self.versioned:
            return "versioned"
        if renders:
            return "output"
        return "none"

    @property
    def common_flags(self) -> tuple[FlagSpec, ...]:
        suffix: list[FlagSpec] = []
        if self.versioned:
            suffix.append(dataclasses.replace(VERSION_FLAG, required=self.version_required))
        if self.returns is not ReturnKind.ACK:
            suffix.extend((OUTPUT_FLAG, JMES_QUERY_FLAG))
        if self.returns is ReturnKind.STREAM:
            suffix.append(OUTPUT_FILE_FLAG)
        return tuple(suffix)

    @property
    def all_flags(self) -> tuple[FlagSpec, ...]:
        return self.flags + self.common_flags

    @property
    def required_names(self) -> frozenset[str]:
        return frozenset(flag.name for flag in self.all_flags if flag.required)

    @property
    def names(self) -> tuple[str, ...]:
        return (self.verb, *self.aliases)

    def flag(self, name: str) -> FlagSpec:
        for flag in self.all_flags:
            if flag.name == name:
                return flag
        raise KeyError(name)


@dataclass(frozen=True)
class ServiceSpec:
    id: str
    short_help: str
    auth_key: str
    default_url: str
    operations: Mapping[str, OperationSpec]
    aliases: tuple[str, ...] = ()
    long_help: str = ""
    versioned: bool = False
    confirm_running: bool = False

    def __post_init__(self) -> None:
        declared: Iterable[OperationSpec]
        if isinstance(self.operations, Mapping):
            declared = self.operations.values()
        else:
            declared = self.operations
        bound: dict[str, OperationSpec] = {}
        names: set[str] = set()
        for operation in declared:
            clash = names.intersection(operation.names)
            if clash:
                raise RegistryError(f"{self.id}: duplicate operation name {sorted(clash)[0]!r}")
            names.update(operation.names)
            bound[operation.verb] = self._bind(operation)
        object.__setattr__(self, "operations", MappingProxyType(bound))

    def _bind(self, operation: OperationSpec) -> OperationSpec:
        confirm = self.confirm_running if operation.confirm is None else operation.confirm
        if operation.versioned == self.versioned and operation.confirm == confirm:
            return operation
        return dataclasses.replace(operation, versioned=self.versioned, confirm=confirm)

    @property
    def names(self) -> tuple[str, ...]:
        return (self.id, *self.aliases)

    @property
    def usage(self) -> str:
        return f"{self.id} [operation]"

    def operation(self, name: str) -> OperationSpec:
        for operation in self.operations.values():
            if name in operation.names:
                return operation
        raise UsageError(f"unknown operation for {self.id}: {name}")

    def with_operation(self, operation: OperationSpec) -> ServiceSpec:
        bound = self._bind(operation)
        existing = self.operations.get(operation.verb)
        if existing is not None:
            if existing == bound:
                return self
            raise RegistryError(
                f"{self.id}: operation {operation.verb!r} is already registered "
                "with a different definition"
            )
        return dataclasses.replace(self, operations=(*self.operations.values(), bound))


@dataclass(frozen=True)
class RootSpec:
    name: str
    services: Mapping[str, ServiceSpec]
    short_help: str = ""
    long_help: str = ""

    @property
    def usage(self) -> str:
        return f"{self.name} [service] [operation]"


class Registry:
    """Mutable builder for the command tree; frozen once the CLI starts dispatching."""

    def __init__(self, name: str, *, short_help: str = "", long_help: str = "") -> None:
        self._name = name
        self._short_help = short_help
        self._long_help = long_help
        self._services: dict[str, ServiceSpec] = {}
        self._frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise RegistryError("registry is frozen")

    def register(self, service: ServiceSpec) -> ServiceSpec:
        self._check_open()
        existing = self._services.get(service.id)
        if existing is not None:
            if existing == service:
                return existing
            raise RegistryError(
                f"service {service.id!r} is already registered with a different definition"
            )
        for other in self._services.values():
            clash = set(other.names).intersection(service.names)
            if clash:
                raise RegistryError(
                    f"service name {sorted(clash)[0]!r} is used by both {other.id} and {service.id}"
                )
            if other.auth_key == service.auth_key:
                raise RegistryError(
                    f"auth key {service.auth_key!r} is used by both {other.id} and {service.id}"
                )
        self._services[service.id] = service
        return service

    def register_operation(self, operation: OperationSpec, *, under: str) -> OperationSpec:
        self._check_open()
        service = self.resolve(under)
        updated = service.with_operation(operation)
        self._services[service.id] = updated
        return updated.operations[operation.verb]

    def resolve(self, name: str) -> ServiceSpec:
        for service in self._services.values():
            if name in service.names:
                return service
        raise UsageError(f"unknown service: {name}")

    def freeze(self) -> Registry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def root(self) -> RootSpec:
        return RootSpec(
            name=self._name,
            services=MappingProxyType(dict(self._services)),
            short_help=self._short_help,
            long_help=self._long_help,
        )

    def enumerate(self) -> list[tuple[ServiceSpec, OperationSpec | None]]:
        entries: list[tuple[ServiceSpec, OperationSpec | None]] = []
        for service in self._services.values():
            entries.append((service, None))
            entries.extend((service, operation) for operation in service.operations.values())
        return entries


def string(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.STRING, help=help, **kwargs)


def boolean(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.BOOL, help=help, **kwargs)


def integer(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.INT, help=help, **kwargs)


def number(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.FLOAT, help=help, **kwargs)


def strings(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.STRING_LIST, help=help, **kwargs)


def json_object(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.JSON_OBJECT, help=help, **kwargs)


def json_array(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.JSON_ARRAY, help=help, **kwargs)


def file_path(name: str, help: str = "", **kwargs) -> FlagSpec:
    return FlagSpec(name, FlagKind.FILE_PATH, help=help, **kwargs)
