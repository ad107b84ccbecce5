"""Per-operation options payloads built from registry flag declarations."""

from __future__ import annotations

import keyword
from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, create_model

from watson_cli.registry import FlagKind, FlagSpec, OperationSpec


class OperationOptions(BaseModel):
    """Typed record of one operation's parameters; a field is set only when its flag was supplied."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        arbitrary_types_allowed=True,
        protected_namespaces=(),
    )

    def set_field(self, name: str, value: Any) -> None:
        setattr(self, field_name(name), value)

    def supplied(self) -> dict[str, Any]:
        """Return the set fields keyed by flag name, in declaration order."""
        return {
            _flag_name(field): getattr(self, field)
            for field in type(self).model_fields
            if field in self.model_fields_set
        }


def field_name(flag_name: str) -> str:
    if keyword.iskeyword(flag_name) or hasattr(OperationOptions, flag_name):
        return f"{flag_name}_"
    return flag_name


def _flag_name(field: str) -> str:
    if field.endswith("_") and field_name(field[:-1]) == field:
        return field[:-1]
    return field


def _annotation(flag: FlagSpec) -> Any:
    if flag.kind is FlagKind.BOOL:
        return Optional[bool]
    if flag.kind is FlagKind.INT:
        return Optional[int]
    if flag.kind is FlagKind.FLOAT:
        return Optional[float]
    if flag.kind is FlagKind.STRING_LIST:
        return Optional[list[str]]
    if flag.kind is FlagKind.JSON_OBJECT:
        return Optional[dict[str, Any]]
    if flag.kind is FlagKind.JSON_ARRAY:
        if flag.item == "string" and not flag.uploads:
            return Optional[list[str]]
        return Optional[list[dict[str, Any]]]
    if flag.kind is FlagKind.FILE_PATH:
        # Open binary stream.
        return Optional[Any]
    return Optional[str]


def _model_name(operation: OperationSpec) -> str:
    return "".join(part.capitalize() for part in operation.verb.split("-")) + "Options"


@lru_cache(maxsize=None)
def options_model(operation: OperationSpec) -> type[OperationOptions]:
    fields = {
        field_name(flag.name): (_annotation(flag), None)
        for flag in operation.flags
        if flag.kind is not FlagKind.OUTPUT_PATH
    }
    return create_model(_model_name(operation), __base__=OperationOptions, **fields)
