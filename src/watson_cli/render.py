"""Terminal rendering of operation results."""

from __future__ import annotations

import json
import re
from typing import Any, Iterable, TextIO

import jmespath
import yaml
from jmespath.exceptions import JMESPathError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from watson_cli.errors import LocalIOError, RenderError
from watson_cli.registry import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS

NOTHING_TO_SHOW = "Nothing to show."
OK_MARKER = "OK"
NESTED_NOTE = "note: nested values are shown as JSON; use --output json for the full structure"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def normalize_query(query: str) -> str:
    expression = query.strip()
    if expression.startswith("."):
        expression = expression[1:]
    return expression


def project(value: Any, query: str | None) -> Any:
    if not query:
        return value
    expression = normalize_query(query)
    if not expression:
        return value
    try:
        return jmespath.search(expression, value)
    except JMESPathError as exc:
        raise RenderError(f"invalid JMESPath query {query!r}: {exc}") from exc


def column_for(query: str | None) -> str:
    """Header used for scalar results: the last identifier of the query."""
    if not query:
        return "value"
    names = _IDENTIFIER.findall(normalize_query(query))
    return names[-1] if names else "value"


def _cell(value: Any) -> tuple[str, bool]:
    if value is None:
        return "-", False
    if isinstance(value, bool):
        return ("true" if value else "false"), False
    if isinstance(value, (int, float, str)):
        return str(value), False
    if isinstance(value, (list, tuple)) and not value:
        return "-", False
    try:
        return json.dumps(value, separators=(",", ":"), default=str), True
    except (TypeError, ValueError) as exc:
        raise RenderError(f"cannot render table cell: {exc}") from exc


def _columns(rows: Iterable[dict]) -> list[str]:
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def tabulate(value: Any, query: str | None = None) -> tuple[list[str], list[list[Any]]] | None:
    """Reduce ``value`` to column names and raw row values; ``None`` means nothing to show."""
    if value is None or (isinstance(value, (list, tuple)) and not value):
        return None
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, dict) for item in value):
            columns = _columns(value)
            return columns, [[item.get(column) for column in columns] for item in value]
        return [column_for(query)], [[item] for item in value]
    if isinstance(value, dict):
        if not value:
            return None
        lists = [key for key, item in value.items() if isinstance(item, list)]
        if len(lists) == 1:
            key = lists[0]
            items = value[key]
            if not items:
                return None
            shared = {name: item for name, item in value.items() if name != key}
            if all(isinstance(item, dict) for item in items):
                rows = [{**shared, **item} for item in items]
            else:
                rows = [{**shared, key: item} for item in items]
            columns = _columns(rows)
            return columns, [[row.get(column) for column in columns] for row in rows]
        columns = list(value)
        return columns, [[value[column] for column in columns]]
    return [column_for(query)], [[value]]


class Renderer:
    def __init__(self, stdout: TextIO, stderr: TextIO) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def ok(self) -> None:
        print(OK_MARKER, file=self._stdout)

    def render(self, value: Any, fmt: str = DEFAULT_OUTPUT_FORMAT, query: str | None = None) -> None:
        if fmt not in OUTPUT_FORMATS:
            raise RenderError(f"unsupported output format: {fmt}")
        projected = project(value, query)
        if fmt == "json":
            self._render_json(projected)
        elif fmt == "yaml":
            self._render_yaml(projected)
        else:
            self._render_table(projected, query)

    def _render_json(self, value: Any) -> None:
        try:
            text = json.dumps(value, indent=2)
        except (TypeError, ValueError) as exc:
            raise RenderError(f"cannot encode result as JSON: {exc}") from exc
        print(text, file=self._stdout)

    def _render_yaml(self, value: Any) -> None:
        try:
            yaml.safe_dump(value, self._stdout, sort_keys=False)
        except yaml.YAMLError as exc:
            raise RenderError(f"cannot encode result as YAML: {exc}") from exc

    def _render_table(self, value: Any, query: str | None) -> None:
        shape = tabulate(value, query)
        if shape is None:
            print(NOTHING_TO_SHOW, file=self._stdout)
            return
        columns, rows = shape
        table = Table()
        for column in columns:
            table.add_column(Text(str(column)), overflow="fold")
        nested = False
        for row in rows:
            cells = []
            for item in row:
                text, is_nested = _cell(item)
                nested = nested or is_nested
                cells.append(Text(text))
            table.add_row(*cells)
        console = Console(file=self._stdout, highlight=False, soft_wrap=False)
        console.print(table)
        if nested:
            print(NESTED_NOTE, file=self._stderr)

    def write_binary(self, chunks: Iterable[bytes], path: str) -> None:
        """Copy ``chunks`` to ``path``; a failed write leaves the partial file in place."""
        try:
            with open(path, "wb") as handle:
                for chunk in chunks:
                    if chunk:
                        handle.write(chunk)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise LocalIOError(f"cannot write {path}: {reason}") from exc
        self.ok()
        print(f"Output written to {path}", file=self._stdout)
