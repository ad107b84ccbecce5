"""Command-line interface for watson."""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from typing import Any, Sequence

from watson_cli import __version__
from watson_cli.cli.config import load_cli_config, normalize_log_level
from watson_cli.errors import (
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    UsageError,
    WatsonCLIError,
)
from watson_cli.exporter import plugin_metadata
from watson_cli.handler import run_operation
from watson_cli.registry import FlagKind, FlagSpec, OperationSpec, Registry, ServiceSpec
from watson_cli.services import get_registry

logger = logging.getLogger(__name__)

_SENSITIVE_FIELDS = (
    "apikey",
    "api_key",
    "password",
    "bearer_token",
    "access_token",
    "refresh_token",
    "secret",
    "authorization",
)
_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _cli_version() -> str:
    try:
        return pkg_version("watson-cli")
    except PackageNotFoundError:
        return __version__


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"{self.prog}: {message}")


class _CommaListAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None) -> None:
        current = list(getattr(namespace, self.dest, None) or [])
        current.extend(item.strip() for item in str(values).split(",") if item.strip())
        setattr(namespace, self.dest, current)


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {raw!r}")


def _flag_help(flag: FlagSpec) -> str:
    text = flag.help
    if flag.kind is FlagKind.STRING_LIST:
        note = "Comma separated or repeated; elements cannot contain commas."
        text = f"{text} {note}" if text else note
    if flag.required:
        text = f"{text} (required)" if text else "(required)"
    return text.replace("%", "%%")


def _add_flag(parser: argparse.ArgumentParser, flag: FlagSpec) -> None:
    option_strings = [f"--{flag.name}"]
    if flag.short:
        option_strings.append(f"-{flag.short}")
    kwargs: dict[str, Any] = {
        "dest": flag.name,
        "default": argparse.SUPPRESS,
        "required": flag.required,
        "help": _flag_help(flag),
    }
    if flag.kind is FlagKind.BOOL:
        kwargs.update(nargs="?", const=True, type=_parse_bool, metavar="true|false")
    elif flag.kind is FlagKind.INT:
        kwargs["type"] = int
    elif flag.kind is FlagKind.FLOAT:
        kwargs["type"] = float
    elif flag.kind is FlagKind.STRING_LIST:
        kwargs["action"] = _CommaListAction
    elif flag.choices:
        kwargs["choices"] = flag.choices
    parser.add_argument(*option_strings, **kwargs)


def _add_operation(
    operations: argparse._SubParsersAction, service: ServiceSpec, operation: OperationSpec
) -> None:
    op_parser = operations.add_parser(
        operation.verb,
        aliases=list(operation.aliases),
        help=operation.short_help,
        description=operation.long_help or operation.short_help,
        allow_abbrev=False,
    )
    for flag in operation.all_flags:
        _add_flag(op_parser, flag)
    op_parser.set_defaults(_service=service.id, _verb=operation.verb)


def _build_parser(registry: Registry) -> argparse.ArgumentParser:
    root = registry.root()
    parser = _ArgumentParser(
        prog=root.name,
        description=root.long_help or root.short_help,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"watson-cli {_cli_version()}",
    )
    parser.add_argument(
        "--config",
        dest="_config",
        default=None,
        help="Path to CLI config TOML (default: ~/.watson_cli/config.toml)",
    )
    parser.add_argument(
        "--log-level",
        dest="_log_level",
        default=None,
        help="Log level for diagnostics on stderr: DEBUG, INFO, WARNING or ERROR",
    )
    parser.add_argument(
        "--plugin-metadata",
        dest="_plugin_metadata",
        action="store_true",
        help="Print plugin command descriptors as JSON and exit",
    )

    services = parser.add_subparsers(dest="_service_name", metavar="service")
    for service in root.services.values():
        service_parser = services.add_parser(
            service.id,
            aliases=list(service.aliases),
            help=service.short_help,
            description=service.long_help or service.short_help,
            allow_abbrev=False,
        )
        operations = service_parser.add_subparsers(
            dest="_operation_name", metavar="operation", required=True
        )
        for operation in service.operations.values():
            _add_operation(operations, service, operation)
    return parser


@dataclass(frozen=True)
class Invocation:
    service: ServiceSpec
    operation: OperationSpec
    # Supplied flags only.
    values: dict[str, Any]


def _invocation_from(registry: Registry, args: argparse.Namespace) -> Invocation:
    service = registry.resolve(args._service)
    operation = service.operation(args._verb)
    values = {key: value for key, value in vars(args).items() if not key.startswith("_")}
    return Invocation(service=service, operation=operation, values=values)


def parse_invocation(argv: Sequence[str], registry: Registry | None = None) -> Invocation:
    """Parse ``argv`` (without the program name) into the selected operation and supplied flags."""
    registry = registry if registry is not None else get_registry()
    args = _build_parser(registry).parse_args(list(argv))
    if getattr(args, "_service", None) is None:
        raise UsageError("a service and operation are required")
    return _invocation_from(registry, args)


def _sanitize_error_text(value: str) -> str:
    redacted = re.sub(r"(?i)(bearer\s+)([A-Za-z0-9\-._~+/]+=*)", r"\1[REDACTED]", value)
    for field in _SENSITIVE_FIELDS:
        redacted = re.sub(
            rf"(?i)({field}\s*[=:]\s*)([^,\s]+)",
            r"\1[REDACTED]",
            redacted,
        )
    return redacted


def _print_error(stderr, prefix: str, message: str, *, code: int) -> int:
    print(f"{prefix}: {_sanitize_error_text(message)}", file=stderr)
    return code


def _configure_logging(level: str, stderr) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def main(argv: Sequence[str] | None = None, *, stdout=sys.stdout, stderr=sys.stderr) -> int:
    try:
        registry = get_registry()
        parser = _build_parser(registry)
        try:
            args = parser.parse_args(argv)
        except SystemExit as exc:
            return exc.code if isinstance(exc.code, int) else EXIT_SUCCESS

        config = load_cli_config(args._config)
        log_level = normalize_log_level(args._log_level) if args._log_level else config.log_level
        _configure_logging(log_level, stderr)

        if args._plugin_metadata:
            print(json.dumps(plugin_metadata(registry), indent=2), file=stdout)
            return EXIT_SUCCESS

        if getattr(args, "_service", None) is None:
            parser.print_usage(stderr)
            return _print_error(
                stderr,
                "usage error",
                "a service and operation are required",
                code=EXIT_USAGE_ERROR,
            )

        invocation = _invocation_from(registry, args)
        logger.debug(
            "dispatching %s %s",
            invocation.service.id,
            invocation.operation.verb,
        )
        return run_operation(
            invocation.service,
            invocation.operation,
            invocation.values,
            config=config,
            stdout=stdout,
            stderr=stderr,
        )
    except WatsonCLIError as exc:
        return _print_error(stderr, f"{exc.kind} error", str(exc), code=exc.exit_code)
    except KeyboardInterrupt:
        print("interrupted", file=stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
