"""Plugin command descriptors for host shells that list plugin commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from watson_cli import __version__
from watson_cli.registry import Registry

PLUGIN_NAME = "watson"
MIN_HOST_VERSION = "0.0.1"


@dataclass(frozen=True)
class PluginCommand:
    namespace: str
    name: str
    description: str
    usage: str
    aliases: tuple[str, ...] = ()


def export_descriptors(registry: Registry) -> list[PluginCommand]:
    """Flatten the command tree into descriptors, root first, in registry order.

    The root and the services directly under it keep their own name; operations
    are named ``"<service> <operation>"``.
    """
    root = registry.root()
    commands = [
        PluginCommand(
            namespace=root.name,
            name=root.name,
            description=root.long_help or root.short_help,
            usage=root.usage,
        )
    ]
    for service, operation in registry.enumerate():
        if operation is None:
            commands.append(
                PluginCommand(
                    namespace=root.name,
                    name=service.id,
                    description=service.long_help or service.short_help,
                    usage=service.usage,
                    aliases=service.aliases,
                )
            )
            continue
        commands.append(
            PluginCommand(
                namespace=root.name,
                name=f"{service.id} {operation.verb}",
                description=operation.long_help or operation.short_help,
                usage=operation.verb,
                aliases=operation.aliases,
            )
        )
    return commands


def plugin_metadata(registry: Registry) -> dict:
    root = registry.root()
    return {
        "name": PLUGIN_NAME,
        "version": __version__,
        "min_host_version": MIN_HOST_VERSION,
        "namespaces": [{"name": root.name, "description": root.short_help}],
        "commands": [
            {**asdict(command), "aliases": list(command.aliases)}
            for command in export_descriptors(registry)
        ],
    }
