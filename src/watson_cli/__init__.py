"""Watson services command-line client."""

__version__ = "1.0.0"

from watson_cli.errors import (  # noqa: E402
    ConfigError,
    DecodeError,
    LocalIOError,
    RegistryError,
    RenderError,
    TransportError,
    UsageError,
    WatsonCLIError,
)
from watson_cli.exporter import PluginCommand, export_descriptors, plugin_metadata  # noqa: E402
from watson_cli.registry import (  # noqa: E402
    Endpoint,
    FlagKind,
    FlagSpec,
    Location,
    OperationSpec,
    Registry,
    ReturnKind,
    ServiceSpec,
)
from watson_cli.services import build_registry, get_registry  # noqa: E402

__all__ = [
    "__version__",
    "ConfigError",
    "DecodeError",
    "Endpoint",
    "FlagKind",
    "FlagSpec",
    "LocalIOError",
    "Location",
    "OperationSpec",
    "PluginCommand",
    "Registry",
    "RegistryError",
    "RenderError",
    "ReturnKind",
    "ServiceSpec",
    "TransportError",
    "UsageError",
    "WatsonCLIError",
    "build_registry",
    "export_descriptors",
    "get_registry",
    "plugin_metadata",
]
