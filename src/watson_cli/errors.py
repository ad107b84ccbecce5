"""CLI error types."""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_TRANSPORT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_DECODE_ERROR = 4
EXIT_IO_ERROR = 5
EXIT_RENDER_ERROR = 6
EXIT_INTERRUPTED = 130


class WatsonCLIError(RuntimeError):
    """Base CLI error."""

    kind = "cli"
    exit_code = EXIT_USAGE_ERROR


class RegistryError(WatsonCLIError):
    """Command registry definition is inconsistent."""

    kind = "registry"


class UsageError(WatsonCLIError):
    """Unknown command, missing required flag or malformed flag value."""

    kind = "usage"
    exit_code = EXIT_USAGE_ERROR


class ConfigError(WatsonCLIError):
    """CLI config or service credentials could not be resolved."""

    kind = "config"
    exit_code = EXIT_CONFIG_ERROR


class DecodeError(WatsonCLIError):
    """A JSON-valued flag could not be decoded."""

    kind = "decode"
    exit_code = EXIT_DECODE_ERROR


class LocalIOError(WatsonCLIError):
    """A referenced file could not be opened or written."""

    kind = "io"
    exit_code = EXIT_IO_ERROR


class TransportError(WatsonCLIError):
    """Remote operation failed or the service could not be reached."""

    kind = "transport"
    exit_code = EXIT_TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: object | None = None,
        body: object | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
        self.body = body


class RenderError(WatsonCLIError):
    """Result could not be projected or serialized."""

    kind = "render"
    exit_code = EXIT_RENDER_ERROR
