"""Error taxonomy shared by the codecs, schemas, envelope and client."""


class EtherscanError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(EtherscanError, ValueError):
    """A caller parameter or a response field does not match its schema."""

    def __init__(self, message: str, *, path: str = "", endpoint: str | None = None) -> None:
        self.message = message
        self.path = path
        self.endpoint = endpoint
        super().__init__(message)

    def __str__(self) -> str:
        prefix = ": ".join(part for part in (self.endpoint, self.path) if part)
        return f"{prefix}: {self.message}" if prefix else self.message


class ProtocolError(EtherscanError):
    """The response matches neither the REST nor the JSON-RPC envelope."""


class RemoteError(EtherscanError):
    """The server reported a failure inside a well-formed envelope."""

    def __init__(self, message: str, *, code: int | None = None, endpoint: str | None = None) -> None:
        self.message = message
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class TransportError(EtherscanError):
    """The request failed before an envelope could be read."""
