"""Exception types raised while resolving and opening metadata."""


class MetaOpenError(Exception):
    """Base class for every failure the CLI reports to the user."""


class InvalidInputError(MetaOpenError):
    """The path, connection or metadata type argument is missing or malformed."""


class UnsupportedMetadataTypeError(MetaOpenError):
    """The file extension has no registered resolver."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unsupported metadata type: {token}")
        self.token = token


class NotFoundError(MetaOpenError):
    """A catalog query returned no matching record."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} not found for {name}")
        self.kind = kind
        self.name = name


class TransportError(MetaOpenError):
    """The org rejected or failed a query."""


class OrgConnectionError(MetaOpenError):
    """No authenticated connection could be built for the target org."""


class CommandExecutionError(MetaOpenError):
    """The operating system command used to open the browser failed."""
