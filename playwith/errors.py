"""Exception types raised by the playwith core."""


class PlayWithError(Exception):
    """Base class for every failure the core reports."""


class ConfigError(PlayWithError):
    """Required configuration is missing or invalid."""


class TransportFailure(PlayWithError):
    """A remote call could not complete."""


class RemoteStatusFailure(PlayWithError):
    """A remote call completed with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParseFailure(PlayWithError):
    """A payload was malformed or lacked an expected field."""


class FilesystemFailure(PlayWithError):
    """A cache path could not be created, opened, read or written."""


class NotFound(PlayWithError):
    """A required field was absent from an otherwise well-formed response."""


def describe_error(error: BaseException) -> str:
    """
    Render an exception and its causes as a single line.

    Example:
        could not load profile: could not read profiles/1.json: [Errno 13] ...

    Args:
        error: Outermost exception

    Returns:
        Messages of the exception chain joined by ": "
    """
    parts: list[str] = []
    current: BaseException | None = error
    seen: set[int] = set()

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        message = str(current) or type(current).__name__
        parts.append(message)
        if current.__cause__ is not None or current.__suppress_context__:
            current = current.__cause__
        else:
            current = current.__context__

    return ": ".join(parts)
