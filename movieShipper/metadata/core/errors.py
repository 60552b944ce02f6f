"""metadata.core.errors
Exceptions raised by the KOFIC / KOBIS clients.

Nothing here is caught inside the clients; every error reaches the caller
of the public fetch method.
"""

from __future__ import annotations


class KoficError(Exception):
    """Base class for every client-side failure."""


class TransportError(KoficError):
    """Network failure, non-2xx status, or a KOBIS ``faultInfo`` reply."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class ParseError(KoficError):
    """Response body is not JSON, or a required field is missing / malformed.

    ``field`` holds the dotted path of the offending field when known,
    e.g. ``"movieInfoResult.movieInfo.showTm"``.
    """

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(KoficError):
    """Scraped page did not contain what we were looking for."""
