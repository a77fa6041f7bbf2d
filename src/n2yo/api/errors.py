"""Exceptions raised by the N2YO client."""

from __future__ import annotations


class N2YOError(Exception):
    """Base class for all client errors.

    Attributes:
        message: What failed at this layer
        cause: The lower-level error that triggered this one, if any
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class TransportError(N2YOError):
    """The response body could not be downloaded or parsed as JSON."""


class ServerError(N2YOError):
    """N2YO answered with an ``error`` field instead of a result."""


class SchemaError(N2YOError):
    """A response field is missing, has the wrong type, or the record
    count does not match the count the response declares."""


class DecodeError(N2YOError):
    """A parsed response could not be mapped onto the result types."""
