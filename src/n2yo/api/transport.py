"""HTTP transport used to download N2YO responses."""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "n2yo-client/1.0"


class Transport(Protocol):
    """Anything that can fetch a URI and return the body as text."""

    def download_string(self, uri: str) -> str:
        ...


class RequestsTransport:
    """Transport backed by a ``requests.Session``.

    The session is not safe for concurrent use; ``N2YOClient`` serialises
    calls on its transport.
    """

    def __init__(self, timeout: float = 30, session: requests.Session | None = None):
        """Initialize the transport.

        Args:
            timeout: Connect and read timeout in seconds.
            session: Session to reuse. A new one is created if omitted.
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)

    def download_string(self, uri: str) -> str:
        """GET ``uri`` and return the body decoded as UTF-8.

        Raises:
            TransportError: On connection failures, timeouts and non-2xx
                statuses.
        """
        try:
            response = self.session.get(uri, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed ({type(e).__name__})", e) from e

        logger.debug(f"Received {len(response.content)} bytes (status {response.status_code})")
        return response.content.decode("utf-8")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
