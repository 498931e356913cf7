# ============================================================================
# SCOPE: INFRASTRUCTURE
# Description: Transporte HTTP inyectable para el cliente Saferpay.
# ============================================================================
"""
Saferpay Transport.

Single Responsibility: Execute one HTTP request and hand back status and body.

SaferpayClient depends only on the Transport protocol. HttpxTransport is the
default implementation; tests inject spies.

Contract:
- Non-2xx responses are returned, never raised; the client inspects status.
- Network failures (connect errors, timeouts) raise SaferpayConnectionError.
- No retries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from .exceptions import SaferpayConnectionError


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded body of a gateway response."""

    status_code: int
    body: str


@runtime_checkable
class Transport(Protocol):
    """Interface for the HTTP collaborator.

    Implementations: HttpxTransport
    """

    def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, str],
    ) -> TransportResponse:
        """Send a request.

        Args:
            method: HTTP method (always POST for Saferpay).
            url: Absolute endpoint URL.
            body: Encoded request body.
            headers: Request headers.

        Returns:
            TransportResponse, whatever the status code.
        """
        ...


class HttpxTransport:
    """
    Blocking transport over a persistent httpx.Client.

    Example:
        with HttpxTransport(timeout=10.0) as transport:
            client = SaferpayClient(transport, settings=settings)
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize transport.

        Args:
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx.Client (proxies, mounts, tests)
        """
        self._timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=httpx.Timeout(self._timeout))
        return self._client

    def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(
        self,
        method: str,
        url: str,
        body: str,
        headers: dict[str, str],
    ) -> TransportResponse:
        """
        Send a request and return status and body.

        Raises:
            SaferpayConnectionError: On connect errors and timeouts
        """
        client = self._get_client()

        try:
            response = client.request(method, url, content=body.encode("utf-8"), headers=headers)
        except httpx.TimeoutException as e:
            raise SaferpayConnectionError(f"Saferpay request timed out: {e}") from e
        except httpx.RequestError as e:
            raise SaferpayConnectionError(f"Could not connect to Saferpay: {e}") from e

        return TransportResponse(status_code=response.status_code, body=response.text)
