"""
EventAPI client.

Async HTTP client for the five Event CRUD endpoints. Every public call
returns an ApiResult instead of raising: transport failures, non-2xx
statuses and undecodable bodies all come back as a failure carrying an
ErrorKind, leaving the caller to decide what to show the user.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Generic, Optional, TypeVar
from urllib.parse import quote

import httpx

from eventdesk.src import __version__
from eventdesk.src.models import Event, parse_event

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ============================================================================
# Constants
# ============================================================================

API_BASE_PATH = "/eventapi"
DEFAULT_TIMEOUT = 30.0  # seconds
USER_AGENT = f"EventDesk/{__version__}"


# ============================================================================
# Results
# ============================================================================


class ErrorKind(str, Enum):
    """Why an API call failed."""

    CONNECTION = "connection"
    TIMEOUT = "timeout"
    STATUS = "status"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Outcome of one API call.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. ``detail`` carries a human-readable reason for logs.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    detail: str = ""
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        detail: str,
        status_code: Optional[int] = None,
    ) -> "ApiResult[T]":
        return cls(error=error, detail=detail, status_code=status_code)


# ============================================================================
# EventApiClient Class
# ============================================================================


class EventApiClient:
    """
    HTTP client for the EventAPI.

    The base address is fixed at construction; it is never re-read from
    configuration afterwards.

    Attributes:
        server_url: Base URL of the EventAPI server
    """

    def __init__(
        self,
        server_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            server_url: Base URL of the EventAPI server
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used for testing)

        Raises:
            ValueError: If server_url is empty
        """
        if not server_url:
            raise ValueError("server_url is required")

        self._server_url = server_url.rstrip("/")

        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        self._client = httpx.AsyncClient(
            base_url=self._server_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def server_url(self) -> str:
        """Get the server URL."""
        return self._server_url

    # -------------------------------------------------------------------------
    # Event Operations
    # -------------------------------------------------------------------------

    async def list_events(self) -> ApiResult[Any]:
        """
        Fetch every event.

        Returns:
            Result holding the decoded body as sent by the server. The body
            is usually an array of events or an object wrapping one under
            ``data``; interpreting its shape is left to the caller.
        """
        return await self._execute(
            "list events",
            self._client.get(f"{API_BASE_PATH}/all"),
        )

    async def create_event(self, event: Event) -> ApiResult[Any]:
        """
        Create an event.

        Args:
            event: Validated event; only the canonical fields are sent

        Returns:
            Result holding the server's response body (created event or status)
        """
        return await self._execute(
            "create event",
            self._client.post(f"{API_BASE_PATH}/add", json=event.payload()),
        )

    async def update_event(self, event: Event) -> ApiResult[Any]:
        """
        Update the event identified by ``event.id``.

        An id the server does not know comes back as an ordinary STATUS
        failure.
        """
        return await self._execute(
            "update event",
            self._client.put(f"{API_BASE_PATH}/update", json=event.payload()),
        )

    async def delete_event(self, event_id: str) -> ApiResult[Any]:
        """Delete the event with the given id."""
        return await self._execute(
            "delete event",
            self._client.delete(f"{API_BASE_PATH}/delete/{self._quote(event_id)}"),
        )

    async def get_event(self, event_id: str) -> ApiResult[Event]:
        """
        Fetch a single event.

        Returns:
            Result holding the parsed Event. A body that is not an event
            object is reported as MALFORMED.
        """
        result = await self._execute(
            "get event",
            self._client.get(f"{API_BASE_PATH}/get/{self._quote(event_id)}"),
        )
        if not result.ok:
            return result

        event = parse_event(result.value)
        if event is None:
            logger.warning("get event %s: response is not an event object", event_id)
            return ApiResult.failure(
                ErrorKind.MALFORMED,
                "Response is not an event object",
                status_code=result.status_code,
            )
        return ApiResult.success(event)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _quote(event_id: str) -> str:
        return quote(str(event_id), safe="")

    async def _execute(self, operation: str, request: Awaitable[httpx.Response]) -> ApiResult[Any]:
        """
        Await a request and classify its outcome.

        Args:
            operation: Short description used in log messages
            request: Pending httpx request coroutine

        Returns:
            Success with the decoded JSON body (None for an empty body),
            or a failure with the matching ErrorKind
        """
        logger.debug("Sending request: %s", operation)
        try:
            response = await request
        except httpx.TimeoutException as e:
            return self._failure(operation, ErrorKind.TIMEOUT, f"Connection timed out: {e}")
        except httpx.HTTPError as e:
            return self._failure(operation, ErrorKind.CONNECTION, f"Failed to connect to server: {e}")

        if not 200 <= response.status_code < 300:
            return self._failure(
                operation,
                ErrorKind.STATUS,
                f"{operation} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return ApiResult(value=None, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            return self._failure(
                operation,
                ErrorKind.MALFORMED,
                f"Invalid JSON in response: {e}",
                status_code=response.status_code,
            )

        return ApiResult(value=body, status_code=response.status_code)

    @staticmethod
    def _failure(
        operation: str,
        error: ErrorKind,
        detail: str,
        status_code: Optional[int] = None,
    ) -> ApiResult[Any]:
        logger.warning("%s: %s", operation, detail)
        return ApiResult.failure(error, detail, status_code=status_code)

    # -------------------------------------------------------------------------
    # Cleanup
    # -------------------------------------------------------------------------

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "EventApiClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
