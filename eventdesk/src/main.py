"""
Session wiring.

Builds the API client and both controllers from configuration, performs
the initial load and tears everything down on close.
"""

import logging
from typing import Optional

import httpx

from eventdesk.src import __version__
from eventdesk.src.api_client import EventApiClient
from eventdesk.src.collection_controller import CollectionController
from eventdesk.src.config import ClientConfig
from eventdesk.src.form_controller import FormController


# ============================================================================
# Logging Setup
# ============================================================================


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Setup logging for the client.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured logger
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("eventdesk")


# ============================================================================
# EventSession
# ============================================================================


class EventSession:
    """
    One client session: API client, form and collection controllers.

    The server URL is read from the config once, here, and injected into
    the API client.

    Usage:
        async with EventSession(config) as session:
            await session.collection.refresh_all()
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the session.

        Args:
            config: Client configuration
            transport: Optional httpx transport (used for testing)

        Raises:
            ValueError: If no server URL is configured
        """
        self.logger = logging.getLogger("eventdesk.session")
        self.api = EventApiClient(
            server_url=config.server_url,
            timeout=config.timeout_seconds,
            transport=transport,
        )
        self.form = FormController()
        self.collection = CollectionController(self.api, self.form)

    async def start(self) -> None:
        """Initial load of the event list."""
        self.logger.debug(
            "EventDesk %s connected to %s", __version__, self.api.server_url
        )
        await self.collection.refresh_all()

    async def close(self) -> None:
        """Dispose the controller and close the HTTP client."""
        self.collection.dispose()
        await self.api.close()

    async def __aenter__(self) -> "EventSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
