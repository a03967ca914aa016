"""
Collection controller.

Owns the authoritative event list, the looked-up event slot and the
status message, and reconciles EventAPI results back into that state.

The list is never patched locally: every successful mutation is followed
by a full refresh, and each refresh replaces the list wholesale. Every
operation ends by replacing the status message; failures never propagate
out of an operation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from eventdesk.src.api_client import EventApiClient
from eventdesk.src.form_controller import DraftValidationError, FormController
from eventdesk.src.models import Event, parse_event_list

logger = logging.getLogger(__name__)


# ============================================================================
# Status Messages
# ============================================================================

MSG_VALIDATION_FAILED = "Error: please fill out the {field} field."
MSG_LIST_FAILED = "Error fetching events. Check the server URL."
MSG_ADDED = "Event added successfully."
MSG_ADD_FAILED = "Error adding event."
MSG_UPDATED = "Event updated successfully."
MSG_UPDATE_FAILED = "Error updating event."
MSG_DELETED = "Event deleted successfully."
MSG_DELETE_FAILED = "Error deleting event."
MSG_ID_REQUIRED = "Enter an event ID to fetch."
MSG_NOT_FOUND = "Error: event not found."
MSG_EDITING = "Editing event with ID {id}"


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    """Short-lived user-facing message. Empty text means no message."""

    text: str = ""

    @property
    def severity(self) -> Severity:
        if "error" in self.text.lower():
            return Severity.ERROR
        return Severity.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __bool__(self) -> bool:
        return bool(self.text)


# ============================================================================
# CollectionController Class
# ============================================================================


class CollectionController:
    """
    Mediates between local state and the EventAPI.

    Overlapping refreshes are sequenced: each refresh_all() takes a ticket
    and only the response to the most recently issued refresh is applied.
    After dispose(), late responses are dropped without touching state.

    Attributes:
        events: Snapshot from the last applied list fetch
        lookup_result: Event from the last successful fetch_by_id, or None
        message: Current status message
    """

    def __init__(self, api: EventApiClient, form: FormController):
        """
        Initialize the controller.

        Args:
            api: EventAPI boundary
            form: Form controller to reset and load for editing
        """
        self._api = api
        self._form = form
        self._events: List[Event] = []
        self._lookup_result: Optional[Event] = None
        self._message = StatusMessage()
        self._refresh_ticket = 0
        self._disposed = False

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    @property
    def lookup_result(self) -> Optional[Event]:
        return self._lookup_result

    @property
    def message(self) -> StatusMessage:
        return self._message

    @property
    def form(self) -> FormController:
        return self._form

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """
        Stop applying results.

        In-flight calls complete as no-ops; later calls return False
        without sending a request.
        """
        self._disposed = True

    def find(self, event_id: str) -> Optional[Event]:
        """Find an event in the current snapshot by id."""
        for event in self._events:
            if event.id == str(event_id):
                return event
        return None

    def _set_message(self, text: str) -> None:
        self._message = StatusMessage(text)

    # -------------------------------------------------------------------------
    # List
    # -------------------------------------------------------------------------

    async def refresh_all(self) -> bool:
        """
        Replace the event list with the server's current list.

        An unexpected response shape yields an empty list without an error
        message. A failed request yields an empty list and an error message.

        Returns:
            True if the response was applied successfully
        """
        if self._disposed:
            return False
        self._refresh_ticket += 1
        ticket = self._refresh_ticket

        result = await self._api.list_events()

        if self._disposed:
            logger.debug("Controller disposed, dropping list response")
            return False
        if ticket != self._refresh_ticket:
            logger.debug(
                "Discarding stale list response (ticket %d, latest %d)",
                ticket,
                self._refresh_ticket,
            )
            return False

        if not result.ok:
            self._events = []
            self._set_message(MSG_LIST_FAILED)
            return False

        events = parse_event_list(result.value)
        if events is None:
            logger.warning(
                "Unexpected list response format, expected an array: %r",
                result.value,
            )
            events = []

        self._events = events
        logger.debug("Loaded %d events", len(events))
        return True

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def submit(self) -> bool:
        """
        Validate the form draft and create or update depending on mode.

        Returns:
            True if the API call succeeded
        """
        if self._disposed:
            return False
        try:
            draft = self._form.validate()
        except DraftValidationError as e:
            self._set_message(MSG_VALIDATION_FAILED.format(field=e.field))
            return False

        if self._form.is_editing:
            return await self.update(draft)
        return await self.create(draft)

    async def create(self, draft: Event) -> bool:
        """
        Create an event from a validated draft.

        On failure the form is left untouched so the user can retry.
        """
        if self._disposed:
            return False
        result = await self._api.create_event(draft)
        if self._disposed:
            return False

        if not result.ok:
            self._set_message(MSG_ADD_FAILED)
            return False

        self._set_message(MSG_ADDED)
        self._form.reset()
        await self.refresh_all()
        return True

    async def update(self, draft: Event) -> bool:
        """Update the event identified by draft.id; same contract as create()."""
        if self._disposed:
            return False
        result = await self._api.update_event(draft)
        if self._disposed:
            return False

        if not result.ok:
            self._set_message(MSG_UPDATE_FAILED)
            return False

        self._set_message(MSG_UPDATED)
        self._form.reset()
        await self.refresh_all()
        return True

    async def remove(self, event_id: str) -> bool:
        """Delete an event. There is no confirmation step."""
        if self._disposed:
            return False
        result = await self._api.delete_event(event_id)
        if self._disposed:
            return False

        if not result.ok:
            self._set_message(MSG_DELETE_FAILED)
            return False

        self._set_message(MSG_DELETED)
        await self.refresh_all()
        return True

    # -------------------------------------------------------------------------
    # Lookup and Editing
    # -------------------------------------------------------------------------

    async def fetch_by_id(self, event_id: str) -> bool:
        """
        Look up a single event into lookup_result.

        An empty id sets a prompt message and sends no request.
        """
        if self._disposed:
            return False
        event_id = str(event_id or "").strip()
        if not event_id:
            self._set_message(MSG_ID_REQUIRED)
            return False

        result = await self._api.get_event(event_id)
        if self._disposed:
            return False

        if not result.ok:
            self._lookup_result = None
            self._set_message(MSG_NOT_FOUND)
            return False

        self._lookup_result = result.value
        self._set_message("")
        return True

    def select_for_edit(self, record: Event) -> None:
        """Load a record into the form for editing."""
        self._form.begin_edit(record)
        self._set_message(MSG_EDITING.format(id=record.id))

    def select_by_id(self, event_id: str) -> bool:
        """
        Select a listed event for editing by id.

        Only the loaded snapshot is searched; an id not in it sets the
        not-found message and leaves the form untouched.
        """
        record = self.find(event_id)
        if record is None:
            self._set_message(MSG_NOT_FOUND)
            return False
        self.select_for_edit(record)
        return True

    def cancel_edit(self) -> None:
        """Abandon the current edit and return the form to Create mode."""
        self._form.reset()
