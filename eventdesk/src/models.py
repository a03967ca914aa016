"""
Event data model.

Defines the Event record exchanged with the EventAPI, the canonical field
order shared by form validation and table rendering, and parsing of the
list endpoint's response shapes.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Validation reports the first empty field in this order, and the table
# renders its columns in this order.
EVENT_FIELDS = ("id", "name", "date", "location", "organizer")

LIST_ENVELOPE_KEY = "data"


# ============================================================================
# Event
# ============================================================================


class Event(BaseModel):
    """
    A managed Event record.

    All fields default to the empty string so the same model serves as the
    blank form draft. Keys the server adds beyond the canonical fields are
    kept as extras; they are shown in lookups but never submitted.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field("", description="Client-supplied identifier, unique per event")
    name: str = Field("", description="Event display name")
    date: str = Field("", description="Calendar date (YYYY-MM-DD)")
    location: str = Field("", description="Where the event takes place")
    organizer: str = Field("", description="Who runs the event")

    @field_validator(*EVENT_FIELDS, mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        # Backends commonly return numeric ids
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def blank(cls) -> "Event":
        """Create an Event with every field empty."""
        return cls()

    def payload(self) -> Dict[str, str]:
        """Request body for create/update: the canonical fields only."""
        return {field: getattr(self, field) for field in EVENT_FIELDS}

    def row(self) -> List[str]:
        """Field values in canonical column order."""
        return [getattr(self, field) for field in EVENT_FIELDS]


# ============================================================================
# Response Parsing
# ============================================================================


def parse_event(data: Any) -> Optional[Event]:
    """
    Parse a single Event from a decoded JSON body.

    Returns:
        Event, or None if the body is not an Event-shaped object
    """
    if not isinstance(data, dict):
        return None
    try:
        return Event.model_validate(data)
    except ValidationError as e:
        logger.warning("Unexpected event payload: %s", e)
        return None


def parse_event_list(data: Any) -> Optional[List[Event]]:
    """
    Parse the list endpoint's body.

    Accepts a bare array of events or an envelope object holding the
    array under ``data``.

    Returns:
        List of events, or None when the body has any other shape
    """
    if isinstance(data, dict) and isinstance(data.get(LIST_ENVELOPE_KEY), list):
        data = data[LIST_ENVELOPE_KEY]

    if not isinstance(data, list):
        return None

    events: List[Event] = []
    for item in data:
        event = parse_event(item)
        if event is None:
            return None
        events.append(event)
    return events
