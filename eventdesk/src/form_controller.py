"""
Form controller.

Owns the single editable Event draft and the Create/Edit mode flag.
Pure local state: no network access happens here.
"""

import logging
from enum import Enum

from eventdesk.src.models import EVENT_FIELDS, Event

logger = logging.getLogger(__name__)


class FormMode(str, Enum):
    """Whether a submit creates a new event or updates an existing one."""

    CREATE = "create"
    EDIT = "edit"


class DraftValidationError(ValueError):
    """Raised when a required draft field is empty."""

    def __init__(self, field: str):
        super().__init__(f"Please fill out the {field} field.")
        self.field = field


class FormController:
    """
    Editable draft plus mode.

    The draft is never shared with the collection: begin_edit() copies the
    selected record and validate() hands back a copy, so later keystrokes
    cannot alter a record held elsewhere.
    """

    def __init__(self) -> None:
        self._draft = Event.blank()
        self._mode = FormMode.CREATE

    @property
    def draft(self) -> Event:
        return self._draft

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return self._mode is FormMode.EDIT

    @property
    def title(self) -> str:
        """Heading for the form in its current mode."""
        return "Edit Event" if self.is_editing else "Add Event"

    def set_field(self, name: str, value: str) -> None:
        """
        Update one draft field.

        Raises:
            KeyError: If name is not an Event field
        """
        if name not in EVENT_FIELDS:
            raise KeyError(name)
        setattr(self._draft, name, value)

    def validate(self) -> Event:
        """
        Check that every field is non-empty after trimming.

        Fields are checked in EVENT_FIELDS order, so the first empty one is
        the one reported.

        Returns:
            Copy of the draft, ready to submit

        Raises:
            DraftValidationError: Naming the first empty field
        """
        for field in EVENT_FIELDS:
            value = getattr(self._draft, field)
            if value is None or not str(value).strip():
                raise DraftValidationError(field)
        return self._draft.model_copy(deep=True)

    def begin_edit(self, source: Event) -> None:
        """Load a copy of source into the draft and switch to Edit mode."""
        self._draft = source.model_copy(deep=True)
        self._mode = FormMode.EDIT
        logger.debug("Editing event %s", source.id)

    def reset(self) -> None:
        """Clear the draft and return to Create mode."""
        self._draft = Event.blank()
        self._mode = FormMode.CREATE
