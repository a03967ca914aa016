"""
EventDesk client core.

Key modules:
- models: Event model and canonical field order
- config: Client configuration management
- api_client: HTTP client for the EventAPI boundary
- form_controller: Editable draft and Create/Edit mode
- collection_controller: Event list, lookup slot and status message
- rendering: Terminal rendering of controller state
- main: Session wiring and logging setup
"""

import os
from importlib.metadata import PackageNotFoundError, version


def _get_version() -> str:
    """
    Get version with priority: EVENTDESK_VERSION env var > installed metadata > fallback.
    """
    env_version = os.environ.get("EVENTDESK_VERSION")
    if env_version:
        return env_version

    try:
        return version("eventdesk")
    except PackageNotFoundError:
        pass

    return "0.0.0-dev+unknown"


__version__ = _get_version()
