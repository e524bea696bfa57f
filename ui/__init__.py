"""UI components package for the holy water simulator."""

from ui.constants import TIER_COLORS
from ui.defaults import create_default_controller, create_default_session
from ui.state import initialize_session_state, update_url

__all__ = [
    "initialize_session_state",
    "update_url",
    "TIER_COLORS",
    "create_default_session",
    "create_default_controller",
]
