"""Default data creation functions."""

from typing import Optional

from catalog import DEFAULT_CATALOG
from enchant import DEFAULT_CONFIG, SimulatorConfig
from search import SearchController
from session import SimulationSession


def create_default_session(
    unit_price: Optional[int] = None, config: SimulatorConfig = DEFAULT_CONFIG
) -> SimulationSession:
    """Create a fresh session on the built-in option table."""
    if unit_price is None:
        unit_price = config.default_unit_price
    return SimulationSession(
        catalog=DEFAULT_CATALOG, config=config, unit_price=unit_price
    )


def create_default_controller(session: SimulationSession) -> SearchController:
    """Create an idle auto-search controller bound to the session."""
    return SearchController(session=session)
