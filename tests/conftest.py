"""
pytest configuration and shared fixtures
"""
import random
import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from catalog import DEFAULT_CATALOG, OptionCatalog, OptionTemplate, OptionTier  # noqa: E402
from enchant import SimulatorConfig  # noqa: E402
from search import SearchController  # noqa: E402
from session import SimulationSession  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class FixedRandom:
    """Random source replaying a fixed sequence of values."""

    def __init__(self, *values: float):
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def three_option_catalog() -> OptionCatalog:
    """Catalog whose weights are exact binary fractions."""
    return OptionCatalog(
        templates=(
            OptionTemplate(name="A", range=(1, 1), tier=OptionTier.COMMON, probability=0.5),
            OptionTemplate(name="B", range=(1, 1), tier=OptionTier.RARE, probability=0.25),
            OptionTemplate(name="C", range=(1, 1), tier=OptionTier.LEGENDARY, probability=0.25),
        )
    )


@pytest.fixture
def session() -> SimulationSession:
    return SimulationSession(catalog=DEFAULT_CATALOG)


@pytest.fixture
def bounded_session() -> SimulationSession:
    """Session whose searches give up after 10,000 draws."""
    return SimulationSession(
        catalog=DEFAULT_CATALOG,
        config=SimulatorConfig(max_attempts=10_000, step_delay=0.01),
    )


@pytest.fixture
def controller(bounded_session) -> SearchController:
    return SearchController(session=bounded_session)


@pytest.fixture
def fixed_random():
    """Factory for random sources replaying the given values."""
    return FixedRandom
