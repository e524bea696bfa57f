"""Mutable state of one simulator instance."""

import logging
import random
from typing import Optional

from pydantic import BaseModel, Field

from catalog import DEFAULT_CATALOG, OptionCatalog
from enchant import DEFAULT_CONFIG, RolledOption, SimulatorConfig, draw_option

logger = logging.getLogger(__name__)

# Keeps int() below the interpreter's string conversion limit
MAX_PRICE_DIGITS = 100


def parse_price(value: object) -> Optional[int]:
    """Parse a unit price typed by the user.

    Thousands separators and surrounding whitespace are ignored and an empty
    field reads as 0. Returns None for anything that is not a non-negative
    integer of at most MAX_PRICE_DIGITS digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    cleaned = value.replace(",", "").strip()
    if cleaned == "":
        return 0
    if not (cleaned.isascii() and cleaned.isdigit()):
        return None
    if len(cleaned) > MAX_PRICE_DIGITS:
        return None
    return int(cleaned)


def format_number(value: int) -> str:
    """Group digits by thousands, e.g. 3000000 -> '3,000,000'."""
    return f"{value:,}"


class SimulationSession(BaseModel):
    """Attempt counter, last outcome, bounded history and unit price.

    Every draw goes through advance(), which applies exactly one result from
    the draw engine. The unit price survives reset(); it is owned by the
    user, not by the simulation run.
    """

    catalog: OptionCatalog = Field(
        default=DEFAULT_CATALOG, description="Option table to draw from"
    )
    config: SimulatorConfig = Field(default=DEFAULT_CONFIG)

    # Below are runtime fields
    try_count: int = Field(0, ge=0, description="Holy water used so far")
    current_option: Optional[RolledOption] = Field(
        None, description="Most recent outcome, None before the first use"
    )
    history: list[RolledOption] = Field(
        default_factory=list, description="Recent outcomes, most recent first"
    )
    unit_price: int = Field(
        DEFAULT_CONFIG.default_unit_price, ge=0, description="Gold per holy water"
    )

    @property
    def total_cost(self) -> int:
        """Gold spent so far. Python ints do not overflow."""
        return self.try_count * self.unit_price

    def advance(self, rng: Optional[random.Random] = None) -> RolledOption:
        """Use one holy water and record the outcome."""
        option = draw_option(self.catalog, rng, self.config.skew_exponent)
        self.try_count += 1
        self.current_option = option
        self.history.insert(0, option)
        del self.history[self.config.history_limit :]
        return option

    def reset(self):
        self.try_count = 0
        self.current_option = None
        self.history = []

    def set_unit_price(self, value: object) -> bool:
        """Update the unit price.

        Returns:
            True if the value was accepted. Invalid input leaves the previous
            price untouched and returns False.
        """
        price = parse_price(value)
        if price is None:
            logger.debug("Rejected unit price input %r", value)
            return False
        self.unit_price = price
        return True

    def history_entries(self) -> list[tuple[int, RolledOption]]:
        """History paired with the attempt number each outcome came from."""
        return [
            (self.try_count - index, option) for index, option in enumerate(self.history)
        ]
