"""Holy water draw engine."""

import logging
import math
import random
from typing import Optional

from pydantic import BaseModel, Field

from catalog import DEFAULT_CATALOG, OptionCatalog, OptionTemplate, OptionTier

logger = logging.getLogger(__name__)


class SimulatorConfig(BaseModel):
    """Tunables of the simulator.

    Shared by the session and the auto-search controller so a headless run
    and the Streamlit app can use different settings side by side.
    """

    history_limit: int = Field(
        default=100, ge=1, description="Number of most recent outcomes kept in history"
    )
    skew_exponent: float = Field(
        default=2.5,
        gt=0.0,
        description="Power applied to the uniform draw; values above 1 favour low magnitudes",
    )
    step_delay: float = Field(
        default=0.1,
        ge=0.0,
        description="Seconds a manual single use waits before drawing (UI feedback only)",
    )
    yield_every: int = Field(
        default=1,
        ge=1,
        description="Auto-search draws between yields to the event loop",
    )
    max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Upper bound on draws per auto-search, None for unbounded",
    )
    default_unit_price: int = Field(
        default=1_000_000, ge=0, description="Unit price used when none is stored"
    )

    model_config = {"frozen": True}


DEFAULT_CONFIG = SimulatorConfig()


class RolledOption(BaseModel):
    """Concrete result of one draw: the rendered option text and its tier."""

    name: str = Field(..., description="Fully rendered option, e.g. '생명력 37 증가'")
    tier: OptionTier = Field(..., description="Tier copied from the source template")

    model_config = {"frozen": True}


def select_template(
    catalog: OptionCatalog, rng: Optional[random.Random] = None
) -> OptionTemplate:
    """Pick a template with probability proportional to its weight.

    The weights are normalised by their actual sum, so a table that does not
    add up to exactly 1 still works. Templates are walked in declaration
    order; if rounding leaves nothing selected the last template is used.
    """
    rng = rng or random
    rand = rng.random() * catalog.total_probability()
    for template in catalog.templates:
        if rand < template.probability:
            return template
        rand -= template.probability

    fallback = catalog.templates[-1]
    logger.debug("Cumulative weight fell short by %r, using %s", rand, fallback.name)
    return fallback


def roll_magnitude(
    template: OptionTemplate,
    rng: Optional[random.Random] = None,
    exponent: float = DEFAULT_CONFIG.skew_exponent,
) -> int:
    """Draw a magnitude in the template's inclusive range, skewed low."""
    rng = rng or random
    span = template.maximum - template.minimum + 1
    skewed = rng.random() ** exponent
    # skewed < 1, so the offset never reaches span
    return template.minimum + math.floor(skewed * span)


def render_option_name(template: OptionTemplate, value: int) -> str:
    # Percent units attach directly to the number: "크리티컬 4% 증가"
    separator = "" if template.unit.startswith("%") else " "
    return f"{template.name} {value}{separator}{template.unit}"


def draw_option(
    catalog: OptionCatalog = DEFAULT_CATALOG,
    rng: Optional[random.Random] = None,
    exponent: float = DEFAULT_CONFIG.skew_exponent,
) -> RolledOption:
    """Roll one holy water use.

    Two independent random decisions: which template (categorical), then the
    magnitude within its range (power-law skewed).

    Args:
        catalog: Option table to draw from.
        rng: Optional random source; module-level random when omitted.
        exponent: Skew exponent applied to the magnitude draw.

    Returns:
        The rendered option and its tier.
    """
    template = select_template(catalog, rng)
    value = roll_magnitude(template, rng, exponent)
    return RolledOption(name=render_option_name(template, value), tier=template.tier)
