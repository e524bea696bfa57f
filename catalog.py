from enum import Enum

import pandas as pd
from pydantic import BaseModel, Field, model_validator


class OptionKind(str, Enum):
    """Whether an option boosts a plain stat or a set effect"""

    STAT = "stat"
    SET = "set"


class OptionTier(str, Enum):
    """Rarity tier of an option, inherited by every rolled outcome"""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


class OptionTemplate(BaseModel):
    """One row of the option table.

    Describes a possible outcome of a holy water use: which option it grants,
    the numeric range its magnitude is drawn from, and how likely it is.
    """

    name: str = Field(..., min_length=1, description="Display name of the option")
    kind: OptionKind = Field(
        OptionKind.STAT, description="Plain stat boost or set effect bonus"
    )
    range: tuple[int, int] = Field(
        ..., description="Inclusive (min, max) range of the rolled magnitude"
    )
    unit: str = Field("증가", description="Suffix rendered after the magnitude")
    tier: OptionTier = Field(OptionTier.COMMON, description="Rarity tier")
    probability: float = Field(
        ..., gt=0.0, le=1.0, description="Probability of drawing this option"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_range(self) -> "OptionTemplate":
        low, high = self.range
        if low > high:
            raise ValueError(f"Range minimum {low} exceeds maximum {high}")
        return self

    @property
    def minimum(self) -> int:
        return self.range[0]

    @property
    def maximum(self) -> int:
        return self.range[1]


def format_range(template: OptionTemplate) -> str:
    """Render a template's range the way the probability table shows it."""
    if template.minimum == template.maximum:
        return f"{template.minimum}{template.unit}"
    return f"{template.minimum} ~ {template.maximum}{template.unit}"


class OptionCatalog(BaseModel):
    """Ordered, immutable table of option templates.

    Declaration order matters: the draw engine walks templates in this order,
    so it decides ties at floating-point boundaries and which template the
    rounding fallback lands on (the last one).
    """

    templates: tuple[OptionTemplate, ...] = Field(
        ..., min_length=1, description="Option templates in declaration order"
    )

    model_config = {"frozen": True}

    def total_probability(self) -> float:
        """Sum of all template probabilities. Does not have to be exactly 1."""
        return sum(t.probability for t in self.templates)

    def unique_names(self) -> list[str]:
        """Distinct template names for target selection.

        Sorted by code point, which for Hangul syllables is dictionary order.
        """
        return sorted({t.name for t in self.templates})

    def tier_probabilities(self) -> dict[OptionTier, float]:
        """Declared probability mass of each tier."""
        totals = {tier: 0.0 for tier in OptionTier}
        for template in self.templates:
            totals[template.tier] += template.probability
        return totals

    def probability_table(self) -> pd.DataFrame:
        """Build the probability table shown to the user."""
        rows = [
            {
                "옵션": t.name,
                "적용 수치 범위": format_range(t),
                "등급": t.tier.value,
                "확률": f"{t.probability * 100:.4f}%",
            }
            for t in self.templates
        ]
        return pd.DataFrame(rows, columns=["옵션", "적용 수치 범위", "등급", "확률"])


def _option(
    name: str,
    low: int,
    high: int,
    tier: OptionTier,
    probability: float,
    unit: str = "증가",
    kind: OptionKind = OptionKind.STAT,
) -> OptionTemplate:
    return OptionTemplate(
        name=name,
        kind=kind,
        range=(low, high),
        unit=unit,
        tier=tier,
        probability=probability,
    )


# Probabilities are estimates based on typical game balance, not the real table.
DEFAULT_CATALOG = OptionCatalog(
    templates=(
        # Legendary (total 0.5%)
        _option("최대 대미지", 21, 30, OptionTier.LEGENDARY, 0.0015),
        _option("마법 공격력", 21, 30, OptionTier.LEGENDARY, 0.0015),
        _option("공격 속도 세트 효과", 1, 1, OptionTier.LEGENDARY, 0.001, kind=OptionKind.SET),
        _option("배쉬 강화 세트 효과", 1, 1, OptionTier.LEGENDARY, 0.0005, kind=OptionKind.SET),
        _option("매그넘 샷 강화 세트 효과", 1, 1, OptionTier.LEGENDARY, 0.0005, kind=OptionKind.SET),
        # Rare (total 4.5%)
        _option("최대 대미지", 11, 20, OptionTier.RARE, 0.005),
        _option("마법 공격력", 11, 20, OptionTier.RARE, 0.005),
        _option("크리티컬", 4, 5, OptionTier.RARE, 0.01, unit="% 증가"),
        _option("크리티컬 대미지", 3, 4, OptionTier.RARE, 0.01, unit="% 증가"),
        _option("보호", 2, 3, OptionTier.RARE, 0.005),
        _option("피어싱 저항", 1, 1, OptionTier.RARE, 0.005),
        _option("음악 버프 효과", 1, 1, OptionTier.RARE, 0.005),
        # Uncommon (total 25%)
        _option("최대 대미지", 6, 10, OptionTier.UNCOMMON, 0.02),
        _option("마법 공격력", 6, 10, OptionTier.UNCOMMON, 0.02),
        _option("4대 속성 연금 대미지", 10, 30, OptionTier.UNCOMMON, 0.03),
        _option("마리오네트 최대 대미지", 10, 30, OptionTier.UNCOMMON, 0.03),
        _option("크리티컬", 1, 3, OptionTier.UNCOMMON, 0.05, unit="% 증가"),
        _option("보호", 1, 1, OptionTier.UNCOMMON, 0.05),
        _option("체력", 15, 30, OptionTier.UNCOMMON, 0.025),
        _option("지력", 15, 30, OptionTier.UNCOMMON, 0.025),
        # Common (total 70%)
        _option("최대 대미지", 1, 5, OptionTier.COMMON, 0.07),
        _option("마법 공격력", 1, 5, OptionTier.COMMON, 0.07),
        _option("생명력", 1, 100, OptionTier.COMMON, 0.1),
        _option("마나", 1, 100, OptionTier.COMMON, 0.1),
        _option("스태미나", 1, 100, OptionTier.COMMON, 0.1),
        _option("체력", 1, 15, OptionTier.COMMON, 0.04),
        _option("지력", 1, 15, OptionTier.COMMON, 0.04),
        _option("솜씨", 1, 15, OptionTier.COMMON, 0.04),
        _option("의지", 1, 15, OptionTier.COMMON, 0.04),
        _option("행운", 1, 15, OptionTier.COMMON, 0.04),
        _option("밸런스", 1, 5, OptionTier.COMMON, 0.06, unit="% 증가"),
    )
)
