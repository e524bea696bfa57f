"""
Draw engine tests

Template selection, skewed magnitude, rendering and the distribution of
many draws.
"""
import math
import random
import statistics
from collections import Counter

import pytest

from catalog import DEFAULT_CATALOG, OptionCatalog, OptionTemplate, OptionTier
from enchant import (
    RolledOption,
    draw_option,
    render_option_name,
    roll_magnitude,
    select_template,
)

CRITICAL = OptionTemplate(
    name="크리티컬", range=(4, 5), unit="% 증가", tier=OptionTier.RARE, probability=0.01
)
LIFE = OptionTemplate(name="생명력", range=(1, 100), unit="증가", probability=0.1)


class TestSelectTemplate:
    def test_walks_in_declaration_order(self, three_option_catalog, fixed_random):
        assert select_template(three_option_catalog, fixed_random(0.0)).name == "A"
        assert select_template(three_option_catalog, fixed_random(0.49)).name == "A"
        assert select_template(three_option_catalog, fixed_random(0.5)).name == "B"
        assert select_template(three_option_catalog, fixed_random(0.74)).name == "B"
        assert select_template(three_option_catalog, fixed_random(0.75)).name == "C"

    def test_falls_back_to_last_template(self, three_option_catalog, fixed_random):
        """When r reaches the cumulative sum nothing matches and the last template wins"""
        template = select_template(three_option_catalog, fixed_random(1.0))
        assert template.name == "C"

    def test_normalizes_by_actual_total(self, fixed_random):
        catalog = OptionCatalog(
            templates=(
                OptionTemplate(name="A", range=(1, 1), probability=0.2),
                OptionTemplate(name="B", range=(1, 1), probability=0.2),
            )
        )
        # 0.6 * 0.4 = 0.24 falls into the second half
        assert select_template(catalog, fixed_random(0.6)).name == "B"
        assert select_template(catalog, fixed_random(0.4)).name == "A"

    @pytest.mark.slow
    def test_tier_frequencies_converge(self, rng):
        """Empirical tier frequencies match declared probabilities"""
        draws = 100_000
        counts = Counter(select_template(DEFAULT_CATALOG, rng).tier for _ in range(draws))
        for tier, expected in DEFAULT_CATALOG.tier_probabilities().items():
            observed = counts[tier] / draws
            sigma = math.sqrt(expected * (1 - expected) / draws)
            assert abs(observed - expected) < 5 * sigma, tier


class TestRollMagnitude:
    def test_lowest_uniform_gives_minimum(self, fixed_random):
        assert roll_magnitude(LIFE, fixed_random(0.0)) == 1

    def test_highest_uniform_gives_maximum(self, fixed_random):
        assert roll_magnitude(LIFE, fixed_random(0.9999999)) == 100

    def test_single_value_range(self, fixed_random):
        template = OptionTemplate(name="보호", range=(1, 1), probability=0.05)
        assert roll_magnitude(template, fixed_random(0.99)) == 1

    def test_skew_exponent(self, fixed_random):
        # 0.5 ** 2.5 = 0.177 -> 1 + floor(17.7)
        assert roll_magnitude(LIFE, fixed_random(0.5)) == 18
        # no skew with exponent 1
        assert roll_magnitude(LIFE, fixed_random(0.5), exponent=1.0) == 51

    def test_values_stay_in_range(self, rng):
        for template in DEFAULT_CATALOG.templates:
            low, high = template.range
            for _ in range(500):
                assert low <= roll_magnitude(template, rng) <= high

    def test_median_well_below_midpoint(self, rng):
        values = [roll_magnitude(LIFE, rng) for _ in range(20_000)]
        median = statistics.median(values)
        assert 12 <= median <= 24
        assert median < 50


class TestRendering:
    def test_percent_unit_has_no_space(self):
        assert render_option_name(CRITICAL, 4) == "크리티컬 4% 증가"

    def test_plain_unit_has_one_space(self):
        assert render_option_name(LIFE, 37) == "생명력 37 증가"

    def test_draw_percent_option(self, fixed_random):
        catalog = OptionCatalog(templates=(CRITICAL,))
        assert draw_option(catalog, fixed_random(0.3, 0.0)).name == "크리티컬 4% 증가"
        assert draw_option(catalog, fixed_random(0.3, 0.9999)).name == "크리티컬 5% 증가"

    def test_draw_plain_option(self, fixed_random):
        catalog = OptionCatalog(templates=(LIFE,))
        # 0.6682 ** 2.5 = 0.36497 -> 1 + 36
        assert draw_option(catalog, fixed_random(0.1, 0.6682)).name == "생명력 37 증가"


class TestDrawOption:
    def test_copies_tier(self, three_option_catalog, fixed_random):
        option = draw_option(three_option_catalog, fixed_random(0.8, 0.1))
        assert option == RolledOption(name="C 1 증가", tier=OptionTier.LEGENDARY)

    def test_draws_come_from_catalog(self, rng):
        names = DEFAULT_CATALOG.unique_names()
        for _ in range(1000):
            option = draw_option(DEFAULT_CATALOG, rng)
            assert any(option.name.startswith(f"{name} ") for name in names)

    def test_seeded_draws_are_reproducible(self):
        first_rng, second_rng = random.Random(7), random.Random(7)
        first = [draw_option(rng=first_rng) for _ in range(20)]
        second = [draw_option(rng=second_rng) for _ in range(20)]
        assert first == second
