"""Dialog listing every option with its range, tier and probability."""

import streamlit as st

from ui.constants import TIER_COLORS


@st.dialog("옵션 확률표", width="large")
def render_probability_dialog():
    session = st.session_state.session
    table = session.catalog.probability_table()
    colors = [TIER_COLORS[t.tier] for t in session.catalog.templates]

    def _color_rows(column):
        if column.name in ("옵션", "등급"):
            return [f"color: {color}" for color in colors]
        return [""] * len(column)

    st.dataframe(
        table.style.apply(_color_rows),
        hide_index=True,
        use_container_width=True,
    )
    tier_totals = session.catalog.tier_probabilities()
    st.caption(
        " · ".join(
            f"{tier.value}: {probability * 100:.1f}%"
            for tier, probability in tier_totals.items()
        )
    )
