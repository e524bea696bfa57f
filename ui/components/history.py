"""Scrolling history of recent outcomes."""

from typing import Callable

import streamlit as st

from ui.constants import TIER_COLORS


def _render_entries(placeholder):
    session = st.session_state.session
    entries = session.history_entries()
    if not entries:
        placeholder.caption("기록이 없습니다.")
        return
    lines = []
    for index, (attempt, option) in enumerate(entries):
        opacity = 1.0 if index == 0 else 0.7
        lines.append(
            f"<div style='opacity:{opacity}'>"
            f"<span style='color:#6b7280'>{attempt}회차:</span> "
            f"<span style='color:{TIER_COLORS[option.tier]}'>{option.name}</span>"
            "</div>"
        )
    placeholder.markdown("\n".join(lines), unsafe_allow_html=True)


def render_history() -> Callable[[], None]:
    """Render the history panel.

    Returns:
        A function redrawing the history, for live updates during an
        auto-search.
    """
    st.subheader("옵션 기록")
    with st.container(height=256, border=True):
        placeholder = st.empty()
    _render_entries(placeholder)
    return lambda: _render_entries(placeholder)
