"""Current option panel with the single-use button."""

import asyncio
from typing import Callable

import streamlit as st

from ui.constants import TIER_COLORS


def _render_current(placeholder):
    option = st.session_state.session.current_option
    if option is None:
        placeholder.markdown(
            "<p style='text-align:center; color:#6b7280; font-size:1.5em'>"
            "버튼을 눌러 시뮬레이션을 시작하세요.</p>",
            unsafe_allow_html=True,
        )
        return
    color = TIER_COLORS[option.tier]
    placeholder.markdown(
        f"<p style='text-align:center; color:{color}; font-size:2.2em; font-weight:bold'>"
        f"{option.name}</p>",
        unsafe_allow_html=True,
    )


def render_option_display() -> Callable[[], None]:
    """Render the current option and the 'use holy water' button.

    Returns:
        A function redrawing the current option, for live updates during an
        auto-search.
    """
    controller = st.session_state.controller
    st.subheader("현재 옵션")
    placeholder = st.empty()
    _render_current(placeholder)

    disabled = st.session_state.auto_search_pending or not controller.can_step()
    if st.button("성수 사용하기", type="primary", disabled=disabled):
        with st.spinner("적용 중..."):
            asyncio.run(controller.step())
        st.rerun()

    return lambda: _render_current(placeholder)
