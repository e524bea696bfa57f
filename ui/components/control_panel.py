"""Control panel: unit price, target option, and simulation buttons."""

from typing import Callable

import streamlit as st

from session import format_number
from ui.components.probability_table import render_probability_dialog
from ui.constants import TARGET_PLACEHOLDER
from ui.state import update_url


def _on_price_change():
    """Callback when the unit price input changes."""
    session = st.session_state.session
    if session.set_unit_price(st.session_state.price_input):
        update_url()
    # Show the accepted price formatted, or restore the previous one
    st.session_state.price_input = format_number(session.unit_price)


def _on_reset():
    """Callback for the reset button."""
    st.session_state.controller.reset()
    st.session_state.auto_search_pending = False
    st.session_state.target_option = ""


def _on_start_auto_search():
    controller = st.session_state.controller
    if controller.can_start(st.session_state.target_option):
        st.session_state.auto_search_pending = True


def _on_stop_auto_search():
    st.session_state.controller.cancel()
    st.session_state.auto_search_pending = False


def render_control_panel() -> Callable[[], None]:
    """Render the control panel.

    Returns:
        A function redrawing the attempt and gold totals, for live updates
        during an auto-search.
    """
    session = st.session_state.session
    controller = st.session_state.controller
    searching = st.session_state.auto_search_pending

    # Pre-initialize widget key to avoid conflict with value parameter
    if "price_input" not in st.session_state:
        st.session_state.price_input = format_number(session.unit_price)
    st.text_input(
        "성수 개당 가격 (골드)",
        key="price_input",
        on_change=_on_price_change,
    )

    option_names = [""] + session.catalog.unique_names()
    st.selectbox(
        "목표 옵션 (자동 실행용)",
        option_names,
        format_func=lambda name: name or TARGET_PLACEHOLDER,
        key="target_option",
        disabled=searching,
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button("확률 보기", use_container_width=True):
            render_probability_dialog()
    with col2:
        st.button(
            "초기화",
            use_container_width=True,
            on_click=_on_reset,
        )

    if searching:
        st.button(
            "자동 실행 중지",
            type="primary",
            use_container_width=True,
            on_click=_on_stop_auto_search,
        )
    else:
        st.button(
            "목표까지 자동 실행",
            use_container_width=True,
            disabled=not controller.can_start(st.session_state.target_option),
            on_click=_on_start_auto_search,
        )

    st.divider()
    totals = st.empty()

    def refresh():
        with totals.container():
            c1, c2 = st.columns(2)
            c1.metric("총 시도 횟수", f"{format_number(session.try_count)}회")
            c2.metric("총 사용 골드", f"{format_number(session.total_cost)} G")

    refresh()
    return refresh
