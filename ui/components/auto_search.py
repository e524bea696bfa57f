"""Runs a pending auto-search with live updates of the page."""

import asyncio
from typing import Callable

import streamlit as st

from enchant import RolledOption

# Redraw every N draws; redrawing on every draw slows the search down a lot
REFRESH_EVERY = 25


def run_pending_auto_search(refreshers: list[Callable[[], None]]):
    """Execute the auto-search requested by the start button.

    Clicking the stop button while this runs makes Streamlit interrupt the
    script at the next redraw; the interrupted search ends as cancelled and
    the stop callback clears the pending flag on the rerun.
    """
    if not st.session_state.auto_search_pending:
        return
    controller = st.session_state.controller
    target = st.session_state.target_option

    def on_step(option: RolledOption):
        if (
            controller.session.try_count % REFRESH_EVERY == 0
            or option.name.startswith(target)
        ):
            for refresh in refreshers:
                refresh()

    result = asyncio.run(controller.run(target, on_step=on_step))
    st.session_state.auto_search_pending = False
    if result.matched:
        st.toast(f"{result.attempts:,}회 만에 '{result.option.name}' 획득!")
    st.rerun()
