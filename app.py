"""Holy water enchant simulator - main application entry point."""

import logging

import streamlit as st

from ui import initialize_session_state
from ui.components import (
    render_control_panel,
    render_header,
    render_history,
    render_option_display,
    run_pending_auto_search,
)

st.set_page_config(page_title="마비노기 성수 시뮬레이터", layout="wide")
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Initialize session state
initialize_session_state()

# Render UI
render_header()

col_controls, col_current = st.columns([1, 2])
with col_controls:
    with st.container(border=True):
        refresh_totals = render_control_panel()
with col_current:
    with st.container(border=True):
        refresh_current = render_option_display()

refresh_history = render_history()

run_pending_auto_search([refresh_totals, refresh_current, refresh_history])
