"""Header component with title and subtitle."""

import streamlit as st


def render_header():
    """Render the page title."""
    st.title("마비노기 성수 시뮬레이터")
    st.caption("원하는 옵션을 얻기까지의 여정을 미리 체험해보세요.")
