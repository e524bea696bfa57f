"""State management, price persistence, and initialization."""

import logging
from collections.abc import Mapping, MutableMapping

import streamlit as st

from enchant import DEFAULT_CONFIG
from session import parse_price
from ui.defaults import create_default_controller, create_default_session

logger = logging.getLogger(__name__)

PRICE_PARAM = "price"


def load_unit_price(params: Mapping[str, str], default: int) -> int:
    """Read the stored unit price, falling back to the default."""
    stored = params.get(PRICE_PARAM)
    if stored is None:
        return default
    price = parse_price(stored)
    if price is None:
        logger.warning("Ignoring stored unit price %r", stored)
        return default
    return price


def save_unit_price(params: MutableMapping[str, str], price: int):
    params[PRICE_PARAM] = str(price)


def update_url():
    """Persist the current unit price in the URL parameters."""
    save_unit_price(st.query_params, st.session_state.session.unit_price)


def initialize_session_state():
    """Initialize session state from URL or defaults."""
    if "initialized" not in st.session_state:
        st.session_state.initialized = True
        unit_price = load_unit_price(
            st.query_params, DEFAULT_CONFIG.default_unit_price
        )
        session = create_default_session(unit_price=unit_price)
        st.session_state.session = session
        st.session_state.controller = create_default_controller(session)
        st.session_state.target_option = ""
        st.session_state.auto_search_pending = False
        update_url()
