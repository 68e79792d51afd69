import streamlit as st
from core.i18n import supported_locales
from core.presets import DEFAULT_LOCALE, UI_ITERATIONS
from core.state import save_state
from paysbench.strategies import STRATEGIES


def render_sidebar():
    """Sidebar with locale, iteration count and strategy selection."""
    st.session_state.setdefault("locale", DEFAULT_LOCALE)
    st.session_state.setdefault("iterations", UI_ITERATIONS)
    st.session_state.setdefault("strategies", list(STRATEGIES))
    st.session_state["strategies"] = [n for n in st.session_state["strategies"] if n in STRATEGIES]

    st.sidebar.header("Settings")
    st.sidebar.text_input("Locale", key="locale")
    st.sidebar.caption("Supported: " + ", ".join(supported_locales()))
    st.sidebar.number_input("Iterations", min_value=1, step=1000, key="iterations")
    st.sidebar.multiselect("Strategies", options=list(STRATEGIES), key="strategies")
    save_state()
