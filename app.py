import logging

import streamlit as st

from core.state import load_state
from core.version import __version__
from ui.benchmark import render_benchmark_view
from ui.sidebar import render_sidebar
from ui.translations import render_translations_view

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main():
    st.set_page_config(page_title="Pays translation benchmark", layout="wide")
    load_state()
    st.title("Pays translation benchmark")
    st.caption(f"v{__version__}")
    render_sidebar()
    render_translations_view()
    render_benchmark_view()


if __name__ == "__main__":
    main()
