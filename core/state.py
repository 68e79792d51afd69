import json
import logging
import os
from typing import Any

import streamlit as st

_LOGGER = logging.getLogger(__name__)

SESSION_FILE = "session_data.json"

# Only persist the user's benchmark preferences. Streamlit widgets such as
# buttons inject their own keys into ``session_state``; restoring those causes
# ``StreamlitAPIException`` on the next run.
PERSISTED_KEYS = {
    "locale",
    "iterations",
    "strategies",
}


def _serializable(value: Any) -> bool:
    return isinstance(value, (int, float, str, bool, list, dict))


def load_state() -> None:
    """Restore Streamlit session state from ``SESSION_FILE`` if it exists."""
    if not os.path.exists(SESSION_FILE):
        return
    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        _LOGGER.warning("Ignoring unreadable session file %s: %s", SESSION_FILE, exc)
        return
    if not isinstance(data, dict):
        _LOGGER.warning("Ignoring session file %s: expected an object", SESSION_FILE)
        return
    for key, val in data.items():
        if key in PERSISTED_KEYS:
            st.session_state.setdefault(key, val)


def save_state() -> None:
    """Persist serializable session state to ``SESSION_FILE``."""
    data = {
        k: v
        for k, v in st.session_state.items()
        if k in PERSISTED_KEYS and _serializable(v)
    }
    try:
        with open(SESSION_FILE, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as exc:
        _LOGGER.warning("Could not save session file %s: %s", SESSION_FILE, exc)
