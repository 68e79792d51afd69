import pandas as pd
import streamlit as st
from core.benchmark import fixture_countries
from core.i18n import supported_locales
from paysbench.strategies import STRATEGIES


def translation_table(locale: str, names) -> pd.DataFrame:
    """Translate every fixture country with each named strategy."""
    rows = []
    for country in fixture_countries().values():
        for name in names:
            out = STRATEGIES[name](country, locale)
            rows.append(
                {
                    "strategy": name,
                    "code": out.code,
                    "label": out.label,
                    "description": out.description,
                }
            )
    return pd.DataFrame(rows, columns=["strategy", "code", "label", "description"])


def render_translations_view():
    """Render the fixture countries translated by the selected strategies."""
    locale = st.session_state.get("locale", "")
    names = st.session_state.get("strategies", [])
    st.header("Translations")
    if not names:
        st.info("Select at least one strategy.")
        return
    df = translation_table(locale, names)
    st.dataframe(df, hide_index=True)

    variants = {
        tuple(g.drop(columns="strategy").itertuples(index=False))
        for _, g in df.groupby("strategy")
    }
    if len(variants) == 1:
        st.success("All strategies agree.")
    else:
        st.error("Strategies disagree.")

    if locale not in supported_locales():
        st.warning(f"No translation table for {locale!r}.")
