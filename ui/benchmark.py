import streamlit as st
from core.benchmark import compare_strategies


def render_benchmark_view():
    """Run the timing comparison on demand and show the results."""
    st.header("Benchmark")
    iterations = int(st.session_state.get("iterations", 1))
    names = list(st.session_state.get("strategies", []))
    inputs = {"iterations": iterations, "strategies": names}

    # Results only describe the settings they were run with.
    if st.session_state.get("benchmark_inputs") != inputs:
        st.session_state.pop("benchmark_results", None)
        st.session_state.pop("benchmark_inputs", None)

    if st.button("Run benchmark", key="run_benchmark", disabled=not names):
        with st.spinner(f"Running {iterations} iterations..."):
            st.session_state["benchmark_results"] = compare_strategies(iterations, names)
            st.session_state["benchmark_inputs"] = inputs
    df = st.session_state.get("benchmark_results")
    if df is not None:
        st.caption(f"{iterations} iterations of {', '.join(names)}")
        st.dataframe(df, hide_index=True)
        fastest = df.iloc[0]
        st.markdown(f"Fastest: **{fastest['strategy']}** ({fastest['elapsed_ms']:.1f} ms)")
