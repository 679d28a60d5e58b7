import streamlit as st
import time
import numpy as np
import plotly.graph_objects as go
from search_benchmark.searches import SEARCH_ALGORITHMS
from search_benchmark.harness import BenchmarkConfig, run_benchmark, summarize_results
from search_benchmark.results_writer import build_result_figure

st.set_page_config(page_title="Search Complexity Benchmark Dashboard", layout="wide")

st.title("Search Complexity Benchmark Dashboard")
st.markdown("Compare how many comparisons binary, interpolation and interpolated binary search need on sorted arrays.")

st.sidebar.header("Configuration")

st.sidebar.subheader("Arrays")
num_arrays = st.sidebar.number_input(
    "Number of Arrays",
    min_value=1,
    max_value=20000,
    value=1000,
    step=100,
    help="Each array is searched once by every selected method"
)

min_len, max_len = st.sidebar.slider(
    "Array Length Range",
    min_value=1,
    max_value=10000,
    value=(2, 500),
    help="Lengths are drawn uniformly from [min, max)"
)

value_step = st.sidebar.number_input(
    "Value Step",
    min_value=1,
    max_value=1000,
    value=10,
    help="Element k is drawn from [k * step, k * step + step). Small steps produce more duplicates."
)

use_seed = st.sidebar.checkbox("Fixed Random Seed", value=False)
seed = st.sidebar.number_input("Seed", min_value=0, value=42, step=1) if use_seed else None

st.sidebar.subheader("Search Methods")
selected_algorithms = [
    name for name in SEARCH_ALGORITHMS
    if st.sidebar.checkbox(name, value=True, key=f"algo_{name}")
]

st.sidebar.markdown("---")
run_benchmark_clicked = st.sidebar.button("Run Benchmark", type="primary")

if 'results' not in st.session_state:
    st.session_state.results = None
    st.session_state.summary = None
    st.session_state.elapsed_ms = 0.0


def run_benchmark_pipeline(config: BenchmarkConfig):
    """Generate the arrays and run the selected searches"""
    progress_bar = st.progress(0)
    status_text = st.empty()

    status_text.text(f"Generating and searching {config.num_arrays} sorted arrays...")
    progress_bar.progress(10)
    start_time = time.perf_counter()
    results = run_benchmark(config)
    elapsed_ms = (time.perf_counter() - start_time) * 1e3

    progress_bar.progress(100)
    status_text.text("Benchmark complete!")
    return results, elapsed_ms


# Run benchmark when button is clicked
if run_benchmark_clicked:
    if not selected_algorithms:
        st.warning("Please select at least one method to benchmark!")
    elif max_len <= min_len:
        st.warning("The maximum array length must be greater than the minimum length.")
    else:
        config = BenchmarkConfig(
            num_arrays=int(num_arrays),
            min_len=int(min_len),
            max_len=int(max_len),
            value_step=int(value_step),
            seed=int(seed) if seed is not None else None,
            algorithms=selected_algorithms,
        )
        with st.spinner("Running benchmark..."):
            results, elapsed_ms = run_benchmark_pipeline(config)
            st.session_state.results = results
            st.session_state.summary = summarize_results(results)
            st.session_state.elapsed_ms = elapsed_ms

# Display results
if st.session_state.results is not None:
    results = st.session_state.results

    st.markdown("---")
    st.subheader("Benchmark Results")

    lengths = [batch.sequence_length for batch in results.batches]
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Arrays Searched", f"{len(results):,}")
    with col2:
        st.metric("Mean Array Length", f"{np.mean(lengths):.1f}" if lengths else "N/A")
    with col3:
        st.metric("Run Time", f"{st.session_state.elapsed_ms:.1f} ms")

    summary = st.session_state.summary.copy()
    summary['Avg Comparisons'] = summary['Avg Comparisons'].map(lambda v: f"{v:.2f}")
    summary['Success Rate'] = summary['Success Rate'].map(lambda v: f"{v:.1f}%")
    st.dataframe(summary, use_container_width=True, hide_index=True)

    st.markdown("---")
    st.subheader("Performance Comparison")

    tab1, tab2 = st.tabs(["Comparisons vs. Array Length", "Average Comparisons"])

    with tab1:
        fig = build_result_figure(results)
        fig.update_layout(width=None, height=600)
        st.plotly_chart(fig, use_container_width=True)

    with tab2:
        bar_fig = go.Figure()
        bar_fig.add_trace(go.Bar(
            x=st.session_state.summary['Search Method'],
            y=st.session_state.summary['Avg Comparisons'],
            marker_color='#3498DB',
        ))
        bar_fig.update_layout(
            xaxis_title="Search Method",
            yaxis_title="Average Comparisons",
            height=400,
        )
        st.plotly_chart(bar_fig, use_container_width=True)

    st.download_button(
        "Download CSV",
        data=results.to_dataframe().to_csv(index=False),
        file_name="search_results.csv",
        mime="text/csv",
    )

else:
    st.info("Configure your benchmark settings in the sidebar and click 'Run Benchmark' to start.")

    st.markdown("""
    ### How to Use

    1. **Configure Arrays**: Set how many arrays to generate and the range their lengths are drawn from
    2. **Shape the Values**: The value step controls how spread out (or duplicate-heavy) the arrays are
    3. **Select Methods**: Choose which search methods to compare
    4. **Run Benchmark**: Click the "Run Benchmark" button to start the evaluation
    5. **Analyze Results**: Compare the averaged table and the log-log chart of comparisons against array length

    ### Search Methods

    - **Binary search**: Halves the range every round
    - **Interpolation search**: Probes where the value should be, assuming evenly spread values
    - **Interpolated binary search**: Probes by interpolation, then bisects the side of the probe the value falls on
    """)
