import os

import plotly.graph_objects as go

from .harness import BenchmarkResults

COLORS = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728']


def write_search_results(results: BenchmarkResults, path: str = "search_results.csv") -> str:
    """
    Writes one CSV row per (algorithm, array) with the array length and the
    comparison count. Returns the path written; I/O errors propagate.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    results.to_dataframe().to_csv(path, index=False)
    return path


def build_result_figure(results: BenchmarkResults) -> go.Figure:
    """Comparison count against array length, one line per algorithm, both axes logarithmic."""
    fig = go.Figure()
    for idx, name in enumerate(results.algorithms):
        outcomes = results.outcomes_for(name)
        fig.add_trace(go.Scatter(
            x=[outcome.sequence_length for outcome in outcomes],
            y=[outcome.comparison_count for outcome in outcomes],
            mode='lines',
            name=name,
            line=dict(color=COLORS[idx % len(COLORS)], width=3),
            hovertemplate=f'{name}<br>Array length: %{{x}}<br>Comparisons: %{{y}}<extra></extra>'
        ))

    fig.update_layout(
        title="Search algorithm complexity",
        xaxis_title="Array length",
        yaxis_title="Comparison count",
        width=1920,
        height=1000,
        showlegend=True,
        legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01, bordercolor="black", borderwidth=1)
    )
    fig.update_xaxes(type='log')
    fig.update_yaxes(type='log')
    return fig


def draw_result_graph(results: BenchmarkResults, path: str = "search_results.html") -> str:
    """Renders the comparison chart to a standalone HTML file and returns its path."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig = build_result_figure(results)
    fig.write_html(path)
    return path
