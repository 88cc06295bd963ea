"""
Interpolation Lab - Compare Tab
"""

import matplotlib.pyplot as plt
import numpy as np
import streamlit as st

from config import METHOD_LABELS
from errors import InterpolationError
from interpolation import METHODS, compare_methods, sample_curve
from points import parse_query
from tab_setup import create_download_button, current_points


def compare_tab():
    """Run every method on the calculator's point set and query."""
    config = st.session_state.config

    st.markdown("### Compare Interpolation Methods")

    points = current_points()
    if points is None:
        return

    if not config['query_str']:
        st.warning("Enter an interpolation point in the **Calculator** tab first!")
        return

    try:
        query_x = parse_query(config['query_str'])
        df = compare_methods(points, query_x,
                             precision=config['equation_precision'],
                             check_spacing=config['check_spacing'])
    except InterpolationError as e:
        st.error(str(e))
        return

    col1, col2 = st.columns(2)
    with col1:
        st.info(f"**Points**: {len(points)}")
    with col2:
        st.info(f"**Interpolation point**: x = {query_x:g}")

    # ==========================================================================
    # COMPARISON TABLE
    # ==========================================================================

    estimates = df['Estimate'].dropna()
    if len(estimates) > 1:
        spread = float(estimates.max() - estimates.min())
        st.metric("Largest disagreement", f"{spread:.2e}")

    def highlight_rows(row):
        """Mark methods that could not be applied."""
        if row['Error']:
            return ['background-color: #f8d7da'] * len(row)
        return [''] * len(row)

    st.dataframe(
        df.style.apply(highlight_rows, axis=1).format({
            'Estimate': f"{{:.{config['result_precision']}f}}"
        }, na_rep='-'),
        use_container_width=True,
        hide_index=True
    )

    # ==========================================================================
    # OVERLAY PLOT
    # ==========================================================================

    st.markdown("---")
    st.markdown("#### Interpolating Polynomials")

    fig, ax = plt.subplots(figsize=(10, 5))
    colors = plt.cm.tab10(np.linspace(0, 1, len(METHODS)))
    styles = ['-', '--', ':']

    for idx, method in enumerate(METHODS):
        try:
            x_plot, y_plot = sample_curve(points, method, num=config['plot_samples'],
                                          padding=config['plot_padding'],
                                          check_spacing=config['check_spacing'])
        except InterpolationError:
            continue
        ax.plot(x_plot, y_plot, linestyle=styles[idx % len(styles)], color=colors[idx],
                linewidth=2, label=METHOD_LABELS[method], alpha=0.8)

    ax.plot(points.xs, points.ys, 'ko', markersize=7, label='Data points', zorder=5)
    for estimate in df['Estimate']:
        if np.isfinite(estimate):
            ax.plot([query_x], [estimate], 'rs', markersize=8, zorder=6)

    ax.set_xlabel('x', fontsize=13, fontweight='bold')
    ax.set_ylabel('f(x)', fontsize=13, fontweight='bold')
    ax.set_title('Method Comparison', fontsize=15, fontweight='bold')
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)
    st.pyplot(fig)
    create_download_button(fig, "interpolation_comparison", key="download_comparison")
    plt.close(fig)
