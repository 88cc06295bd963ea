"""
Interpolation Lab - Calculator Tab
"""

import io

import matplotlib.pyplot as plt
import pandas as pd
import sympy as sp
import streamlit as st

from config import METHOD_LABELS
from difference_table import DifferenceTable
from errors import InterpolationError
from interpolation import METHODS, interpolate, sample_curve
from points import PointSet, parse_query


def create_download_button(fig, filename, label="Download Plot (PNG, 300 DPI)", key=None):
    """Create a download button for a matplotlib figure."""
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=300, bbox_inches='tight', facecolor='white')
    buf.seek(0)
    st.download_button(
        label=label,
        data=buf,
        file_name=f"{filename}.png",
        mime="image/png",
        key=key,
        use_container_width=True
    )


def current_points():
    """PointSet from the session configuration, or None with an error shown."""
    try:
        return PointSet(st.session_state.config['points'])
    except InterpolationError as e:
        st.error(str(e))
        return None


def store_points(points):
    st.session_state.config['points'] = [(p.x, p.y) for p in points]
    st.session_state.last_result = None


# =============================================================================
# TAB FUNCTIONS
# =============================================================================

def setup_tab():
    """Point editor, method selection and single-method result."""
    config = st.session_state.config

    st.markdown("## Interpolation Calculator")
    st.markdown("Enter known data points, choose a method and the x-value to estimate.")

    # ==========================================================================
    # SECTION 1: DATA POINTS
    # ==========================================================================
    st.markdown("---")
    st.subheader("1. Data Points")

    points = current_points()
    if points is None:
        return

    col_table, col_actions = st.columns([3, 1])

    with col_actions:
        method = st.selectbox(
            "Method",
            list(METHODS),
            index=list(METHODS).index(config['method']),
            format_func=lambda m: METHOD_LABELS[m],
            help="Newton-Gregory needs equally spaced x-values"
        )
        config['method'] = method

        if st.button("Add Row", use_container_width=True):
            store_points(points.with_point())
            st.rerun()

        remove_idx = st.selectbox(
            "Row to remove",
            range(len(points)),
            format_func=lambda i: f"Row {i + 1}: ({points[i].x:g}, {points[i].y:g})",
            key="remove_row_select"
        )
        if st.button("Remove Row", use_container_width=True, disabled=len(points) <= 2):
            try:
                store_points(points.without(remove_idx))
                st.rerun()
            except InterpolationError as e:
                st.error(str(e))

        config['check_spacing'] = st.checkbox(
            "Require equal spacing",
            value=config['check_spacing'],
            help="Reject Newton-Gregory input whose steps differ from h = x₁ - x₀"
        )

    with col_table:
        edited = st.data_editor(
            points.to_frame(),
            num_rows="fixed",
            use_container_width=True,
            key=f"point_editor_{len(points)}"
        )
        try:
            edited_points = PointSet.from_frame(edited)
        except InterpolationError as e:
            st.error(str(e))
            return
        if edited_points != points:
            store_points(edited_points)
            points = edited_points

        # Difference table beside the points (Newton-Gregory only)
        if method != 'lagrange':
            st.markdown("**Difference Table**")
            table = DifferenceTable.build(points)
            st.dataframe(
                table.to_frame(xs=points.xs, decimals=config['table_precision']),
                use_container_width=True,
                hide_index=True
            )

    # ==========================================================================
    # SECTION 2: INTERPOLATE
    # ==========================================================================
    st.markdown("---")
    st.subheader("2. Interpolate")

    col_query, col_button = st.columns([3, 1])
    with col_query:
        query_str = st.text_input(
            "Interpolation point",
            value=config['query_str'],
            placeholder="Enter interpolation point",
            help="A number or constant expression (e.g. 1.5, 1/3, pi/4)"
        )
        config['query_str'] = query_str
    with col_button:
        st.markdown("&nbsp;")
        run = st.button("Interpolate", type="primary", use_container_width=True)

    if run:
        try:
            st.session_state.last_result = interpolate(
                points, query_str, method,
                precision=config['equation_precision'],
                check_spacing=config['check_spacing']
            )
            st.session_state.last_query = parse_query(query_str)
        except InterpolationError as e:
            st.session_state.last_result = None
            st.error(str(e))
            return

    result = st.session_state.last_result
    if result is None:
        st.info("Click **Interpolate** to compute an estimate.")
        return

    # ==========================================================================
    # SECTION 3: RESULTS
    # ==========================================================================
    st.markdown("---")
    st.subheader("3. Results")

    st.success(f"Interpolated value: {result.formatted(config['result_precision'])}")

    st.markdown("**Interpolation Equation**")
    st.code(result.equation, language=None)
    st.latex(result.formula.latex())
    if result.formula.substitution():
        st.caption(f"Where {result.formula.substitution()}")

    with st.expander("Expanded polynomial"):
        st.latex(f"f(x) = {sp.latex(result.formula.expanded())}")

    # Plot
    try:
        x_plot, y_plot = sample_curve(points, result.method, num=config['plot_samples'],
                                      padding=config['plot_padding'],
                                      check_spacing=config['check_spacing'])
    except InterpolationError as e:
        st.error(str(e))
        return

    query_x = st.session_state.last_query
    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(x_plot, y_plot, 'b-', linewidth=2, label=METHOD_LABELS[result.method])
    ax.plot(points.xs, points.ys, 'go', markersize=7, label='Data points', zorder=5)
    ax.plot([query_x], [result.estimate], 'rs', markersize=9,
            label=f'f({query_x:g}) = {result.estimate:.4g}', zorder=6)
    ax.set_xlabel('x', fontsize=11, fontweight='bold')
    ax.set_ylabel('f(x)', fontsize=11, fontweight='bold')
    ax.set_title('Interpolating Polynomial', fontsize=13, fontweight='bold')
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)
    st.pyplot(fig)
    create_download_button(fig, "interpolation", key="download_interpolation")
    plt.close(fig)

    # Per-point breakdown for reference
    with st.expander("Data summary"):
        st.dataframe(
            pd.DataFrame({
                'x': points.xs,
                'y': points.ys,
                'step to next': list(points.steps()) + [float('nan')],
            }),
            use_container_width=True,
            hide_index=True
        )
