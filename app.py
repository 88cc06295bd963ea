"""
Interpolation Lab
Interactive Web Interface for Newton-Gregory and Lagrange Interpolation

Features:
- Editable point table with live difference table
- Forward / backward Newton-Gregory and Lagrange estimates
- Equation in plain text, LaTeX and expanded form
- Side-by-side comparison of all methods

Run with:
    streamlit run app.py
"""

import streamlit as st

from config import load_config, log_level
from logging_config import setup_logging

# =============================================================================
# PAGE CONFIGURATION
# =============================================================================

st.set_page_config(
    page_title="Interpolation Lab",
    page_icon=None,
    layout="wide",
    initial_sidebar_state="collapsed"
)

# Custom CSS
st.markdown("""
<style>
    .stApp {
        background-color: #f9f9f9;
        background-image: none;
    }

    .main-header {
        font-size: 2.2rem;
        font-weight: 700;
        color: #1e3a5f;
        margin-bottom: 0;
    }

    /* Make tabs more prominent */
    .stTabs [data-baseweb="tab-list"] {
        gap: 8px;
        background-color: #e8e8e8;
        padding: 8px;
        border-radius: 8px;
    }

    .stTabs [data-baseweb="tab"] {
        font-size: 1.1rem;
        font-weight: 600;
        padding: 12px 24px;
        border-radius: 6px;
    }

    .stTabs [aria-selected="true"] {
        background-color: #1e3a5f !important;
        color: white !important;
    }

    @media (prefers-color-scheme: dark) {
        .stApp {
            background-color: #1a1a2e !important;
        }
        .main-header {
            color: #4da6ff !important;
        }
    }

    /* Completely hide sidebar */
    [data-testid="stSidebar"] {
        display: none;
    }
</style>
""", unsafe_allow_html=True)

# Import modules
from tab_setup import setup_tab
from tab_compare import compare_tab


# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application function."""

    # Initialize session state
    if 'config' not in st.session_state:
        st.session_state.config = load_config()
    if 'last_result' not in st.session_state:
        st.session_state.last_result = None

    setup_logging(log_level(st.session_state.config))

    # Header
    st.markdown('<p class="main-header">Interpolation Lab</p>', unsafe_allow_html=True)
    st.markdown("Estimate values between known samples with **Newton-Gregory** and **Lagrange** polynomials")

    with st.expander("**About the Methods**", expanded=False):
        st.markdown("#### **Newton-Gregory Forward Difference**")
        st.markdown(r"For equally spaced points with step $h$ and $u = (x - x_0)/h$:")
        st.latex(r"f(x) = y_0 + \sum_{k=1}^{n-1} \frac{\Delta^k y_0}{k!} \prod_{j=0}^{k-1} (u - j)")

        st.markdown("#### **Newton-Gregory Backward Difference**")
        st.markdown(r"With $u = (x - x_{n-1})/h$, using the last entry of each difference column:")
        st.latex(r"f(x) = y_{n-1} + \sum_{k=1}^{n-1} \frac{\Delta^k y_{n-1-k}}{k!} \prod_{j=0}^{k-1} (u + j)")

        st.markdown("#### **Finite Differences**")
        st.latex(r"\Delta^k y_j = \Delta^{k-1} y_{j+1} - \Delta^{k-1} y_j, \quad \Delta^0 y_j = y_j")

        st.markdown("#### **Lagrange Polynomial**")
        st.markdown("Works for any distinct x-values, equally spaced or not:")
        st.latex(r"f(x) = \sum_{i=0}^{n-1} y_i \prod_{j \ne i} \frac{x - x_j}{x_i - x_j}")

        st.markdown(r"""
        **Requirements**
        - At least two points
        - Newton-Gregory: equally spaced x-values ($h \ne 0$)
        - Lagrange: pairwise distinct x-values
        """)

    # ==========================================================================
    # TABS
    # ==========================================================================

    tab_calc, tab_cmp = st.tabs([
        "Calculator",
        "Compare Methods"
    ])

    with tab_calc:
        setup_tab()

    with tab_cmp:
        compare_tab()

    # Footer
    st.markdown("---")
    st.markdown("""
    <div style="text-align: center; color: #666;">
    <small><b>Interpolation Lab</b> - Newton-Gregory and Lagrange Interpolation</small>
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
