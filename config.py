"""
Interpolation Lab - Configuration

Defaults shared by the interpolation core and the Streamlit tabs. The UI
seeds ``st.session_state.config`` from ``load_config()``.

Environment overrides:
    INTERP_LOG_LEVEL   logging level name (DEBUG, INFO, ...)
    INTERP_PRECISION   decimals used for equation coefficients
"""

import copy
import logging
import os

logger = logging.getLogger(__name__)

# Decimal places
EQUATION_PRECISION = 2   # coefficient magnitudes in rendered equations
FACTOR_PRECISION = 2     # x-values inside Lagrange factors
RESULT_PRECISION = 4     # displayed estimate
TABLE_PRECISION = 4      # difference table cells

# Tolerances for the Newton-Gregory equal-spacing check
SPACING_RTOL = 1e-9
SPACING_ATOL = 1e-12

# Points drawn for the interpolating curve
PLOT_SAMPLES = 200

# Starting point set of the editor (same as a fresh calculator)
DEFAULT_POINTS = [(0.0, 0.0), (1.0, 1.0)]

METHOD_LABELS = {
    'newton-forward': "Newton-Gregory Forward",
    'newton-backward': "Newton-Gregory Backward",
    'lagrange': "Lagrange",
}
DEFAULT_METHOD = 'newton-forward'

DEFAULT_CONFIG = {
    'points': DEFAULT_POINTS,
    'method': DEFAULT_METHOD,
    'query_str': '',
    'equation_precision': EQUATION_PRECISION,
    'result_precision': RESULT_PRECISION,
    'table_precision': TABLE_PRECISION,
    'check_spacing': True,
    'plot_samples': PLOT_SAMPLES,
    'plot_padding': 0.1,
    'log_level': 'INFO',
}


def load_config(overrides=None):
    """
    Return a fresh configuration dictionary.

    Starts from ``DEFAULT_CONFIG``, applies environment overrides and then
    ``overrides``. Unknown keys in ``overrides`` raise ``KeyError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    env_level = os.environ.get('INTERP_LOG_LEVEL')
    if env_level:
        config['log_level'] = env_level.upper()

    env_precision = os.environ.get('INTERP_PRECISION')
    if env_precision:
        try:
            config['equation_precision'] = int(env_precision)
        except ValueError:
            logger.warning(f"Ignoring INTERP_PRECISION={env_precision!r}, not an integer")

    for key, value in (overrides or {}).items():
        if key not in config:
            raise KeyError(f"Unknown configuration key: {key}")
        config[key] = value

    return config


def log_level(config):
    """Translate the configured level name into a ``logging`` constant."""
    level = logging.getLevelName(str(config.get('log_level', 'INFO')).upper())
    return level if isinstance(level, int) else logging.INFO
