# ======================================
# Config for the playground engine
# Defaults match the 600x400 canvas the charts are laid out on
# ======================================

import logging
import os
from typing import Tuple

# Viewport
VIEWPORT_WIDTH: int = 600
VIEWPORT_HEIGHT: int = 400
VIEWPORT_PADDING: int = 40

# Least squares
OPTIMALITY_TOLERANCE: float = 0.01
REGRESSION_X_RANGE: Tuple[float, float] = (0.0, 100.0)
REGRESSION_Y_RANGE: Tuple[float, float] = (0.0, 100.0)
DEFAULT_SLOPE: float = 1.0
DEFAULT_INTERCEPT: float = 5.0

# Derivative page
DERIVATIVE_X_RANGE: Tuple[float, float] = (-5.0, 5.0)
Y_RANGE_SAMPLES: int = 100      # samples used to fit the Y-range
CURVE_SAMPLES: int = 200        # samples per plotted curve
RANGE_MARGIN_FRACTION: float = 0.2
DEFAULT_POINT_X: float = 1.0
DEFAULT_DELTA_X: float = 0.5

# Animation
ANIMATION_SPEED: float = 0.03   # domain units per frame
BOUNDARY_MARGIN: float = 1.0

# PCA
PCA_MIN_BOUNDS: Tuple[float, float] = (-5.0, 5.0)
PCA_BOUNDS_BUFFER: float = 0.2
DEFAULT_PCA_POINTS: int = 50
DEFAULT_PCA_NOISE: float = 20.0
DEFAULT_PCA_ROTATION: float = 45.0

# Coin flip simulation
DEFAULT_SIMULATIONS: int = 20

# GIF export
GIF_FRAMES: int = 120
GIF_FPS: int = 30
GIF_FILENAME: str = "derivative_sweep.gif"

# Logging
LOG_LEVEL: str = os.environ.get("VIZCORE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def validate_config() -> None:
    """Validate configuration values at startup."""
    positive_int_configs = [
        ("VIEWPORT_WIDTH", VIEWPORT_WIDTH),
        ("VIEWPORT_HEIGHT", VIEWPORT_HEIGHT),
        ("Y_RANGE_SAMPLES", Y_RANGE_SAMPLES),
        ("CURVE_SAMPLES", CURVE_SAMPLES),
        ("DEFAULT_PCA_POINTS", DEFAULT_PCA_POINTS),
        ("DEFAULT_SIMULATIONS", DEFAULT_SIMULATIONS),
        ("GIF_FRAMES", GIF_FRAMES),
        ("GIF_FPS", GIF_FPS),
    ]

    for config_name, config_val in positive_int_configs:
        if not isinstance(config_val, int) or config_val <= 0:
            raise ValueError(
                f"{config_name} must be a positive integer, got: {config_val}"
            )

    if VIEWPORT_PADDING < 0 or 2 * VIEWPORT_PADDING >= min(VIEWPORT_WIDTH, VIEWPORT_HEIGHT):
        raise ValueError(
            f"VIEWPORT_PADDING must leave a drawable area, got: {VIEWPORT_PADDING}"
        )

    positive_float_configs = [
        ("OPTIMALITY_TOLERANCE", OPTIMALITY_TOLERANCE),
        ("ANIMATION_SPEED", ANIMATION_SPEED),
        ("RANGE_MARGIN_FRACTION", RANGE_MARGIN_FRACTION),
    ]
    for config_name, config_val in positive_float_configs:
        if config_val <= 0:
            raise ValueError(f"{config_name} must be positive, got: {config_val}")

    lo, hi = DERIVATIVE_X_RANGE
    if hi - lo <= 2 * BOUNDARY_MARGIN:
        raise ValueError(
            f"DERIVATIVE_X_RANGE {DERIVATIVE_X_RANGE} is too narrow for "
            f"BOUNDARY_MARGIN {BOUNDARY_MARGIN}"
        )

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        raise ValueError(f"Unknown VIZCORE_LOG_LEVEL: {LOG_LEVEL}")


def configure_logging() -> None:
    """Install the root handler once; Streamlit reruns keep the first one."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
