import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_DIR = os.path.join(BASE_DIR, "logs")
REPORT_DIR = os.path.join(BASE_DIR, "reports")

DASHBOARD_HOST = "127.0.0.1"
DASHBOARD_PORT = 5000

# --- Block segmentation ---
BLOCK_SIZE = 1024
SUPPORTED_PRECISIONS = ("float32", "float64")
PRECISION = "float32"

# --- Edge thresholds (normalized entropy, 0..1) ---
HIGH_THRESHOLD = 0.95
LOW_THRESHOLD = 0.85

# --- Text chart ---
CHART_WIDTH = 180
CHART_HEIGHT = 100
MIN_CHART_DIMENSION = 32
Y_MAX = None


def validate_config():
    errors = []

    if BLOCK_SIZE <= 0:
        errors.append("BLOCK_SIZE must be positive")

    if PRECISION not in SUPPORTED_PRECISIONS:
        errors.append(
            f"PRECISION must be one of {', '.join(SUPPORTED_PRECISIONS)} "
            f"(got {PRECISION!r})"
        )

    if not (0.0 <= HIGH_THRESHOLD <= 1.0):
        errors.append("HIGH_THRESHOLD must be between 0 and 1")
    if not (0.0 <= LOW_THRESHOLD <= 1.0):
        errors.append("LOW_THRESHOLD must be between 0 and 1")
    if HIGH_THRESHOLD < LOW_THRESHOLD:
        errors.append(
            f"HIGH_THRESHOLD ({HIGH_THRESHOLD}) must not be below "
            f"LOW_THRESHOLD ({LOW_THRESHOLD})"
        )

    if CHART_WIDTH < MIN_CHART_DIMENSION or CHART_HEIGHT < MIN_CHART_DIMENSION:
        errors.append(
            f"CHART_WIDTH and CHART_HEIGHT must be at least {MIN_CHART_DIMENSION}"
        )

    if Y_MAX is not None and Y_MAX <= 0:
        errors.append("Y_MAX must be positive")

    if not (1 <= DASHBOARD_PORT <= 65535):
        errors.append("DASHBOARD_PORT must be between 1 and 65535")

    if errors:
        raise ValueError(
            "Configuration errors:\n  " + "\n  ".join(errors)
        )
