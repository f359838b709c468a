"""Configuration: VSOP87 data path from environment."""

import os

# Env var override; unset means the tables bundled with PyMeeus.
VSOP87_PATH_VAR = 'VSOP87_PATH'


def get_vsop87_path() -> str | None:
    """Return the directory holding IMCCE VSOP87B files (VSOP87_PATH env var).

    Returns:
        Path string, or None when the variable is unset or blank.
    """
    path = os.environ.get(VSOP87_PATH_VAR, '').strip()
    return path or None
