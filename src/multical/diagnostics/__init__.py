"""Diagnostics package.

- round_trip, pretty_month, new_years_table: stdlib only
- leap_years, new_year_scatter: need the optional numpy/matplotlib extras
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "new_year_scatter"]


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "multical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "multical[diagnostics]"') from e
