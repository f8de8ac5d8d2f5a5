"""tests/unit/test_validation.py"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from expsmooth.common.errors import ValidationError
from expsmooth.validation.checks import check_series


def test_check_series_passes_clean_input() -> None:
    res = check_series(pd.Series([1.0, 2.0, 3.0], name="y"), min_len=2)
    res.raise_if_failed()  # should not raise
    assert res.ok


def test_check_series_fails_on_empty() -> None:
    res = check_series(pd.Series([], dtype=float, name="y"))
    with pytest.raises(ValidationError):
        res.raise_if_failed()


def test_check_series_reports_non_finite_positions() -> None:
    res = check_series(pd.Series([1.0, np.nan, 3.0, np.inf], name="y"))
    assert not res.ok
    assert "positions=[1, 3]" in res.errors[0]


def test_check_series_fails_below_min_length() -> None:
    res = check_series(pd.Series([1.0], name="y"), min_len=2)
    with pytest.raises(ValidationError):
        res.raise_if_failed()
