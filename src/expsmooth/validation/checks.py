"""src/expsmooth/validation/checks.py"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from expsmooth.common.errors import ValidationError


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValidationError(msg)


def check_not_empty(s: pd.Series) -> list[str]:
    return [] if len(s) else [f"{s.name}: series is empty"]


def check_finite(s: pd.Series) -> list[str]:
    errs: list[str] = []
    vals = pd.to_numeric(s, errors="coerce").to_numpy(dtype=float)
    bad = ~np.isfinite(vals)
    n_bad = int(bad.sum())
    if n_bad:
        positions = np.flatnonzero(bad)[:10].tolist()
        errs.append(f"{s.name}: non-finite values; bad_count={n_bad}; positions={positions}")
    return errs


def check_min_length(s: pd.Series, min_len: int) -> list[str]:
    if len(s) < int(min_len):
        return [f"{s.name}: expected at least {min_len} observations, got {len(s)}"]
    return []


def check_series(s: pd.Series, *, min_len: int | None = None) -> CheckResult:
    """Input checks run before a series is handed to a model."""
    errors: list[str] = []
    errors += check_not_empty(s)
    errors += check_finite(s)
    if min_len is not None:
        errors += check_min_length(s, min_len)
    return CheckResult(ok=len(errors) == 0, errors=tuple(errors))
