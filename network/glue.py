"""Column-splitting and column-merging glue for the composite network.

Every helper here is stateless and total over well-formed input: it only
slices, labels or packs tables.  Row counts are checked at each seam so
that a misaligned table fails here rather than deep inside scikit-learn.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from scripts.config import (
    CATEGORICAL_COLUMNS,
    CONTINUOUS_COLUMNS,
    FEATURE_NAMES,
    TARGET_NAMES,
)


def _as_frame(X) -> pd.DataFrame:
    if isinstance(X, pd.DataFrame):
        return X
    arr = np.asarray(X)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D table, got array with {arr.ndim} dimension(s).")
    return pd.DataFrame(arr)


def _check_rows(*tables) -> int:
    counts = {len(t) for t in tables}
    if len(counts) > 1:
        raise ValueError(f"Row counts are misaligned: {sorted(counts)}")
    return counts.pop() if counts else 0


def select_columns(X, columns: Sequence[int], names: Sequence[str]) -> pd.DataFrame:
    """Select *columns* (0-based positions) from *X* and label them *names*."""
    if len(columns) != len(names):
        raise ValueError(f"{len(columns)} column(s) selected but {len(names)} name(s) given.")
    df = _as_frame(X)
    out = df.iloc[:, list(columns)].copy()
    out.columns = list(names)
    return out


def split_features(X) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Split the 7-column feature matrix into its continuous and categorical groups.

    Returns ``(W, Z)`` where ``W`` holds columns 1-5 labelled ``a1 a2 b1 b2 b3``
    and ``Z`` holds columns 6-7 labelled ``x1 x2`` with a categorical dtype.
    """
    df = _as_frame(X)
    if df.shape[1] != len(FEATURE_NAMES):
        raise ValueError(
            f"Expected {len(FEATURE_NAMES)} feature columns, got {df.shape[1]}."
        )
    n_cont = len(CONTINUOUS_COLUMNS)
    W = select_columns(df, range(n_cont), CONTINUOUS_COLUMNS).astype(float)
    Z = select_columns(df, range(n_cont, df.shape[1]), CATEGORICAL_COLUMNS)
    for col in Z.columns:
        values = Z[col]
        if pd.api.types.is_float_dtype(values) and (values == values.round()).all():
            values = values.astype(int)
        Z[col] = values.astype("category")
    return W, Z


def hstack(*tables) -> pd.DataFrame:
    """Concatenate labelled tables side by side, keeping the first table's index."""
    if not tables:
        raise ValueError("hstack needs at least one table.")
    frames = [_as_frame(t) for t in tables]
    _check_rows(*frames)
    index = frames[0].index
    out = pd.concat([f.set_axis(index, axis=0) for f in frames], axis=1)
    if out.columns.duplicated().any():
        dupes = sorted(set(out.columns[out.columns.duplicated()].astype(str)))
        raise ValueError(f"Duplicate column names after hstack: {dupes}")
    return out


def unpack_targets(y) -> Tuple[pd.Series, pd.Series, pd.Series]:
    """Return the three named target columns of *y* as series."""
    if not isinstance(y, pd.DataFrame):
        raise ValueError("Targets must be a DataFrame with columns y1, y2, y3.")
    missing = [name for name in TARGET_NAMES if name not in y.columns]
    if missing:
        raise ValueError(f"Targets are missing column(s): {missing}")
    return tuple(y[name] for name in TARGET_NAMES)  # type: ignore[return-value]


def _column(values):
    # Keep categorical labels categorical; drop any Series index.
    if isinstance(values, pd.Series):
        return values.array
    if isinstance(values, pd.Categorical):
        return values
    return np.asarray(values)


def merge_predictions(y1, y2, y3, index=None) -> pd.DataFrame:
    """Pack three prediction vectors into one table with columns ``y1 y2 y3``."""
    columns = [_column(v) for v in (y1, y2, y3)]
    for name, col in zip(TARGET_NAMES, columns):
        if col.ndim != 1:
            raise ValueError(f"Prediction '{name}' must be 1-D, got shape {col.shape}.")
    n_rows = _check_rows(*columns)
    if index is not None and len(index) != n_rows:
        raise ValueError(f"Index has {len(index)} rows, predictions have {n_rows}.")
    return pd.DataFrame(dict(zip(TARGET_NAMES, columns)), index=index)


__all__ = [
    "select_columns",
    "split_features",
    "hstack",
    "unpack_targets",
    "merge_predictions",
]
