from __future__ import annotations

from pathlib import Path
from typing import Tuple

import numpy as np
import pandas as pd

from scripts.config import (
    CATEGORICAL_COLUMNS,
    FEATURE_NAMES,
    N_CATEGORY_LEVELS,
    N_ROWS,
    RANDOM_STATE,
    TARGET_NAMES,
)

# Targets holding class labels; the rest are continuous.
_CATEGORICAL_TARGETS = ("y1", "y3")


def _as_categorical_targets(y: pd.DataFrame) -> pd.DataFrame:
    y = y.copy()
    for name in _CATEGORICAL_TARGETS:
        y[name] = y[name].astype("category")
    y["y2"] = y["y2"].astype(float)
    return y


def make_demo_data(
    n_rows: int = N_ROWS,
    random_state: int = RANDOM_STATE,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Generate a reproducible synthetic dataset for the walkthrough.

    ``X`` has seven columns: the continuous groups ``a`` (2) and ``b`` (3)
    followed by the integer-coded categorical group ``x`` (2).  Each target
    depends mostly on one group:

    * ``y1`` – class label driven by ``a`` and ``x1``
    * ``y2`` – linear in ``b`` plus noise
    * ``y3`` – class label driven by ``x`` and ``a1``

    Parameters
    ----------
    n_rows : int
        Number of observations.
    random_state : int
        Seed for the NumPy generator.

    Returns
    -------
    Tuple[pd.DataFrame, pd.DataFrame]
        Features ``X`` and targets ``y`` (columns ``y1 y2 y3``).
    """
    if n_rows < 2:
        raise ValueError(f"n_rows must be at least 2, got {n_rows}")
    rng = np.random.default_rng(random_state)

    a = rng.normal(size=(n_rows, 2))
    b = rng.normal(size=(n_rows, 3))
    x = rng.integers(0, N_CATEGORY_LEVELS, size=(n_rows, len(CATEGORICAL_COLUMNS)))

    X = pd.DataFrame(np.column_stack([a, b, x]), columns=list(FEATURE_NAMES))
    for col in CATEGORICAL_COLUMNS:
        X[col] = X[col].astype(int)

    y1 = np.where(a[:, 0] + a[:, 1] + 0.5 * x[:, 0] > 0.5, "high", "low")
    y2 = b @ np.array([1.5, -2.0, 0.5]) + 0.1 * rng.normal(size=n_rows)
    y3 = np.array(["red", "green", "blue"])[(x[:, 0] + x[:, 1] + (a[:, 0] > 0)) % 3]

    y = pd.DataFrame({"y1": y1, "y2": y2, "y3": y3})
    return X, _as_categorical_targets(y)


def load_data(
    predictors_path: str | Path,
    target_path: str | Path,
    **kwargs
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Load predictor and target data from CSV files.

    Parameters
    ----------
    predictors_path : str | Path
        Path to the predictors CSV (seven feature columns).
    target_path : str | Path
        Path to the targets CSV with columns ``y1``, ``y2`` and ``y3``.
    **kwargs
        Additional keyword arguments passed to ``pandas.read_csv``.

    Returns
    -------
    Tuple[pd.DataFrame, pd.DataFrame]
        The features (X) and the three targets (y), categorical targets
        carrying a ``category`` dtype.

    Raises
    ------
    ValueError
        If a file format is unsupported, the predictors do not have seven
        columns, the target columns are wrong or the row counts differ.
    FileNotFoundError
        If the specified paths do not exist.
    """
    predictors_path = Path(predictors_path)
    target_path = Path(target_path)

    if not predictors_path.exists():
        raise FileNotFoundError(f"Predictors file not found: {predictors_path}")
    if not target_path.exists():
        raise FileNotFoundError(f"Target file not found: {target_path}")

    if predictors_path.suffix == ".csv":
        X = pd.read_csv(predictors_path, **kwargs)
    else:
        raise ValueError(f"Unsupported predictors file format: {predictors_path.suffix}")

    if target_path.suffix == ".csv":
        y = pd.read_csv(target_path, **kwargs)
    else:
        raise ValueError(f"Unsupported target file format: {target_path.suffix}")

    if X.shape[1] != len(FEATURE_NAMES):
        raise ValueError(
            f"Predictors file must contain {len(FEATURE_NAMES)} columns, found {X.shape[1]}."
        )
    if list(y.columns) != list(TARGET_NAMES):
        raise ValueError(
            f"Target file must contain exactly the columns {list(TARGET_NAMES)}, found {list(y.columns)}."
        )
    if len(X) != len(y):
        raise ValueError(f"Predictors have {len(X)} rows but targets have {len(y)}.")

    return X, _as_categorical_targets(y)


__all__ = ["make_demo_data", "load_data"]
