"""Composite Models – Global Configuration

This module centralises every *immutable* knob that governs the worked
example: the column layout of the feature matrix, the target names, the
default component hyper-parameters and the replay search-space.  **Never**
import these constants into a function just to mutate them.
"""
from __future__ import annotations

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Reproducibility
# ---------------------------------------------------------------------------
RANDOM_STATE: int = 42  # Global seed – applies to every RNG-capable component

# ---------------------------------------------------------------------------
# Data layout
# ---------------------------------------------------------------------------
N_ROWS: int = 300
TEST_SIZE: float = 0.3

# Sub-feature groups in the order they are concatenated into ``X``.
FEATURE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "a": ("a1", "a2"),
    "b": ("b1", "b2", "b3"),
    "x": ("x1", "x2"),
}
FEATURE_NAMES: Tuple[str, ...] = tuple(
    name for group in FEATURE_GROUPS.values() for name in group
)
# Columns 1-5 are continuous, columns 6-7 hold integer-coded categories.
CONTINUOUS_COLUMNS: Tuple[str, ...] = FEATURE_GROUPS["a"] + FEATURE_GROUPS["b"]
CATEGORICAL_COLUMNS: Tuple[str, ...] = FEATURE_GROUPS["x"]
N_CATEGORY_LEVELS: int = 3

TARGET_NAMES: Tuple[str, ...] = ("y1", "y2", "y3")

# ---------------------------------------------------------------------------
# Component defaults
# ---------------------------------------------------------------------------
_COMPONENT_DEFAULTS: dict[str, dict] = {
    "OneHotEncoder": {},
    "DecisionTreeClassifier": {"max_depth": 4},
    "Ridge": {"alpha": 1.0},
    "SVC": {"C": 1.0, "kernel": "rbf", "gamma": "scale"},
}

MODEL_FAMILIES: Tuple[str, ...] = tuple(
    name for name in _COMPONENT_DEFAULTS if name != "OneHotEncoder"
)
PREP_STEPS: Tuple[str, ...] = ("OneHotEncoder",)

# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------
OUTPUT_DIR: str = "05_outputs"
PREVIEW_ROWS: int = 5  # rows rendered per table in the console walkthrough

# ---------------------------------------------------------------------------
# Replay search-space – nested composite hyper-parameters (immutable)
# ---------------------------------------------------------------------------
# Keys use scikit-learn's ``<component>__<param>`` convention so the grid can
# be handed straight to ``RandomizedSearchCV`` over the composite.
_COMPOSITE_SPACE: dict[str, list] = {
    "classifier__max_depth": [2, 3, 4, 6, None],
    "classifier__min_samples_split": [2, 5, 10],
    "regressor__alpha": [0.01, 0.1, 1.0, 10.0],
    "svm__C": [0.1, 1.0, 10.0],
    "svm__kernel": ["rbf", "linear"],
}

# ---------------------------------------------------------------------------
# Helper – expose defaults and grids for orchestrator / tuner
# ---------------------------------------------------------------------------

def get_space(kind: str):
    """Return the approved hyper-parameters for *kind*.

    Parameters
    ----------
    kind
        Either ``"component"`` (default hyper-parameters per block) or
        ``"composite"`` (nested search-space over the composite).

    Returns
    -------
    dict
        A fresh copy, safe for the caller to mutate.
    """
    if kind == "component":
        return {name: dict(params) for name, params in _COMPONENT_DEFAULTS.items()}
    elif kind == "composite":
        return {name: list(values) for name, values in _COMPOSITE_SPACE.items()}
    else:
        raise ValueError("kind must be 'component' or 'composite'")

__all__ = [
    "RANDOM_STATE",
    "N_ROWS",
    "TEST_SIZE",
    "FEATURE_GROUPS",
    "FEATURE_NAMES",
    "CONTINUOUS_COLUMNS",
    "CATEGORICAL_COLUMNS",
    "N_CATEGORY_LEVELS",
    "TARGET_NAMES",
    "MODEL_FAMILIES",
    "PREP_STEPS",
    "OUTPUT_DIR",
    "PREVIEW_ROWS",
    "get_space",
]
