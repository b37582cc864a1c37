from __future__ import annotations

from typing import Any

from components.base import BaseEstimatorBlock
from scripts.config import RANDOM_STATE


class DecisionTreeClassifierBlock(BaseEstimatorBlock):
    """Adapter for ``sklearn.tree.DecisionTreeClassifier``."""

    signature = {
        "type": "model",
        "name": "DecisionTreeClassifier",
        "hyperparameters": {
            "max_depth": "int_or_none",
            "min_samples_split": "int",
            "criterion": "str",
        },
        "input_scitype": ("Continuous", "Count"),
        "target_scitype": ("Multiclass", "OrderedFactor"),
    }

    def __init__(self, **kwargs):
        from sklearn.tree import DecisionTreeClassifier as _DTC

        kwargs.setdefault("random_state", RANDOM_STATE)
        self._params = kwargs.copy()
        self._impl = _DTC(**kwargs)

    def fit(self, X, y):
        self._impl.fit(X, y)
        return self

    def predict(self, X):
        return self._impl.predict(X)

    def predict_proba(self, X):
        return self._impl.predict_proba(X)

    @property
    def classes_(self):
        return self._impl.classes_

    def score(self, X, y, sample_weight: Any | None = None):
        return self._impl.score(X, y, sample_weight=sample_weight)

    def get_params(self, deep: bool = True):
        return self._impl.get_params(deep=deep)

    def set_params(self, **params):
        self._impl.set_params(**params)
        self._params.update(params)
        return self
