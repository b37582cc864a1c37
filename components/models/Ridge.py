from __future__ import annotations

from typing import Any, Dict, Sequence

from components.base import BaseEstimatorBlock


class RidgeBlock(BaseEstimatorBlock):
    """Adapter for ``sklearn.linear_model.Ridge``.

    Serves the continuous head of the composite; after ``fit`` the learned
    weights are exposed per input column through :meth:`coefficients`.
    """

    signature = {
        "type": "model",
        "name": "Ridge",
        "hyperparameters": {
            "alpha": "float",
            "fit_intercept": "bool",
        },
        "input_scitype": ("Continuous", "Count"),
        "target_scitype": ("Continuous",),
    }

    def __init__(self, **kwargs):
        from sklearn.linear_model import Ridge as _Ridge

        self._params = kwargs.copy()
        self._impl = _Ridge(**kwargs)

    # API -----------------------------------------------------------------
    def fit(self, X, y):
        self._impl.fit(X, y)
        return self

    def predict(self, X):
        return self._impl.predict(X)

    def coefficients(self, feature_names: Sequence[str]) -> Dict[str, float]:
        """Map each input column (plus ``intercept``) to its fitted weight."""
        weights = [float(w) for w in self._impl.coef_.ravel()]
        if len(weights) != len(feature_names):
            raise ValueError(f"{len(feature_names)} name(s) given for {len(weights)} coefficient(s).")
        out = dict(zip(feature_names, weights))
        out["intercept"] = float(self._impl.intercept_)
        return out

    def score(self, X, y, sample_weight: Any | None = None):
        return self._impl.score(X, y, sample_weight=sample_weight)

    def get_params(self, deep: bool = True):
        return self._impl.get_params(deep=deep)

    def set_params(self, **params):
        self._impl.set_params(**params)
        self._params.update(params)
        return self
