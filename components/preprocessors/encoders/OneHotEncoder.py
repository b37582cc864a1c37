from __future__ import annotations

from components.base import BaseTransformerBlock


class OneHotEncoderBlock(BaseTransformerBlock):
    """Project adapter for ``sklearn.preprocessing.OneHotEncoder``.

    The encoder always emits a dense matrix and silently zeroes categories it
    did not see during ``fit`` so that a fitted composite can score fresh
    rows.  ``get_feature_names_out`` labels each indicator column
    ``<column>_<level>``.
    """

    signature = {
        "type": "preprocessor",
        "name": "OneHotEncoder",
        "hyperparameters": {
            "drop": "str_or_none",
        },
        "input_scitype": ("Multiclass", "OrderedFactor"),
    }

    def __init__(self, **kwargs):
        from sklearn.preprocessing import OneHotEncoder as _OneHotEncoder

        kwargs.setdefault("handle_unknown", "ignore")
        kwargs.setdefault("sparse_output", False)
        self._params = kwargs.copy()
        self._impl = _OneHotEncoder(**kwargs)

    # ---------------------------------------------------------------------
    # scikit-learn compatible API
    # ---------------------------------------------------------------------
    def fit(self, X, y=None):
        self._impl.fit(X, y)
        return self

    def transform(self, X):
        return self._impl.transform(X)

    def get_feature_names_out(self, input_features=None):
        return self._impl.get_feature_names_out(input_features)

    @property
    def categories_(self):
        return self._impl.categories_

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def get_params(self, deep: bool = True):
        return self._impl.get_params(deep=deep)

    def set_params(self, **params):
        self._impl.set_params(**params)
        self._params.update(params)
        return self
