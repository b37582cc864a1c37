from __future__ import annotations

"""Base abstractions for all *concrete* composite-model components.

Every model or preprocessing block **must** inherit from either
`BaseEstimatorBlock` (for estimators with `fit`/`predict`) or
`BaseTransformerBlock` (for preprocessors that expose `fit`/`transform`).
These mixins enforce a *uniform* public API across the wrappers that the
composite network wires together.

Each block also declares the scitypes it accepts in its `signature`, so the
network can reject incompatible data before scikit-learn does.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class BaseComponent(ABC):
    """Root of the component hierarchy – do *not* subclass directly."""

    # Each concrete block *must* override this with a concise description of
    # its nature, hyper-parameters and accepted scitypes.  The orchestrator
    # embeds it in the run manifest.
    signature: Dict[str, Any] = {}

    @classmethod
    def get_signature(cls) -> Dict[str, Any]:
        """Return the static *signature* of the block."""
        return dict(cls.signature)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in sorted(self._params.items()))
        return f"{type(self).__name__}({params})"


class BaseEstimatorBlock(BaseComponent):
    """Mixin for estimator-style components (expose `fit`/`predict`)."""

    @abstractmethod
    def fit(self, X, y=None):
        """Fit the estimator to *X* and *y*."""
        raise NotImplementedError

    @abstractmethod
    def predict(self, X):
        """Predict targets for *X*."""
        raise NotImplementedError


class BaseTransformerBlock(BaseComponent):
    """Mixin for transformer-style components (expose `fit`/`transform`)."""

    @abstractmethod
    def fit(self, X, y=None):
        raise NotImplementedError

    @abstractmethod
    def transform(self, X):
        raise NotImplementedError

    def fit_transform(self, X, y=None):
        """Utility to fit *and* transform in one pass."""
        self.fit(X, y)
        return self.transform(X)
