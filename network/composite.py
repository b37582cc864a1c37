"""Multi-target composite model built from pre-built component blocks.

The composite wires the blocks into the following network::

    X ──split──▶ W (a1 a2 b1 b2 b3) ─────────────────────┬──▶ regressor ──▶ ŷ2
      │                                                  │
      └──────▶ Z (x1 x2) ──encoder──▶ Zhot ──hstack──▶ WZ ├──▶ classifier ─▶ ŷ1
                                                         └──▶ svm ────────▶ ŷ3

    merge(ŷ1, ŷ2, ŷ3) ──▶ prediction table

Fitting and predicting are delegated to scikit-learn through the blocks.
Every component is a hyper-parameter of the composite, so nested values can
be replayed with ``set_params(classifier__max_depth=3)`` followed by a refit.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, clone
from sklearn.metrics import accuracy_score, mean_squared_error, r2_score
from sklearn.utils.validation import check_is_fitted

from network.definition import (
    DEFAULT_COMPONENTS,
    DEFAULT_NETWORK,
    Head,
    load_component,
    validate_network,
)
from network.glue import hstack, merge_predictions, split_features, unpack_targets
from network.scitypes import CONTINUOUS, check_scitype, scitype
from scripts.config import TARGET_NAMES, get_space

logger = logging.getLogger(__name__)


def default_component(slot: str):
    """Instantiate the default block for composite hyper-parameter *slot*."""
    if slot not in DEFAULT_COMPONENTS:
        raise ValueError(f"Unknown component slot '{slot}'. Known: {', '.join(DEFAULT_COMPONENTS)}")
    name, kind = DEFAULT_COMPONENTS[slot]
    block_cls = load_component(name, kind)
    return block_cls(**get_space("component")[name])


class MultiTargetComposite(BaseEstimator):
    """Predict ``y1`` (categorical), ``y2`` (continuous) and ``y3`` (categorical) at once.

    Parameters
    ----------
    encoder
        Transformer block that one-hot encodes the categorical group ``Z``.
    classifier, regressor, svm
        Estimator blocks referenced by the heads of *network*.
    network
        Ordered heads; see :mod:`network.definition`.

    Empty slots fall back to the defaults in ``scripts.config`` at fit time,
    or earlier when ``set_params`` receives a nested key for them.
    """

    def __init__(
        self,
        encoder=None,
        classifier=None,
        regressor=None,
        svm=None,
        network: Sequence[Head] = DEFAULT_NETWORK,
    ):
        self.encoder = encoder
        self.classifier = classifier
        self.regressor = regressor
        self.svm = svm
        self.network = network

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _component(self, slot: str):
        block = getattr(self, slot)
        return default_component(slot) if block is None else block

    def set_params(self, **params):
        """Set hyper-parameters, filling an empty slot before its nested keys are applied."""
        for key in params:
            slot, nested, _ = key.partition("__")
            if nested and slot in DEFAULT_COMPONENTS and slot not in params and getattr(self, slot, None) is None:
                setattr(self, slot, default_component(slot))
        return super().set_params(**params)

    def _encode(self, Z: pd.DataFrame) -> pd.DataFrame:
        Zhot = self.encoder_.transform(Z)
        return pd.DataFrame(
            np.asarray(Zhot, dtype=float),
            index=Z.index,
            columns=[str(c) for c in self.encoder_.get_feature_names_out(list(Z.columns))],
        )

    def _nodes(self, X) -> Dict[str, pd.DataFrame]:
        W, Z = split_features(X)
        Zhot = self._encode(Z)
        return {"W": W, "Z": Z, "Zhot": Zhot, "WZ": hstack(W, Zhot)}

    @staticmethod
    def _head_input(head: Head, nodes: Dict[str, pd.DataFrame]) -> pd.DataFrame:
        return nodes["W"] if head.inputs == "continuous" else nodes["WZ"]

    def _restore(self, target: str, values) -> Any:
        dtype = self.target_dtypes_[target]
        if isinstance(dtype, pd.CategoricalDtype):
            return pd.Categorical(values, categories=dtype.categories, ordered=dtype.ordered)
        return np.asarray(values, dtype=float)

    # ------------------------------------------------------------------
    # scikit-learn compatible API
    # ------------------------------------------------------------------
    def fit(self, X, y):
        """Fit the encoder and every head of the network on ``(X, y)``."""
        heads = validate_network(self.network)
        W, Z = split_features(X)
        if len(W) != len(y):
            raise ValueError(f"X has {len(W)} rows but y has {len(y)}.")
        targets = dict(zip(TARGET_NAMES, unpack_targets(y)))

        self.encoder_ = clone(self._component("encoder"))
        check_scitype(self.encoder_, Z)
        self.encoder_.fit(Z)
        Zhot = self._encode(Z)
        nodes = {"W": W, "Z": Z, "Zhot": Zhot, "WZ": hstack(W, Zhot)}
        logger.debug("Encoded %d categorical column(s) into %d indicator(s)", Z.shape[1], Zhot.shape[1])

        self.target_dtypes_ = {name: targets[name].dtype for name in TARGET_NAMES}
        self.network_ = heads
        self.heads_ = {}
        self.head_features_ = {}
        for head in heads:
            model = clone(self._component(head.component))
            X_head = self._head_input(head, nodes)
            y_head = targets[head.target]
            check_scitype(model, X_head, y_head)
            logger.info(
                "Fitting head %s with %s on %s node (%d rows, %d columns)",
                head.target,
                type(model).__name__,
                head.inputs,
                X_head.shape[0],
                X_head.shape[1],
            )
            model.fit(X_head, y_head.to_numpy())
            self.heads_[head.target] = model
            self.head_features_[head.target] = list(X_head.columns)

        self.n_features_in_ = W.shape[1] + Z.shape[1]
        return self

    def predict(self, X) -> pd.DataFrame:
        """Return a table with exactly the columns ``y1 y2 y3``."""
        check_is_fitted(self, "heads_")
        nodes = self._nodes(X)
        preds = {}
        for head in self.network_:
            raw =self.heads_[head.target].predict(self._head_input(head, nodes))
            preds[head.target] = self._restore(head.target, raw)
        return merge_predictions(*(preds[name] for name in TARGET_NAMES), index=nodes["W"].index)

    def predict_proba(self, X, target: str = "y1") -> pd.DataFrame:
        """Class probabilities for a categorical *target*, one column per class."""
        check_is_fitted(self, "heads_")
        if target not in self.heads_:
            raise ValueError(f"Unknown target '{target}'. Known: {', '.join(self.heads_)}")
        model = self.heads_[target]
        if not hasattr(model, "predict_proba"):
            raise ValueError(f"Head {target} ({type(model).__name__}) does not predict probabilities.")
        head = {h.target: h for h in self.network_}[target]
        nodes = self._nodes(X)
        proba = model.predict_proba(self._head_input(head, nodes))
        return pd.DataFrame(proba, index=nodes["W"].index, columns=list(model.classes_))

    def transform_nodes(self, X) -> Dict[str, pd.DataFrame]:
        """Return the named intermediate nodes ``W``, ``Z``, ``Zhot`` and ``WZ``."""
        check_is_fitted(self, "encoder_")
        return self._nodes(X)

    def score(self, X, y, sample_weight=None) -> float:
        """Mean of accuracy on categorical targets and R² on the continuous one."""
        preds = self.predict(X)
        scores = []
        for name, truth in zip(TARGET_NAMES, unpack_targets(y)):
            if scitype(truth) == CONTINUOUS:
                scores.append(r2_score(truth, preds[name], sample_weight=sample_weight))
            else:
                scores.append(
                    accuracy_score(np.asarray(truth), np.asarray(preds[name]), sample_weight=sample_weight)
                )
        return float(np.mean(scores))

    def report(self, X, y) -> Dict[str, Dict[str, float]]:
        """Per-target hold-out metrics.

        Categorical targets report ``accuracy`` and ``misclassification_rate``;
        the continuous target reports ``rmse`` and ``r2``.
        """
        preds = self.predict(X)
        metrics: Dict[str, Dict[str, float]] = {}
        for name, truth in zip(TARGET_NAMES, unpack_targets(y)):
            if scitype(truth) == CONTINUOUS:
                metrics[name] = {
                    "rmse": float(np.sqrt(mean_squared_error(truth, preds[name]))),
                    "r2": float(r2_score(truth, preds[name])),
                }
            else:
                acc = float(accuracy_score(np.asarray(truth), np.asarray(preds[name])))
                metrics[name] = {"accuracy": acc, "misclassification_rate": 1.0 - acc}
        return metrics

    def describe(self) -> list[dict]:
        """Summarise the fitted network: one entry per head plus the encoder."""
        check_is_fitted(self, "heads_")
        info = [
            {
                "step": self.encoder_.get_signature().get("name", type(self.encoder_).__name__),
                "node": "Z -> Zhot",
                "params": dict(self.encoder_._params),
            }
        ]
        for head in self.network_:
            model = self.heads_[head.target]
            entry = {
                "step": model.get_signature().get("name", type(model).__name__),
                "node": f"{'W' if head.inputs == 'continuous' else 'WZ'} -> {head.target}",
                "params": dict(model._params),
            }
            if hasattr(model, "coefficients"):
                entry["coefficients"] = model.coefficients(self.head_features_[head.target])
            info.append(entry)
        return info


def make_composite(**overrides) -> MultiTargetComposite:
    """Build a composite with every slot filled by its default block.

    *overrides* replace whole slots (``classifier=SVCBlock()``) or set nested
    hyper-parameters (``classifier__max_depth=2``).
    """
    slots = {slot: overrides.pop(slot, None) for slot in DEFAULT_COMPONENTS}
    network = overrides.pop("network", DEFAULT_NETWORK)
    composite = MultiTargetComposite(
        **{slot: block if block is not None else default_component(slot) for slot, block in slots.items()},
        network=network,
    )
    if overrides:
        composite.set_params(**overrides)
    return composite


__all__ = ["MultiTargetComposite", "default_component", "make_composite"]
