"""Declarative network definition and component discovery.

A network is an ordered tuple of :class:`Head` entries.  Each head names the
target it predicts, the composite hyper-parameter holding its component and
the node it reads from:

``"continuous"``
    ``W`` – the five continuous columns of ``X``.
``"encoded"``
    ``WZ`` – ``W`` stacked with the one-hot encoding of ``Z``.

The composite walks the heads in order; nothing here fits or predicts.
"""
from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from scripts.config import TARGET_NAMES

INPUT_NODES: Tuple[str, ...] = ("continuous", "encoded")
COMPONENT_SLOTS: Tuple[str, ...] = ("classifier", "regressor", "svm")

# Composite hyper-parameter -> (component name, component kind) used when the
# slot is left empty.
DEFAULT_COMPONENTS: Dict[str, Tuple[str, str]] = {
    "encoder": ("OneHotEncoder", "preprocessors"),
    "classifier": ("DecisionTreeClassifier", "models"),
    "regressor": ("Ridge", "models"),
    "svm": ("SVC", "models"),
}


@dataclass(frozen=True)
class Head:
    """One model head of the network."""

    target: str
    component: str
    inputs: str = "encoded"


DEFAULT_NETWORK: Tuple[Head, ...] = (
    Head(target="y1", component="classifier", inputs="encoded"),
    Head(target="y2", component="regressor", inputs="continuous"),
    Head(target="y3", component="svm", inputs="encoded"),
)


def validate_network(heads: Sequence[Head]) -> Tuple[Head, ...]:
    """Return *heads* as a tuple, or raise ``ValueError`` if it is malformed."""
    heads = tuple(heads)
    if not heads:
        raise ValueError("A network needs at least one head.")
    targets = [h.target for h in heads]
    dupes = sorted({t for t in targets if targets.count(t) > 1})
    if dupes:
        raise ValueError(f"Targets predicted by more than one head: {dupes}")
    for head in heads:
        if head.target not in TARGET_NAMES:
            raise ValueError(f"Unknown target '{head.target}'. Known: {', '.join(TARGET_NAMES)}")
        if head.inputs not in INPUT_NODES:
            raise ValueError(f"Unknown input node '{head.inputs}'. Known: {', '.join(INPUT_NODES)}")
        if head.component not in COMPONENT_SLOTS:
            raise ValueError(
                f"Unknown component slot '{head.component}'. Known: {', '.join(COMPONENT_SLOTS)}"
            )
    missing = [t for t in TARGET_NAMES if t not in targets]
    if missing:
        raise ValueError(f"No head predicts target(s): {missing}")
    return heads


def load_component(name: str, kind: str = "models"):
    """Import ``components.<kind>.<name>`` and return its ``<name>Block`` class.

    Preprocessors are nested one level deeper (``components/preprocessors/<family>/``),
    so for ``kind="preprocessors"`` the family sub-packages are searched in turn.
    """
    if kind == "models":
        candidates = [f"components.models.{name}"]
    elif kind == "preprocessors":
        candidates = [f"components.preprocessors.{family}.{name}" for family in ("encoders",)]
    else:
        raise ValueError("kind must be 'models' or 'preprocessors'")

    for module_name in candidates:
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name != module_name:
                raise
            continue
        return getattr(module, f"{name}Block")
    raise FileNotFoundError(f"No component module found for {kind[:-1]} '{name}'")


__all__ = [
    "Head",
    "DEFAULT_NETWORK",
    "INPUT_NODES",
    "COMPONENT_SLOTS",
    "DEFAULT_COMPONENTS",
    "validate_network",
    "load_component",
]
