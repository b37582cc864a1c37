"""Learning-network glue and the composite model type.

The submodules are layered bottom-up:

``glue``        column splitting / merging helpers
``scitypes``    scitype inference and signature checks
``definition``  declarative heads and component discovery
``composite``   :class:`MultiTargetComposite`, wiring it all together
"""
from __future__ import annotations

from network.composite import MultiTargetComposite, make_composite
from network.definition import DEFAULT_NETWORK, Head
from network.glue import merge_predictions, split_features

__all__ = [
    "MultiTargetComposite",
    "make_composite",
    "DEFAULT_NETWORK",
    "Head",
    "merge_predictions",
    "split_features",
]
