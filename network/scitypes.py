"""Scientific types ("scitypes") for checking data against component signatures.

A scitype says how a column is to be *interpreted*, independent of its
machine type: an ``int64`` column may be a ``Count`` or, once given a
categorical dtype, a ``Multiclass`` label.  Blocks declare the scitypes they
accept under ``signature["input_scitype"]`` / ``signature["target_scitype"]``.
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

CONTINUOUS = "Continuous"
COUNT = "Count"
MULTICLASS = "Multiclass"
ORDERED_FACTOR = "OrderedFactor"
TEXTUAL = "Textual"
UNKNOWN = "Unknown"


class ScitypeError(TypeError):
    """Raised when data does not have a scitype a component accepts."""


def scitype(column) -> str:
    """Return the scitype of a single column (Series or 1-D array)."""
    values = column if isinstance(column, pd.Series) else pd.Series(np.asarray(column))
    dtype = values.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return ORDERED_FACTOR if dtype.ordered else MULTICLASS
    if pd.api.types.is_bool_dtype(dtype):
        return MULTICLASS
    if pd.api.types.is_integer_dtype(dtype):
        return COUNT
    if pd.api.types.is_float_dtype(dtype):
        return CONTINUOUS
    if pd.api.types.is_string_dtype(dtype) or pd.api.types.is_object_dtype(dtype):
        return TEXTUAL
    return UNKNOWN


def table_scitypes(X) -> dict[str, str]:
    """Map each column name of *X* to its scitype."""
    df = X if isinstance(X, pd.DataFrame) else pd.DataFrame(np.asarray(X))
    return {str(name): scitype(df[name]) for name in df.columns}


def _reject(kind: str, block_name: str, found: Iterable[str], allowed: Tuple[str, ...]):
    raise ScitypeError(
        f"{block_name} expects {kind} scitype in {list(allowed)}, got {sorted(set(found))}."
    )


def check_scitype(block, X, y=None) -> None:
    """Validate *X* (and *y*) against the scitypes declared by *block*.

    Blocks without a declared scitype accept anything.
    """
    sig = block.get_signature()
    name = sig.get("name", type(block).__name__)

    allowed_inputs = tuple(sig.get("input_scitype", ()))
    if allowed_inputs:
        found = table_scitypes(X).values()
        if any(s not in allowed_inputs for s in found):
            _reject("input", name, found, allowed_inputs)

    allowed_targets = tuple(sig.get("target_scitype", ()))
    if y is not None and allowed_targets:
        found_target = scitype(y)
        if found_target not in allowed_targets:
            _reject("target", name, [found_target], allowed_targets)

    logger.debug("Scitype check passed for %s", name)


__all__ = [
    "CONTINUOUS",
    "COUNT",
    "MULTICLASS",
    "ORDERED_FACTOR",
    "TEXTUAL",
    "UNKNOWN",
    "ScitypeError",
    "scitype",
    "table_scitypes",
    "check_scitype",
]
