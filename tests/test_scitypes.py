import numpy as np
import pandas as pd
import pytest

from components.models.Ridge import RidgeBlock
from components.models.DecisionTreeClassifier import DecisionTreeClassifierBlock
from network.scitypes import (
    CONTINUOUS,
    COUNT,
    MULTICLASS,
    ORDERED_FACTOR,
    TEXTUAL,
    ScitypeError,
    check_scitype,
    scitype,
    table_scitypes,
)


@pytest.mark.parametrize(
    "column, expected",
    [
        (pd.Series([0.1, 0.2]), CONTINUOUS),
        (pd.Series([1, 2]), COUNT),
        (pd.Series(["a", "b"], dtype="category"), MULTICLASS),
        (pd.Series(pd.Categorical(["lo", "hi"], categories=["lo", "hi"], ordered=True)), ORDERED_FACTOR),
        (pd.Series(["a", "b"]), TEXTUAL),
        (np.array([1.0, 2.0]), CONTINUOUS),
    ],
)
def test_scitype(column, expected):
    assert scitype(column) == expected


def test_table_scitypes():
    df = pd.DataFrame({"w": [0.5, 1.5], "z": pd.Categorical([1, 2])})
    assert table_scitypes(df) == {"w": CONTINUOUS, "z": MULTICLASS}


def test_check_scitype_accepts_matching_data():
    X = pd.DataFrame({"w": [0.5, 1.5, 2.5]})
    check_scitype(RidgeBlock(), X, pd.Series([1.0, 2.0, 3.0]))
    check_scitype(DecisionTreeClassifierBlock(), X, pd.Series(["a", "b", "a"], dtype="category"))


def test_check_scitype_rejects_continuous_target_for_classifier():
    X = pd.DataFrame({"w": [0.5, 1.5]})
    with pytest.raises(ScitypeError, match="target"):
        check_scitype(DecisionTreeClassifierBlock(), X, pd.Series([0.1, 0.2]))


def test_check_scitype_rejects_textual_inputs():
    X = pd.DataFrame({"w": ["a", "b"]})
    with pytest.raises(TypeError):
        check_scitype(RidgeBlock(), X, pd.Series([1.0, 2.0]))
