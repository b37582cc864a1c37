import numpy as np
import pandas as pd
import pytest

from network.glue import (
    hstack,
    merge_predictions,
    select_columns,
    split_features,
    unpack_targets,
)
from scripts.data_loader import make_demo_data


@pytest.fixture
def demo():
    return make_demo_data(n_rows=40, random_state=0)


def test_split_features_groups(demo):
    X, _ = demo
    W, Z = split_features(X)
    assert list(W.columns) == ["a1", "a2", "b1", "b2", "b3"]
    assert list(Z.columns) == ["x1", "x2"]
    assert len(W) == len(Z) == len(X)
    assert all(isinstance(Z[c].dtype, pd.CategoricalDtype) for c in Z.columns)


def test_split_then_stack_reconstitutes_all_columns(demo):
    X, _ = demo
    rebuilt = hstack(*split_features(X))
    assert rebuilt.shape == X.shape
    np.testing.assert_allclose(rebuilt.astype(float).to_numpy(), X.astype(float).to_numpy())


def test_split_features_accepts_plain_matrix(demo):
    X, _ = demo
    W, Z = split_features(X.to_numpy(dtype=float))
    assert W.shape == (40, 5)
    assert Z["x1"].dtype.categories.dtype.kind == "i"


def test_split_features_rejects_wrong_width():
    with pytest.raises(ValueError, match="7 feature columns"):
        split_features(np.zeros((3, 6)))


def test_select_columns_labels():
    out = select_columns(np.arange(12).reshape(3, 4), [1, 3], ["p", "q"])
    assert list(out.columns) == ["p", "q"]
    assert out["q"].tolist() == [3, 7, 11]


def test_select_columns_name_count_mismatch():
    with pytest.raises(ValueError):
        select_columns(np.zeros((2, 2)), [0, 1], ["only"])


def test_hstack_rejects_misaligned_rows():
    with pytest.raises(ValueError, match="misaligned"):
        hstack(pd.DataFrame({"a": [1, 2]}), pd.DataFrame({"b": [1, 2, 3]}))


def test_hstack_ignores_index_labels():
    left = pd.DataFrame({"a": [1, 2]}, index=[10, 11])
    right = pd.DataFrame({"b": [3, 4]})
    out = hstack(left, right)
    assert out.index.tolist() == [10, 11]
    assert out["b"].tolist() == [3, 4]


def test_merge_reassembles_exactly_three_outputs():
    y1 = pd.Categorical(["a", "b", "a"])
    y2 = np.array([0.5, 1.5, 2.5])
    y3 = pd.Series(["r", "g", "b"], index=[7, 8, 9])
    merged = merge_predictions(y1, y2, y3)
    assert list(merged.columns) == ["y1", "y2", "y3"]
    assert isinstance(merged["y1"].dtype, pd.CategoricalDtype)
    assert merged["y3"].tolist() == ["r", "g", "b"]
    back = unpack_targets(merged)
    assert [s.name for s in back] == ["y1", "y2", "y3"]
    np.testing.assert_allclose(back[1].to_numpy(), y2)


def test_merge_rejects_misaligned_predictions():
    with pytest.raises(ValueError):
        merge_predictions([1, 2], [1.0, 2.0, 3.0], [0, 1])


def test_unpack_targets_requires_named_columns(demo):
    _, y = demo
    with pytest.raises(ValueError, match="missing"):
        unpack_targets(y.drop(columns=["y3"]))
