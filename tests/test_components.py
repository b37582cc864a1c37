import numpy as np
import pandas as pd
import pytest
from sklearn.base import clone

from components.models.DecisionTreeClassifier import DecisionTreeClassifierBlock
from components.models.Ridge import RidgeBlock
from components.models.SVC import SVCBlock
from components.preprocessors.encoders.OneHotEncoder import OneHotEncoderBlock
from scripts.config import RANDOM_STATE


@pytest.mark.parametrize(
    "block_cls, name",
    [
        (DecisionTreeClassifierBlock, "DecisionTreeClassifier"),
        (RidgeBlock, "Ridge"),
        (SVCBlock, "SVC"),
        (OneHotEncoderBlock, "OneHotEncoder"),
    ],
)
def test_signature(block_cls, name):
    sig = block_cls.get_signature()
    assert sig["name"] == name
    assert "input_scitype" in sig


@pytest.mark.parametrize("block_cls", [DecisionTreeClassifierBlock, RidgeBlock, SVCBlock, OneHotEncoderBlock])
def test_clone_keeps_params(block_cls):
    block = block_cls()
    copy = clone(block)
    assert type(copy) is block_cls
    assert copy is not block
    assert copy.get_params() == block.get_params()


def test_seeded_by_default():
    assert DecisionTreeClassifierBlock().get_params()["random_state"] == RANDOM_STATE
    assert SVCBlock(random_state=7).get_params()["random_state"] == 7


def test_set_params_updates_repr():
    block = DecisionTreeClassifierBlock(max_depth=2)
    block.set_params(max_depth=5)
    assert block.get_params()["max_depth"] == 5
    assert "max_depth=5" in repr(block)


def test_classifier_fit_predict_proba():
    X = pd.DataFrame({"w": [0.0, 0.1, 0.9, 1.0]})
    y = np.array(["lo", "lo", "hi", "hi"])
    block = DecisionTreeClassifierBlock().fit(X, y)
    assert list(block.predict(X)) == list(y)
    proba = block.predict_proba(X)
    assert proba.shape == (4, 2)
    assert sorted(block.classes_) == ["hi", "lo"]


def test_ridge_fit_predict():
    X = pd.DataFrame({"w": [0.0, 1.0, 2.0, 3.0]})
    y = np.array([1.0, 3.0, 5.0, 7.0])
    block = RidgeBlock(alpha=1e-6).fit(X, y)
    np.testing.assert_allclose(block.predict(X), y, atol=1e-3)


def test_svc_fit_predict():
    X = pd.DataFrame({"w": [0.0, 0.1, 0.2, 0.8, 0.9, 1.0]})
    y = np.array(["a", "a", "a", "b", "b", "b"])
    block = SVCBlock(kernel="linear", C=10.0).fit(X, y)
    assert list(block.predict(X)) == list(y)


def test_one_hot_encoder_dense_and_ignores_unseen():
    Z = pd.DataFrame({"x1": pd.Categorical([0, 1, 2]), "x2": pd.Categorical([1, 1, 0])})
    block = OneHotEncoderBlock()
    out = block.fit_transform(Z)
    assert isinstance(out, np.ndarray)
    assert out.shape == (3, 5)
    assert list(block.get_feature_names_out(["x1", "x2"])) == ["x1_0", "x1_1", "x1_2", "x2_0", "x2_1"]
    unseen = pd.DataFrame({"x1": pd.Categorical([5]), "x2": pd.Categorical([0])})
    assert block.transform(unseen).sum() == 1.0


def test_ridge_coefficients_by_column():
    X = pd.DataFrame({"w": [0.0, 1.0, 2.0, 3.0], "v": [1.0, 0.0, 1.0, 0.0]})
    y = 2.0 * X["w"].to_numpy() + 1.0
    block = RidgeBlock(alpha=1e-6).fit(X, y)
    coefficients = block.coefficients(["w", "v"])
    assert set(coefficients) == {"w", "v", "intercept"}
    assert coefficients["w"] == pytest.approx(2.0, abs=1e-3)
    assert coefficients["intercept"] == pytest.approx(1.0, abs=1e-3)
    with pytest.raises(ValueError):
        block.coefficients(["w"])
