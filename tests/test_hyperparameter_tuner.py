from network.composite import MultiTargetComposite
from scripts.data_loader import make_demo_data
from scripts.hyperparameter_tuner import tune_composite


def test_tune_composite_runs():
    X, y = make_demo_data(n_rows=60)
    best, params, score = tune_composite(X, y, n_iter=2)
    assert isinstance(best, MultiTargetComposite)
    assert isinstance(params, dict)
    assert set(params) <= {
        "classifier__max_depth",
        "classifier__min_samples_split",
        "regressor__alpha",
        "svm__C",
        "svm__kernel",
    }
    assert isinstance(score, float)
    for key, value in params.items():
        assert best.get_params()[key] == value
