"""Hyperparameter replay for the composite using RandomizedSearchCV.

Every candidate is a clone of the composite with new nested values, so the
whole network is refitted per fold.  Candidates are scored with
:meth:`MultiTargetComposite.score`.
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Tuple, Dict, Any

import pandas as pd
from sklearn.model_selection import KFold, RandomizedSearchCV

from network.composite import MultiTargetComposite, make_composite
from scripts.config import RANDOM_STATE, get_space
from scripts.data_loader import load_data, make_demo_data

CV_SPLITS = 3


def tune_composite(
    X: pd.DataFrame,
    y: pd.DataFrame,
    *,
    n_iter: int = 10,
    cv_splits: int = CV_SPLITS,
) -> Tuple[MultiTargetComposite, Dict[str, Any], float]:
    """Tune the composite's nested hyper-parameters using RandomizedSearchCV."""
    param_dist = get_space("composite")
    cv = KFold(n_splits=cv_splits, shuffle=True, random_state=RANDOM_STATE)
    search = RandomizedSearchCV(
        make_composite(),
        param_distributions=param_dist,
        n_iter=n_iter,
        cv=cv,
        random_state=RANDOM_STATE,
        n_jobs=1,
        error_score="raise",
    )
    search.fit(X, y)
    return search.best_estimator_, search.best_params_, float(search.best_score_)


def _cli() -> None:
    parser = argparse.ArgumentParser(description="Hyperparameter replay for the multi-target composite")
    parser.add_argument("--data", help="Path to predictors CSV (synthetic data if omitted)")
    parser.add_argument("--target", help="Path to targets CSV")
    parser.add_argument("--output", required=True, help="File to write best params as JSON")
    parser.add_argument("--n-iter", type=int, default=10, help="Number of search iterations")
    args = parser.parse_args()

    if args.data and args.target:
        X, y = load_data(args.data, args.target)
    elif args.data or args.target:
        parser.error("--data and --target must be given together")
    else:
        X, y = make_demo_data()
    _, best_params, best_score = tune_composite(X, y, n_iter=args.n_iter)

    result = {"best_params": best_params, "best_score": best_score}
    Path(args.output).parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w") as f:
        json.dump(result, f, indent=2)

    print(f"Best composite score: {best_score:.4f}")
    print(f"Parameters written to {args.output}")


if __name__ == "__main__":
    _cli()
