"""Composite Model Orchestrator – Worked Example Controller

This module runs the composite-model walkthrough end to end: it loads (or
synthesises) the data, splits the feature matrix into its column groups,
fits the multi-target composite, renders every intermediate node, reports
the hold-out error rates and finally replays the network against a new
hyper-parameter value.

Only the orchestration logic lives here; the glue functions and the
composite type reside in ``network/`` and the component adapters in
``components/``.
"""
from __future__ import annotations

import logging
import os
import sys
import time
import argparse
import json
import pickle
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd
from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from sklearn.base import clone
from sklearn.model_selection import train_test_split

from network.composite import MultiTargetComposite, make_composite
from network.glue import hstack, split_features
from scripts.config import (
    MODEL_FAMILIES,
    N_ROWS,
    OUTPUT_DIR,
    PREP_STEPS,
    PREVIEW_ROWS,
    RANDOM_STATE,
    TEST_SIZE,
)
from scripts.data_loader import load_data, make_demo_data

# Define the project version
__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Component Discovery
# ---------------------------------------------------------------------------
_MODELS_DIR = Path(__file__).parent / "components" / "models"
_PREPROCESSORS_DIR = Path(__file__).parent / "components" / "preprocessors"

# ---------------------------------------------------------------------------
# Global Logging Setup
# ---------------------------------------------------------------------------
# Set base logging level; can be overridden by COMPOSITE_VERBOSE
logging_level = logging.INFO
if "COMPOSITE_VERBOSE" in os.environ:
    logging_level = logging.DEBUG

# Log to both stdout and a persistent log file
log_file = Path(__file__).with_name("main.log")
logging.basicConfig(
    level=logging_level,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.FileHandler(log_file, mode="a"),
        logging.StreamHandler(sys.stdout),
    ],
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Reproducibility – set global seeds immediately at import-time
# ---------------------------------------------------------------------------
random.seed(RANDOM_STATE)
np.random.seed(RANDOM_STATE)

# Rich console with recording enabled; the walkthrough is saved to walkthrough.txt
console = Console(highlight=False, record=True)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def _frame_table(df: pd.DataFrame, title: str, n_rows: int = PREVIEW_ROWS) -> Table:
    """Render the first *n_rows* of *df* as a rich table."""
    table = Table(title=f"{title}  [dim]({df.shape[0]}×{df.shape[1]})[/dim]")
    table.add_column("", style="dim")
    for col in df.columns:
        table.add_column(str(col), justify="right")
    for idx, row in df.head(n_rows).iterrows():
        cells = [f"{v:.3f}" if isinstance(v, float) else str(v) for v in row.tolist()]
        table.add_row(str(idx), *cells)
    return table


def _network_tree(composite: MultiTargetComposite) -> Tree:
    """Render the fitted network, one branch per node."""
    root = Tree("[bold cyan]Learning Network[/bold cyan]")
    source = root.add("[bold]X[/bold] (source)")
    for step in composite.describe():
        node = source.add(f"[bold blue]{step['node']}[/bold blue]  via {step['step']}")
        for key, value in sorted(step["params"].items()):
            node.add(f"{key} = {value!r}")
        for name, weight in step.get("coefficients", {}).items():
            node.add(f"[dim]coef[/dim] {name} = {weight:.3f}")
    return root


# ---------------------------------------------------------------------------
# Helper functions for runtime manifest
# ---------------------------------------------------------------------------

def _extract_pipeline_info(model: Any) -> list[dict]:
    """Extract the node-by-node description of a fitted composite."""
    if isinstance(model, MultiTargetComposite):
        info = []
        for s in model.describe():
            entry = {"step": s["step"], "node": s["node"], "params": {k: repr(v) for k, v in s["params"].items()}}
            if "coefficients" in s:
                entry["coefficients"] = s["coefficients"]
            info.append(entry)
        return info
    return [{"step": model.__class__.__name__, "params": {}}]


def _write_runtime_manifest(
    run_dir: Path,
    args: argparse.Namespace,
    X: pd.DataFrame,
    composite: MultiTargetComposite,
    holdout_metrics: Dict[str, Dict[str, float]],
    replay: Optional[Dict[str, Any]],
    total_duration_seconds: float,
) -> Path:
    """Write ``metrics.json`` to the run directory and return its path."""
    manifest_data = {
        "run_meta": {
            "timestamp_utc": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "version": __version__,
            "random_state": RANDOM_STATE,
            "test_size": args.test_size,
            "total_duration_seconds": total_duration_seconds,
            "data_path": str(Path(args.data).resolve()) if args.data else None,
            "target_path": str(Path(args.target).resolve()) if args.target else None,
        },
        "dataset": {
            "n_rows": int(X.shape[0]),
            "n_features": int(X.shape[1]),
            "synthetic": not args.data,
        },
        "composite": {
            "pipeline": _extract_pipeline_info(composite),
            "artefact_paths": {"composite_pickle": "composite.pkl"},
        },
        "holdout_metrics": holdout_metrics,
        "y1_error_rate": holdout_metrics["y1"]["misclassification_rate"],
        "replay": replay,
    }

    manifest_path = run_dir / "metrics.json"
    with open(manifest_path, "w") as f:
        json.dump(manifest_data, f, indent=2)
    logger.info(f"Runtime manifest saved to: {manifest_path}")
    return manifest_path


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def run_walkthrough(
    X: pd.DataFrame,
    y: pd.DataFrame,
    *,
    test_size: float = TEST_SIZE,
    replay_max_depth: Optional[int] = None,
    show_tree: bool = False,
) -> Dict[str, Any]:
    """Run every cell of the worked example and return the results.

    Returns
    -------
    dict
        ``composite`` (fitted), ``holdout_metrics``, ``predictions`` and
        ``replay`` (``None`` unless *replay_max_depth* is given).
    """
    # Cell 1 – raw inputs
    console.print(_frame_table(X, "Input feature matrix X"))
    console.print(_frame_table(y, "Targets y"))

    # Cell 2 – column splitting
    W, Z = split_features(X)
    console.print(_frame_table(W, "Node W – continuous columns 1–5"))
    console.print(_frame_table(Z, "Node Z – categorical columns 6–7"))
    rebuilt = hstack(W, Z)
    if rebuilt.shape != X.shape:
        raise RuntimeError(f"Split nodes rebuild a {rebuilt.shape} table, expected {X.shape}")
    logger.info("Split %d columns into %d + %d", X.shape[1], W.shape[1], Z.shape[1])

    # Cell 3 – train / hold-out partition and fit
    X_train, X_holdout, y_train, y_holdout = train_test_split(
        X, y, test_size=test_size, random_state=RANDOM_STATE, shuffle=True
    )
    logger.info(
        f"Data split into training ({X_train.shape[0]} rows) and hold-out ({X_holdout.shape[0]} rows) sets."
    )
    composite = make_composite()
    composite.fit(X_train, y_train)
    if show_tree:
        console.print(_network_tree(composite))

    # Cell 4 – encoded node
    nodes = composite.transform_nodes(X_holdout)
    console.print(_frame_table(nodes["Zhot"], "Node Zhot – one-hot encoding of Z"))

    # Cell 5 – merged predictions
    predictions = composite.predict(X_holdout)
    console.print(_frame_table(predictions, "Predictions ŷ (hold-out)"))

    # Cell 6 – class probabilities for y1
    proba = composite.predict_proba(X_holdout, target="y1")
    console.print(_frame_table(proba, "P(y1) (hold-out)"))

    # Cell 7 – error rates
    holdout_metrics = composite.report(X_holdout, y_holdout)
    error_rate = holdout_metrics["y1"]["misclassification_rate"]
    console.print(f"[bold]y1 misclassification rate:[/bold] {error_rate:.4f}")
    logger.info(
        "Hold-out metrics: y1 error=%.4f, y2 RMSE=%.4f, y3 error=%.4f",
        error_rate,
        holdout_metrics["y2"]["rmse"],
        holdout_metrics["y3"]["misclassification_rate"],
    )

    # Cell 8 – replay the network against a new hyper-parameter value.
    # The replay runs on a clone; ``composite`` stays the model the metrics above describe.
    replay = None
    if replay_max_depth is not None:
        replayed = clone(composite).set_params(classifier__max_depth=replay_max_depth)
        replayed.fit(X_train, y_train)
        replay_metrics = replayed.report(X_holdout, y_holdout)
        replay = {
            "classifier__max_depth": replay_max_depth,
            "y1_error_rate": replay_metrics["y1"]["misclassification_rate"],
            "holdout_metrics": replay_metrics,
            "pipeline": _extract_pipeline_info(replayed),
        }
        console.print(
            f"[bold]y1 misclassification rate with max_depth={replay_max_depth}:[/bold] "
            f"{replay['y1_error_rate']:.4f}"
        )

    return {
        "composite": composite,
        "holdout_metrics": holdout_metrics,
        "predictions": predictions,
        "replay": replay,
    }


def _validate_components_availability() -> None:
    """Ensure that all component names correspond to actual module files."""
    missing: list[str] = []

    for name in MODEL_FAMILIES:
        if not (_MODELS_DIR / f"{name}.py").is_file():
            missing.append(f"model '{name}'")

    for name in PREP_STEPS:
        pattern = list(_PREPROCESSORS_DIR.rglob(f"{name}.py"))
        if not pattern:
            missing.append(f"preprocessor '{name}'")

    if missing:
        raise FileNotFoundError(
            "Missing components: " + ", ".join(sorted(missing))
        )


def _cli() -> None:
    """Parses command-line arguments and runs the composite-model walkthrough."""
    parser = argparse.ArgumentParser(
        description="\nComposite Model Orchestrator – Worked Example Controller",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Path to the predictors CSV file (7 columns). Synthetic data is used if omitted.",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Path to the targets CSV file (columns y1, y2, y3)",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=N_ROWS,
        help=f"Rows of synthetic data to generate (default: {N_ROWS})",
    )
    parser.add_argument(
        "--test-size",
        type=float,
        default=TEST_SIZE,
        help=f"Hold-out fraction (default: {TEST_SIZE})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Replay the network with this decision-tree max_depth after the first fit",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=OUTPUT_DIR,
        help=f"Root directory for run artifacts (default: {OUTPUT_DIR})",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the fitted learning network as a tree",
    )

    args = parser.parse_args()

    if bool(args.data) != bool(args.target):
        parser.error("--data and --target must be given together")
    if not 0.0 < args.test_size < 1.0:
        parser.error("--test-size must be between 0 and 1")

    try:
        _validate_components_availability()
    except FileNotFoundError as exc:
        logger.error(str(exc))
        sys.exit(1)

    # Define unique run directory for artifacts
    timestamp_str = datetime.now().strftime("%Y%m%d-%H%M%S")
    dataset_name = Path(args.data).stem if args.data else "synthetic"
    run_dir = Path(args.output_dir) / dataset_name / timestamp_str
    run_dir.mkdir(parents=True, exist_ok=True)

    # Configure logging to also write to a file within the run_dir
    file_handler = logging.FileHandler(run_dir / "run.log", mode="a")
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(file_handler)

    console.log("[bold green]Starting Composite Model Walkthrough[/bold green]")
    start_time = time.perf_counter()
    console.log(f"  Dataset: {args.data or 'synthetic'}")
    console.log(f"  Target: {args.target or 'synthetic'}")
    console.log(f"  Hold-out fraction: {args.test_size}")
    console.log(f"  Artifacts Directory: {run_dir}")

    try:
        # Load data
        try:
            if args.data:
                X, y = load_data(args.data, args.target)
            else:
                X, y = make_demo_data(n_rows=args.rows)
            logger.info(f"Data loaded successfully. X shape: {X.shape}, y shape: {y.shape}")
        except Exception as e:
            logger.error(f"Failed to load data: {e}", exc_info=True)
            sys.exit(1)

        try:
            results = run_walkthrough(
                X,
                y,
                test_size=args.test_size,
                replay_max_depth=args.max_depth,
                show_tree=args.tree,
            )

            composite_path = run_dir / "composite.pkl"
            with open(composite_path, "wb") as f:
                pickle.dump(results["composite"], f)
            logger.info(f"Fitted composite saved to {composite_path}")

            _write_runtime_manifest(
                run_dir,
                args,
                X,
                results["composite"],
                results["holdout_metrics"],
                results["replay"],
                time.perf_counter() - start_time,
            )

            walkthrough_path = run_dir / "walkthrough.txt"
            console.save_text(str(walkthrough_path))
            logger.info(f"Walkthrough transcript saved to {walkthrough_path}")
        except Exception as e:
            logger.error(f"An error occurred during the walkthrough: {e}", exc_info=True)
            sys.exit(1)
    finally:
        logger.removeHandler(file_handler)
        file_handler.close()

    console.log("[bold green]Composite Model Walkthrough Completed[/bold green]")


if __name__ == "__main__":
    _cli()
