import json
import sys
from pathlib import Path

REQUIRED_KEYS = ['run_meta', 'dataset', 'composite', 'holdout_metrics', 'y1_error_rate']
REQUIRED_TARGETS = ['y1', 'y2', 'y3']


def validate_metrics(output_dir):
    """Return the list of problems found in ``<output_dir>/metrics.json``."""
    metrics_file = Path(output_dir) / "metrics.json"
    if not metrics_file.exists():
        print("✗ metrics.json not found")
        return ["metrics.json not found"]
    with open(metrics_file) as f:
        metrics = json.load(f)
    problems = [f"missing key '{k}'" for k in REQUIRED_KEYS if k not in metrics]
    holdout = metrics.get('holdout_metrics', {})
    problems += [f"missing target '{t}'" for t in REQUIRED_TARGETS if t not in holdout]
    rate = metrics.get('y1_error_rate')
    if rate is not None and not 0.0 <= rate <= 1.0:
        problems.append(f"y1_error_rate out of range: {rate}")
    if not problems:
        print("✓ All required metrics present")
    else:
        print(f"✗ Problems: {problems}")
    return problems


if __name__ == "__main__":
    sys.exit(1 if validate_metrics(sys.argv[1]) else 0)
