import json

from validate_outputs import validate_metrics


def test_missing_manifest(tmp_path):
    assert validate_metrics(tmp_path) == ["metrics.json not found"]


def test_incomplete_manifest(tmp_path):
    (tmp_path / "metrics.json").write_text(json.dumps({
        "run_meta": {},
        "dataset": {},
        "composite": {},
        "holdout_metrics": {"y1": {}, "y2": {}},
        "y1_error_rate": 1.5,
    }))
    problems = validate_metrics(tmp_path)
    assert "missing target 'y3'" in problems
    assert any("out of range" in p for p in problems)
