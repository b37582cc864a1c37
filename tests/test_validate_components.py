import pytest

import orchestrator as orch


def test_validate_components_availability_success():
    orch._validate_components_availability()


def test_validate_components_availability_missing_model(monkeypatch):
    monkeypatch.setattr(
        orch,
        "MODEL_FAMILIES",
        orch.MODEL_FAMILIES + ("NonexistentModel",),
        raising=False,
    )
    with pytest.raises(FileNotFoundError):
        orch._validate_components_availability()


def test_validate_components_availability_missing_preprocessor(monkeypatch):
    monkeypatch.setattr(
        orch,
        "PREP_STEPS",
        orch.PREP_STEPS + ("NonexistentPrep",),
        raising=False,
    )
    with pytest.raises(FileNotFoundError):
        orch._validate_components_availability()
