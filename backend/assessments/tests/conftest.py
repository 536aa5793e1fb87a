"""
Shared fixtures for assessment tests.
"""
from dataclasses import replace

import pytest

from assessments import storage
from assessments.scoring import AssessmentRecord, score
from assessments.storage import HistoryEntry


@pytest.fixture
def baseline_record() -> AssessmentRecord:
    """Nothing fires: every rule stays below its threshold."""
    return AssessmentRecord(
        age=20,
        bmi=22.0,
        cycle_length=28,
        age_of_menarche=12,
        dysmenorrhea_score=0,
        pelvic_pain_score=0,
        dyspareunia_score=0,
        dyschezia_score=0,
        urinary_symptoms_score=0,
        mental_health_score=0,
        family_history=False,
        infertility_status=False,
        ca125_level=0.0,
        crp_level=0.0,
    )


@pytest.fixture
def make_record(baseline_record):
    def _make(**changes) -> AssessmentRecord:
        return replace(baseline_record, **changes)
    return _make


@pytest.fixture
def high_risk_record(make_record) -> AssessmentRecord:
    """Age + high pain + family history + CA-125 = 90 points."""
    return make_record(
        age=30,
        dysmenorrhea_score=8,
        pelvic_pain_score=8,
        dyspareunia_score=4,
        mental_health_score=3,
        family_history=True,
        ca125_level=40.0,
        crp_level=5.0,
    )


@pytest.fixture
def high_risk_entry(high_risk_record) -> HistoryEntry:
    return HistoryEntry(
        id="6f1c2a4e-0000-4000-8000-000000000001",
        date="2026-03-05T14:30:00+00:00",
        data=high_risk_record,
        result=score(high_risk_record),
    )


@pytest.fixture
def low_risk_entry(baseline_record) -> HistoryEntry:
    return HistoryEntry(
        id="6f1c2a4e-0000-4000-8000-000000000002",
        date="2026-03-06T09:00:00+00:00",
        data=baseline_record,
        result=score(baseline_record),
    )


@pytest.fixture
def intake_payload() -> dict:
    return {
        "age": 30,
        "bmi": 22.5,
        "cycle_length": 28,
        "age_of_menarche": 12,
        "dysmenorrhea_score": 8,
        "pelvic_pain_score": 8,
        "dyspareunia_score": 4,
        "dyschezia_score": 0,
        "urinary_symptoms_score": 0,
        "mental_health_score": 3,
        "family_history": True,
        "infertility_status": False,
        "ca125_level": 40.0,
        "crp_level": 5.0,
    }


@pytest.fixture
def memory_store(settings, monkeypatch):
    settings.ASSESSMENT_STORE = "memory"
    monkeypatch.setattr(storage, "_memory_store", None)
    return storage.get_history_store()
