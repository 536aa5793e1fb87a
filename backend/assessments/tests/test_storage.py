import json

import pytest
from django.core.exceptions import ImproperlyConfigured

from assessments import storage
from assessments.models import AssessmentHistory
from assessments.scoring import RiskAssessmentResult, score
from assessments.storage import (
    DatabaseHistoryStore,
    HistoryEntry,
    InMemoryHistoryStore,
    get_history_store,
    new_entry,
)


def _entries(record, count):
    result = score(record)
    return [new_entry(record, result) for _ in range(count)]


def test_result_survives_json(high_risk_entry):
    payload = json.loads(json.dumps(high_risk_entry.result.to_dict()))
    assert RiskAssessmentResult.from_dict(payload) == high_risk_entry.result


def test_entry_survives_json(high_risk_entry):
    payload = json.loads(json.dumps(high_risk_entry.to_dict()))
    assert HistoryEntry.from_dict(payload) == high_risk_entry


def test_new_entry_has_id_and_iso_date(high_risk_record):
    entry = new_entry(high_risk_record, score(high_risk_record))
    assert len(entry.id) == 36
    assert "T" in entry.date


class TestInMemoryStore:
    def test_most_recent_first(self, high_risk_entry, low_risk_entry):
        store = InMemoryHistoryStore(limit=20)
        store.save(high_risk_entry)
        store.save(low_risk_entry)
        assert [e.id for e in store.list_all()] == [low_risk_entry.id, high_risk_entry.id]

    def test_trims_to_limit(self, baseline_record):
        store = InMemoryHistoryStore(limit=3)
        entries = _entries(baseline_record, 5)
        for entry in entries:
            store.save(entry)

        assert [e.id for e in store.list_all()] == [e.id for e in reversed(entries[2:])]

    def test_get_and_clear(self, high_risk_entry):
        store = InMemoryHistoryStore()
        store.save(high_risk_entry)

        assert store.get(high_risk_entry.id) == high_risk_entry
        assert store.get("missing") is None

        store.clear()
        assert store.list_all() == []

    def test_list_is_a_copy(self, high_risk_entry):
        store = InMemoryHistoryStore()
        store.save(high_risk_entry)
        store.list_all().clear()
        assert len(store.list_all()) == 1


@pytest.mark.django_db
class TestDatabaseStore:
    def test_round_trip(self, high_risk_entry):
        store = DatabaseHistoryStore()
        store.save(high_risk_entry)

        assert store.get(high_risk_entry.id) == high_risk_entry
        row = AssessmentHistory.objects.get(entry_id=high_risk_entry.id)
        assert row.risk_level == "high"
        assert row.stage == 4

    def test_trims_to_limit(self, baseline_record):
        store = DatabaseHistoryStore(limit=3)
        entries = _entries(baseline_record, 5)
        for entry in entries:
            store.save(entry)

        assert AssessmentHistory.objects.count() == 3
        assert [e.id for e in store.list_all()] == [e.id for e in reversed(entries[2:])]

    def test_limit_from_settings(self, settings, baseline_record):
        settings.ASSESSMENT_HISTORY_LIMIT = 2
        store = DatabaseHistoryStore()
        for entry in _entries(baseline_record, 4):
            store.save(entry)
        assert len(store.list_all()) == 2

    def test_clear(self, high_risk_entry, low_risk_entry):
        store = DatabaseHistoryStore()
        store.save(high_risk_entry)
        store.save(low_risk_entry)

        store.clear()
        assert store.list_all() == []
        assert store.get(high_risk_entry.id) is None


class TestFactory:
    def test_database_by_default(self, settings):
        settings.ASSESSMENT_STORE = "database"
        assert isinstance(get_history_store(), DatabaseHistoryStore)

    def test_memory_store_is_shared(self, memory_store):
        assert isinstance(memory_store, InMemoryHistoryStore)
        assert get_history_store() is memory_store

    def test_unknown_backend(self, settings, monkeypatch):
        monkeypatch.setattr(storage, "_memory_store", None)
        settings.ASSESSMENT_STORE = "redis"
        with pytest.raises(ImproperlyConfigured):
            get_history_store()


@pytest.mark.django_db
class TestStoresAgree:
    # low_risk_entry is dated a day after high_risk_entry but saved first
    def _save_out_of_date_order(self, store, high_risk_entry, low_risk_entry):
        store.save(low_risk_entry)
        store.save(high_risk_entry)
        return [e.id for e in store.list_all()]

    def test_same_order_for_same_saves(self, high_risk_entry, low_risk_entry):
        memory = self._save_out_of_date_order(InMemoryHistoryStore(), high_risk_entry, low_risk_entry)
        database = self._save_out_of_date_order(DatabaseHistoryStore(), high_risk_entry, low_risk_entry)

        assert memory == database == [high_risk_entry.id, low_risk_entry.id]

    def test_trim_keeps_latest_save_even_if_older_date(self, high_risk_entry, low_risk_entry):
        store = DatabaseHistoryStore(limit=1)
        store.save(low_risk_entry)
        store.save(high_risk_entry)

        assert store.get(high_risk_entry.id) is not None
        assert store.get(low_risk_entry.id) is None
        assert store.get(high_risk_entry.id).date == high_risk_entry.date
