"""
Assessment history persistence.

The application talks to a HistoryStore (save / list_all / get / clear); the
scorer never does. Stores keep the most recent entries first and drop anything
beyond ASSESSMENT_HISTORY_LIMIT.
"""
from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import AssessmentHistory
from .scoring.contracts import AssessmentRecord, RiskAssessmentResult

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    date: str  # ISO-8601
    data: AssessmentRecord
    result: RiskAssessmentResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "data": self.data.to_dict(),
            "result": self.result.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=payload["id"],
            date=payload["date"],
            data=AssessmentRecord.from_dict(payload["data"]),
            result=RiskAssessmentResult.from_dict(payload["result"]),
        )


def new_entry(record: AssessmentRecord, result: RiskAssessmentResult) -> HistoryEntry:
    return HistoryEntry(
        id=str(uuid.uuid4()),
        date=timezone.now().isoformat(),
        data=record,
        result=result,
    )


def history_limit() -> int:
    return int(getattr(settings, "ASSESSMENT_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT))


class HistoryStore(ABC):
    def __init__(self, limit: Optional[int] = None):
        self.limit = history_limit() if limit is None else limit

    @abstractmethod
    def save(self, entry: HistoryEntry) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[HistoryEntry]:
        raise NotImplementedError

    @abstractmethod
    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError


class InMemoryHistoryStore(HistoryStore):
    def __init__(self, limit: Optional[int] = None):
        super().__init__(limit)
        self._entries: List[HistoryEntry] = []

    def save(self, entry: HistoryEntry) -> None:
        self._entries.insert(0, entry)
        del self._entries[self.limit:]

    def list_all(self) -> List[HistoryEntry]:
        return list(self._entries)

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def clear(self) -> None:
        self._entries.clear()


class DatabaseHistoryStore(HistoryStore):
    def save(self, entry: HistoryEntry) -> None:
        with transaction.atomic():
            AssessmentHistory.objects.create(
                entry_id=entry.id,
                created_at=parse_datetime(entry.date) or timezone.now(),
                data=entry.data.to_dict(),
                result=entry.result.to_dict(),
                risk_level=entry.result.risk_level,
                stage=entry.result.stage,
            )

            # insertion order, entry.date is data only
            keep = list(AssessmentHistory.objects.order_by("-id").values_list("id", flat=True)[: self.limit])
            trimmed, _ = AssessmentHistory.objects.exclude(id__in=keep).delete()

        logger.info("Saved assessment %s (risk=%s, trimmed=%s)", entry.id, entry.result.risk_level, trimmed)

    def list_all(self) -> List[HistoryEntry]:
        return [self._to_entry(obj) for obj in AssessmentHistory.objects.order_by("-id")[: self.limit]]

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        obj = AssessmentHistory.objects.filter(entry_id=entry_id).first()
        if not obj:
            return None
        return self._to_entry(obj)

    def clear(self) -> None:
        deleted, _ = AssessmentHistory.objects.all().delete()
        logger.info("Cleared assessment history (%s entries)", deleted)

    @staticmethod
    def _to_entry(obj: AssessmentHistory) -> HistoryEntry:
        return HistoryEntry(
            id=obj.entry_id,
            date=obj.created_at.isoformat(),
            data=AssessmentRecord.from_dict(obj.data),
            result=RiskAssessmentResult.from_dict(obj.result),
        )


_memory_store: Optional[InMemoryHistoryStore] = None


def get_history_store() -> HistoryStore:
    global _memory_store

    backend = getattr(settings, "ASSESSMENT_STORE", "database").strip().lower()
    if backend == "database":
        return DatabaseHistoryStore()
    if backend == "memory":
        if _memory_store is None:
            _memory_store = InMemoryHistoryStore()
        return _memory_store
    raise ImproperlyConfigured(f"Unknown ASSESSMENT_STORE {backend!r} (expected 'database' or 'memory').")
