# backend/assessments/scoring/engine_base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from .contracts import AssessmentRecord, RiskAssessmentResult


class RiskScorer(ABC):
    @abstractmethod
    def score(self, record: AssessmentRecord) -> RiskAssessmentResult:
        raise NotImplementedError
