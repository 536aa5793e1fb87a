# backend/assessments/scoring/factory.py
from __future__ import annotations

import logging

from django.conf import settings

from .engine_base import RiskScorer
from .rules_engine import RuleBasedRiskScorer

logger = logging.getLogger(__name__)


def get_risk_scorer() -> RiskScorer:
    engine = getattr(settings, "RISK_SCORER", "rules").strip().lower()
    if engine != RuleBasedRiskScorer.ENGINE_NAME:
        logger.warning("Unknown RISK_SCORER %r, falling back to rules.", engine)
    return RuleBasedRiskScorer()
