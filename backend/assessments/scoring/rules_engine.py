# backend/assessments/scoring/rules_engine.py
from __future__ import annotations

from typing import List, Tuple

from .contracts import AssessmentRecord, FeatureContribution, RiskAssessmentResult
from .engine_base import RiskScorer
from .recommendations import generate_recommendations


MAX_PROBABILITY = 0.95
BASE_CONFIDENCE = 0.75
CONFIDENCE_PER_FACTOR = 0.03
MAX_CONFIDENCE = 0.95
MAX_FACTORS = 8


def _risk_band(probability: float, risk_score: int) -> Tuple[str, int]:
    """Map probability (and the raw score for stage) to (risk_level, stage)."""
    if probability < 0.3:
        return "low", 0
    if probability < 0.6:
        return "medium", 2 if risk_score > 50 else 1
    return "high", 4 if risk_score > 80 else 3


class RuleBasedRiskScorer(RiskScorer):
    ENGINE_NAME = "rules"

    def score(self, record: AssessmentRecord) -> RiskAssessmentResult:
        factors: List[FeatureContribution] = []
        risk_score = 0

        # --- Age (peak risk 25-35)
        if 25 <= record.age <= 35:
            risk_score += 15
            factors.append(FeatureContribution("Age", 15, record.age))

        # --- Pain composite (0..30)
        pain = record.dysmenorrhea_score + record.pelvic_pain_score + record.dyspareunia_score
        if pain > 15:
            risk_score += 30
            factors.append(FeatureContribution("Pain Symptoms", 30, f"High ({pain}/30)"))
        elif pain > 8:
            risk_score += 15
            factors.append(FeatureContribution("Pain Symptoms", 15, f"Moderate ({pain}/30)"))

        # --- Digestive / urinary composite (0..20)
        other = record.dyschezia_score + record.urinary_symptoms_score
        if other > 10:
            risk_score += 20
            factors.append(FeatureContribution("Digestive/Urinary", 20, f"High ({other}/20)"))

        # --- History
        if record.family_history:
            risk_score += 20
            factors.append(FeatureContribution("Family History", 20, "Yes"))

        # --- Biomarkers
        if record.ca125_level > 35:
            risk_score += 25
            factors.append(FeatureContribution("CA-125 Level", 25, f"{record.ca125_level:.1f} U/mL"))

        if record.infertility_status:
            risk_score += 15
            factors.append(FeatureContribution("Infertility", 15, "Yes"))

        if record.crp_level > 10:
            risk_score += 10
            factors.append(FeatureContribution("CRP Level", 10, f"{record.crp_level:.1f} mg/L"))

        # --- Mental health
        if record.mental_health_score > 6:
            risk_score += 5
            factors.append(FeatureContribution("Mental Health Impact", 5, record.mental_health_score))

        probability = min(risk_score / 100, MAX_PROBABILITY)
        confidence = min(BASE_CONFIDENCE + CONFIDENCE_PER_FACTOR * len(factors), MAX_CONFIDENCE)
        risk_level, stage = _risk_band(probability, risk_score)

        recommendations = generate_recommendations(risk_level, factors)

        # sorted() is stable: equal impacts keep rule order
        ranked = sorted(factors, key=lambda f: f.impact, reverse=True)[:MAX_FACTORS]

        return RiskAssessmentResult(
            risk_level=risk_level,
            probability=probability,
            confidence=confidence,
            stage=stage,
            factors=ranked,
            recommendations=recommendations,
        )
