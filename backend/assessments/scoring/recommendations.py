# backend/assessments/scoring/recommendations.py
from __future__ import annotations

from typing import Iterable, List

from .contracts import FeatureContribution
from .templates import BASE_RECOMMENDATIONS, FACTOR_RECOMMENDATIONS


def generate_recommendations(risk_level: str, factors: Iterable[FeatureContribution]) -> List[str]:
    """
    Base advice for the risk level, followed by factor-specific advice.
    Unknown levels get the low-risk base set.
    """
    fired = {f.feature for f in factors}

    recommendations = list(BASE_RECOMMENDATIONS.get(risk_level, BASE_RECOMMENDATIONS["low"]))
    for feature, text in FACTOR_RECOMMENDATIONS:
        if feature in fired:
            recommendations.append(text)
    return recommendations
