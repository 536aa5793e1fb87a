# backend/assessments/scoring/templates.py
from __future__ import annotations

from typing import Dict, Tuple


# Base recommendations per risk level, in display order.
BASE_RECOMMENDATIONS: Dict[str, Tuple[str, ...]] = {
    "high": (
        "Consult a gynecologist or endometriosis specialist immediately",
        "Consider comprehensive diagnostic imaging (ultrasound/MRI)",
        "Discuss treatment options including hormonal therapy or surgery",
    ),
    "medium": (
        "Schedule an appointment with your gynecologist",
        "Keep a symptom diary to track patterns",
        "Consider pelvic ultrasound for initial assessment",
    ),
    "low": (
        "Continue monitoring symptoms and overall health",
        "Maintain regular gynecological check-ups",
    ),
}

# (factor name, recommendation) checked in this order.
FACTOR_RECOMMENDATIONS: Tuple[Tuple[str, str], ...] = (
    ("Pain Symptoms", "Discuss pain management strategies with your doctor"),
    ("CA-125 Level", "Request detailed blood work analysis"),
    ("Infertility", "Consider fertility consultation if planning pregnancy"),
)
