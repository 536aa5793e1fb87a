from __future__ import annotations

import math


def percent(value: float) -> int:
    """0.874 -> 87, rounding halves up."""
    return int(math.floor(value * 100 + 0.5))


def stage_label(stage: int) -> str:
    return "N/A" if not stage else f"Stage {stage}"


def impact_label(impact: int) -> str:
    return f"+{impact} pts"


def risk_label(risk_level: str) -> str:
    return (risk_level or "unknown").capitalize()
