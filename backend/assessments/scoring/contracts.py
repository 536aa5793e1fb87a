# backend/assessments/scoring/contracts.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Union


RISK_LEVELS = ("low", "medium", "high")


@dataclass(frozen=True)
class AssessmentRecord:
    age: int
    bmi: float
    cycle_length: int
    age_of_menarche: int

    # symptom sliders, 0..10
    dysmenorrhea_score: int
    pelvic_pain_score: int
    dyspareunia_score: int
    dyschezia_score: int
    urinary_symptoms_score: int
    mental_health_score: int

    family_history: bool
    infertility_status: bool

    ca125_level: float  # U/mL
    crp_level: float    # mg/L

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssessmentRecord":
        return cls(**{name: data[name] for name in cls.field_names()})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FeatureContribution:
    feature: str
    impact: int                      # points added by the rule
    value: Union[str, int, float]    # display value of the triggering input

    def to_dict(self) -> Dict[str, Any]:
        return {"feature": self.feature, "impact": self.impact, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeatureContribution":
        return cls(feature=data["feature"], impact=data["impact"], value=data["value"])


@dataclass(frozen=True)
class RiskAssessmentResult:
    risk_level: str      # "low" | "medium" | "high"
    probability: float   # 0..0.95
    confidence: float    # 0.75..0.95
    stage: int           # 0..4
    factors: List[FeatureContribution] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "risk_level": self.risk_level,
            "probability": float(self.probability),
            "confidence": float(self.confidence),
            "stage": int(self.stage),
            "factors": [f.to_dict() for f in self.factors],
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskAssessmentResult":
        return cls(
            risk_level=data["risk_level"],
            probability=data["probability"],
            confidence=data["confidence"],
            stage=data["stage"],
            factors=[FeatureContribution.from_dict(f) for f in data.get("factors") or []],
            recommendations=list(data.get("recommendations") or []),
        )
