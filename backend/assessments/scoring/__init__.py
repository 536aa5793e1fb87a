# backend/assessments/scoring/__init__.py
from .contracts import AssessmentRecord, FeatureContribution, RiskAssessmentResult
from .factory import get_risk_scorer
from .recommendations import generate_recommendations
from .rules_engine import RuleBasedRiskScorer


def score(record: AssessmentRecord) -> RiskAssessmentResult:
    return RuleBasedRiskScorer().score(record)
