from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional

from .scoring.contracts import AssessmentRecord


# Optional questionnaire answers and their fallbacks.
OPTIONAL_DEFAULTS: Dict[str, Any] = {
    "family_history": False,
    "infertility_status": False,
    "ca125_level": 0.0,
    "crp_level": 0.0,
}

INT_FIELDS = (
    "age",
    "cycle_length",
    "age_of_menarche",
    "dysmenorrhea_score",
    "pelvic_pain_score",
    "dyspareunia_score",
    "dyschezia_score",
    "urinary_symptoms_score",
    "mental_health_score",
)
BOOL_FIELDS = ("family_history", "infertility_status")


class IncompleteAssessmentError(ValueError):
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Missing assessment fields: {', '.join(self.missing)}")


class InvalidAssessmentError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        detail = "; ".join(f"{name}: {msg}" for name, msg in self.errors.items())
        super().__init__(f"Invalid assessment fields: {detail}")


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """weight / height(m)^2, rounded to 2 decimals like the intake form shows it."""
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 2)


@dataclass(frozen=True)
class AssessmentDraft:
    """
    A questionnaire in progress. Every step produces a new draft through
    update_draft(); complete_draft() turns it into an AssessmentRecord.
    """
    age: Optional[int] = None
    bmi: Optional[float] = None
    cycle_length: Optional[int] = None
    age_of_menarche: Optional[int] = None

    dysmenorrhea_score: Optional[int] = None
    pelvic_pain_score: Optional[int] = None
    dyspareunia_score: Optional[int] = None
    dyschezia_score: Optional[int] = None
    urinary_symptoms_score: Optional[int] = None
    mental_health_score: Optional[int] = None

    family_history: Optional[bool] = None
    infertility_status: Optional[bool] = None

    ca125_level: Optional[float] = None
    crp_level: Optional[float] = None

    def missing_fields(self) -> List[str]:
        return [
            f.name for f in fields(self)
            if getattr(self, f.name) is None and f.name not in OPTIONAL_DEFAULTS
        ]


def update_draft(draft: AssessmentDraft, **changes: Any) -> AssessmentDraft:
    known = {f.name for f in fields(AssessmentDraft)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"Unknown assessment fields: {', '.join(unknown)}")
    return replace(draft, **changes)


def draft_from_dict(data: Dict[str, Any]) -> AssessmentDraft:
    known = {f.name for f in fields(AssessmentDraft)}
    return AssessmentDraft(**{k: v for k, v in data.items() if k in known})


def _coerce(name: str, value: Any) -> Any:
    """Numbers may arrive as strings ("30"); booleans must be real booleans."""
    if name in BOOL_FIELDS:
        if isinstance(value, bool):
            return value
        raise ValueError("must be true or false.")

    if isinstance(value, bool):
        raise ValueError("must be a number.")

    if name in INT_FIELDS:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, (int, str)):
            try:
                return int(str(value).strip())
            except ValueError:
                pass
        raise ValueError("must be a whole number.")

    if isinstance(value, (int, float, str)):
        try:
            return float(value)
        except ValueError:
            pass
    raise ValueError("must be a number.")


def complete_draft(draft: AssessmentDraft) -> AssessmentRecord:
    missing = draft.missing_fields()
    if missing:
        raise IncompleteAssessmentError(missing)

    values = {}
    errors = {}
    for name in AssessmentRecord.field_names():
        value = getattr(draft, name)
        if value is None:
            values[name] = OPTIONAL_DEFAULTS[name]
            continue
        try:
            values[name] = _coerce(name, value)
        except ValueError as exc:
            errors[name] = str(exc)

    if errors:
        raise InvalidAssessmentError(errors)
    return AssessmentRecord(**values)
