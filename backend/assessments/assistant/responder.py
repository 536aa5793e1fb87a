"""
Scripted assessment assistant.

Rules are checked in order and the first match answers. FAQ rules match on
regular expressions; keyword rules afterwards cover the remaining common
questions about the user's own result.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from . import faq
from ..formatting import impact_label, percent, stage_label
from ..storage import HistoryEntry


@dataclass(frozen=True)
class ChatRule:
    key: str
    matches: Callable[[str], bool]
    respond: Callable[[Optional[HistoryEntry]], str]
    needs_entry: bool = False


def _patterns(*expressions: str) -> Callable[[str], bool]:
    compiled = [re.compile(e, re.IGNORECASE) for e in expressions]
    return lambda text: any(p.search(text) for p in compiled)


def _keywords(*groups: Sequence[str]) -> Callable[[str], bool]:
    """Every group must contribute at least one keyword."""
    return lambda text: all(any(k in text for k in group) for group in groups)


def _static(text: str) -> Callable[[Optional[HistoryEntry]], str]:
    return lambda entry: text


# --- result-aware answers

def _results_meaning(entry: Optional[HistoryEntry]) -> str:
    if not entry:
        return "Please provide your assessment details."

    risk = entry.result.risk_level
    prob = percent(entry.result.probability)
    if risk == "high":
        meaning = "You have several indicators that suggest endometriosis may be present"
    elif risk == "medium":
        meaning = "You have some indicators that suggest endometriosis could be present"
    else:
        meaning = "Your indicators show lower likelihood, but symptoms should still be evaluated"

    return (
        f"Your results indicate a {risk} risk level ({prob}% probability) of endometriosis based on "
        "your symptoms, medical history, and biomarkers.\n\n"
        "What this means:\n"
        f"- {meaning}\n"
        "- This is a screening tool, not a diagnosis\n"
        "- Clinical evaluation by a gynecologist is recommended\n\n"
        f"Next steps: {', '.join(entry.result.recommendations[:2])}"
    )


def _not_a_diagnosis(entry: Optional[HistoryEntry]) -> str:
    risk = entry.result.risk_level if entry else "unknown"
    return (
        f"No, this is not a diagnosis. This assessment indicates a {risk} risk based on your symptoms "
        "and history, but only a healthcare provider can diagnose endometriosis.\n\n"
        "Key points:\n"
        "- Definitive diagnosis typically requires laparoscopy (minimally invasive surgery)\n"
        "- Imaging like ultrasound or MRI can detect endometriomas and deep disease\n"
        "- Clinical evaluation by a gynecologist specializing in endometriosis is essential\n\n"
        "Action: Schedule an appointment with a gynecologist to discuss your symptoms and this assessment."
    )


def _accuracy(entry: Optional[HistoryEntry]) -> str:
    conf = percent(entry.result.confidence) if entry else 0
    if conf > 80:
        note = "High confidence suggests clear symptom patterns"
    elif conf > 60:
        note = "Moderate confidence suggests mixed indicators"
    else:
        note = "Lower confidence suggests less clear patterns"

    return (
        f"This assessment has a model confidence of {conf}%.\n\n"
        "Accuracy considerations:\n"
        "- This tool scores your answers against a fixed set of clinical risk rules\n"
        "- It's a screening tool, not a diagnostic test\n"
        f"- {note}\n\n"
        "Important: Only clinical evaluation, imaging, and potentially laparoscopy can provide "
        "definitive diagnosis. Use this as a guide for discussing with your doctor."
    )


def _stage(entry: Optional[HistoryEntry]) -> str:
    stage = stage_label(entry.result.stage) if entry else "unknown"
    return (
        f"Your predicted stage is {stage}.\n\n"
        "Understanding stages (I-IV):\n"
        "- Stage I (Minimal): Small, isolated implants\n"
        "- Stage II (Mild): More implants, slightly deeper\n"
        "- Stage III (Moderate): Many implants, possible ovarian cysts\n"
        "- Stage IV (Severe): Extensive implants, large cysts, dense adhesions\n\n"
        "Stage does NOT correlate with pain severity. Treatment focuses on your symptoms, not just the stage."
    )


def _see_gynecologist(entry: Optional[HistoryEntry]) -> str:
    risk = entry.result.risk_level if entry else "medium"
    if risk == "high":
        opener = "Yes, you should see a gynecologist soon"
    elif risk == "medium":
        opener = "Yes, scheduling a gynecologist appointment is recommended"
    else:
        opener = "Consider seeing a gynecologist if symptoms persist"

    return (
        f"{opener}.\n\n"
        "When to seek care:\n"
        "- Severe period pain interfering with daily life\n"
        "- Pain with sex, bowel movements, or urination\n"
        "- Difficulty conceiving after 6-12 months\n\n"
        "What to bring: this assessment, your menstrual and symptom history, current medications, "
        "and family history of endometriosis."
    )


def _risk_level(entry: Optional[HistoryEntry]) -> str:
    risk = entry.result.risk_level
    if risk == "low":
        meaning = "you have a lower likelihood of endometriosis based on the factors assessed."
    elif risk == "medium":
        meaning = (
            "you have some risk factors that suggest you should monitor your symptoms and consult "
            "with a healthcare provider."
        )
    else:
        meaning = (
            "you have several risk factors that warrant medical consultation for proper diagnosis "
            "and treatment options."
        )
    return f"Your risk level is {risk} with a probability of {percent(entry.result.probability)}%. This means {meaning}"


def _factors(entry: Optional[HistoryEntry]) -> str:
    factors = entry.result.factors[:3]
    if not factors:
        return "None of the assessed risk factors were triggered by your answers."
    top = ", ".join(f"{f.feature} ({impact_label(f.impact)})" for f in factors)
    return (
        f"The main factors contributing to your assessment are: {top}. These were identified based on "
        "your responses about symptoms, medical history, and biomarkers."
    )


def _recommendations(entry: Optional[HistoryEntry]) -> str:
    return (
        f"Based on your assessment, I recommend: {' '.join(entry.result.recommendations[:2])} "
        "Would you like more details about any specific recommendation?"
    )


def _confidence(entry: Optional[HistoryEntry]) -> str:
    return (
        f"The confidence level of your assessment is {percent(entry.result.confidence)}%. This tool analyzes "
        "multiple factors, but it's designed for informational purposes only. Always consult with a "
        "qualified healthcare provider for proper diagnosis and treatment."
    )


FAQ_RULES: List[ChatRule] = [
    ChatRule(
        "results_meaning",
        _patterns(
            r"what\s+(do|does)\s+my\s+results?\s+mean",
            r"interpret\s+my\s+results?",
            r"understand\s+my\s+results?",
            r"explain\s+my\s+results?",
            r"tell\s+me\s+about\s+my\s+results?",
            r"what\s+(is|are)\s+my\s+results?",
            r"summary\s+of\s+my\s+results?",
            r"results?\s+explanation",
        ),
        _results_meaning,
    ),
    ChatRule(
        "not_a_diagnosis",
        _patterns(
            r"does\s+this\s+mean\s+i\s+have\s+endometriosis",
            r"do\s+i\s+have\s+endometriosis",
            r"am\s+i\s+diagnosed",
        ),
        _not_a_diagnosis,
    ),
    ChatRule(
        "accuracy",
        _patterns(r"how\s+accurate", r"is\s+this\s+reliable", r"can\s+i\s+trust", r"confidence"),
        _accuracy,
    ),
    ChatRule(
        "stage",
        _patterns(r"is\s+this\s+(mild|severe|moderate)", r"how\s+(bad|serious|severe)", r"stage\s+mean"),
        _stage,
    ),
    ChatRule(
        "symptoms_beyond_pain",
        _patterns(
            r"can\s+endometriosis\s+cause\s+(back\s+pain|fatigue|bloating)",
            r"symptoms\s+like",
            r"other\s+symptoms",
        ),
        _static(faq.SYMPTOMS_BEYOND_PAIN),
    ),
    ChatRule(
        "symptoms_fluctuate",
        _patterns(r"symptoms?\s+change", r"month\s+to\s+month", r"vary", r"fluctuate"),
        _static(faq.SYMPTOMS_FLUCTUATE),
    ),
    ChatRule(
        "chronic_pain",
        _patterns(r"pain.*after.*period", r"pain.*between.*periods", r"chronic.*pain"),
        _static(faq.CHRONIC_PAIN),
    ),
    ChatRule(
        "see_gynecologist",
        _patterns(r"should\s+i\s+see.*gynecologist", r"when.*see.*doctor", r"need.*specialist"),
        _see_gynecologist,
    ),
    ChatRule(
        "which_doctor",
        _patterns(r"which.*doctor", r"what.*specialist", r"type.*doctor"),
        _static(faq.WHICH_DOCTOR),
    ),
    ChatRule(
        "diagnosis_process",
        _patterns(r"what.*tests", r"how.*diagnosed", r"confirm.*endometriosis", r"diagnosis.*process"),
        _static(faq.DIAGNOSIS_PROCESS),
    ),
    ChatRule(
        "imaging_or_surgery",
        _patterns(r"ultrasound.*laparoscopy", r"should.*i.*get", r"need.*surgery"),
        _static(faq.IMAGING_OR_SURGERY),
    ),
    ChatRule(
        "natural_pain_management",
        _patterns(
            r"manage.*pain.*naturally",
            r"natural.*treatment",
            r"without.*medication",
            r"home.*remedies",
        ),
        _static(faq.NATURAL_PAIN_MANAGEMENT),
    ),
    ChatRule(
        "diet",
        _patterns(r"foods.*good.*bad", r"what.*eat", r"diet.*endometriosis"),
        _static(faq.DIET),
    ),
    ChatRule(
        "exercise",
        _patterns(r"exercise.*yoga.*help", r"physical.*activity", r"workout"),
        _static(faq.EXERCISE),
    ),
    ChatRule(
        "stress",
        _patterns(r"stress.*affect", r"stress.*symptoms", r"anxiety.*pain"),
        _static(faq.STRESS),
    ),
    ChatRule(
        "heat_and_rest",
        _patterns(r"heat.*pads?.*help", r"rest.*help", r"heating.*pad"),
        _static(faq.HEAT_AND_REST),
    ),
]

KEYWORD_RULES: List[ChatRule] = [
    ChatRule("risk_level", _keywords(["risk"], ["what", "mean"]), _risk_level, needs_entry=True),
    ChatRule("factors", _keywords(["factor", "contribute"]), _factors, needs_entry=True),
    ChatRule(
        "recommendations",
        _keywords(["recommend", "should i", "next"]),
        _recommendations,
        needs_entry=True,
    ),
    ChatRule("symptoms", _keywords(["symptom"]), _static(faq.SYMPTOMS_GENERAL)),
    ChatRule("treatment", _keywords(["treatment", "cure"]), _static(faq.TREATMENT_GENERAL)),
    ChatRule("confidence", _keywords(["confidence", "accurate"]), _confidence, needs_entry=True),
    ChatRule(
        "what_is",
        _keywords(["what is endometriosis", "endometriosis is"]),
        _static(faq.WHAT_IS_ENDOMETRIOSIS),
    ),
]

RULES: List[ChatRule] = FAQ_RULES + KEYWORD_RULES


def _first_match(rules: List[ChatRule], question: str, entry: Optional[HistoryEntry]) -> Optional[str]:
    text = (question or "").strip().lower()
    if not text:
        return None

    for rule in rules:
        if rule.needs_entry and entry is None:
            continue
        if rule.matches(text):
            return rule.respond(entry)
    return None


def find_faq_response(question: str, entry: Optional[HistoryEntry] = None) -> Optional[str]:
    return _first_match(FAQ_RULES, question, entry)


def reply(message: str, entry: Optional[HistoryEntry] = None) -> str:
    return _first_match(RULES, message, entry) or faq.DEFAULT_REPLY
