"""
Plain-text assessment report, split into fixed-height pages with a footer on
each page. Consumes a HistoryEntry; short factor lists and empty
recommendation lists are rendered as such.
"""
from __future__ import annotations

import textwrap
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from django.conf import settings
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .formatting import impact_label, risk_label, stage_label
from .storage import HistoryEntry

DEFAULT_LINES_PER_PAGE = 40
LINE_WIDTH = 78
PAGE_BREAK = "\f"

DISCLAIMER = (
    "This assessment is designed to provide informational insights only. It should not be used as "
    "a substitute for professional medical diagnosis or treatment. If you have concerns about "
    "endometriosis or related symptoms, please consult a qualified healthcare provider for proper "
    "evaluation and care."
)


@dataclass(frozen=True)
class ReportDocument:
    filename: str
    pages: List[List[str]]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def render(self) -> str:
        return PAGE_BREAK.join("\n".join(page) + "\n" for page in self.pages)


def _entry_datetime(entry: HistoryEntry) -> datetime:
    dt = parse_datetime(entry.date) or timezone.now()
    if timezone.is_aware(dt):
        dt = timezone.localtime(dt)
    return dt


def _section(lines: List[str], title: str) -> None:
    if lines:
        lines.append("")
    lines.append(title)
    lines.append("-" * len(title))


def _wrap(lines: List[str], text: str, indent: str = "") -> None:
    lines.extend(textwrap.wrap(text, width=LINE_WIDTH, initial_indent=indent, subsequent_indent=indent) or [""])


def _body_lines(entry: HistoryEntry, taken_at: datetime) -> List[str]:
    result = entry.result
    data = entry.data
    lines: List[str] = [
        "ENDOAI ASSESSMENT REPORT",
        "=" * 24,
        f"Assessment Date: {taken_at.strftime('%B %d, %Y %I:%M %p')}",
    ]

    _section(lines, "RISK ASSESSMENT")
    lines.append(f"Risk Level: {risk_label(result.risk_level)} Risk")
    lines.append(f"Risk Probability: {result.probability * 100:.1f}%")
    lines.append(f"Confidence Level: {result.confidence * 100:.1f}%")
    lines.append(f"Predicted Stage: {stage_label(result.stage)}")

    _section(lines, "CONTRIBUTING FACTORS")
    if not result.factors:
        lines.append("No risk factors were triggered.")
    for factor in result.factors:
        lines.append(f"{factor.feature}:")
        lines.append(f"  Impact: {impact_label(factor.impact)}")
        lines.append(f"  Value: {factor.value}")

    _section(lines, "RECOMMENDATIONS")
    if not result.recommendations:
        lines.append("No recommendations.")
    for index, rec in enumerate(result.recommendations, start=1):
        _wrap(lines, f"{index}. {rec}")

    _section(lines, "PATIENT INFORMATION")
    lines.append(f"Age: {data.age} years")
    lines.append(f"BMI: {data.bmi:.1f}" if data.bmi else "BMI: N/A")
    if data.cycle_length:
        lines.append(f"Cycle Length: {data.cycle_length} days")
    if data.age_of_menarche:
        lines.append(f"Age of Menarche: {data.age_of_menarche} years")

    lines.append("")
    lines.append("Symptoms (0-10 scale):")
    lines.append(f"  Dysmenorrhea: {data.dysmenorrhea_score}")
    lines.append(f"  Pelvic Pain: {data.pelvic_pain_score}")
    lines.append(f"  Dyspareunia: {data.dyspareunia_score}")
    lines.append(f"  Dyschezia: {data.dyschezia_score}")
    lines.append(f"  Urinary Symptoms: {data.urinary_symptoms_score}")
    lines.append(f"  Mental Health Impact: {data.mental_health_score}")

    lines.append("")
    lines.append("Medical History:")
    lines.append(f"  Family History: {'Yes' if data.family_history else 'No'}")
    lines.append(f"  Infertility: {'Yes' if data.infertility_status else 'No'}")

    if data.ca125_level or data.crp_level:
        lines.append("")
        lines.append("Biomarkers:")
        if data.ca125_level:
            lines.append(f"  CA-125: {data.ca125_level} U/mL")
        if data.crp_level:
            lines.append(f"  CRP: {data.crp_level} mg/L")

    _section(lines, "IMPORTANT DISCLAIMER")
    _wrap(lines, DISCLAIMER)
    return lines


def build_report(
    entry: HistoryEntry,
    *,
    lines_per_page: Optional[int] = None,
    generated_on: Optional[date] = None,
) -> ReportDocument:
    per_page = lines_per_page or int(getattr(settings, "REPORT_LINES_PER_PAGE", DEFAULT_LINES_PER_PAGE))
    # blank line + footer on every page
    body_height = max(per_page - 2, 1)
    generated_on = generated_on or timezone.localdate()
    taken_at = _entry_datetime(entry)

    body = _body_lines(entry, taken_at)
    chunks = [body[i:i + body_height] for i in range(0, len(body), body_height)]

    pages = []
    for number, chunk in enumerate(chunks, start=1):
        footer = (
            f"Page {number} of {len(chunks)} | EndoAI Report | "
            f"Generated {generated_on.month}/{generated_on.day}/{generated_on.year}"
        )
        pages.append(chunk + ["", footer])

    filename = f"EndoAI_Assessment_{taken_at.month}-{taken_at.day}-{taken_at.year}.txt"
    return ReportDocument(filename=filename, pages=pages)
