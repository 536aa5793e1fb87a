from __future__ import annotations

from ..formatting import impact_label, percent, risk_label, stage_label
from ..storage import HistoryEntry

TOP_FACTORS = 5
TOP_RECOMMENDATIONS = 5


def build_result_explanation(entry: HistoryEntry) -> str:
    """Plain-language summary of one saved assessment."""
    result = entry.result

    top_factors = "; ".join(
        f"{f.feature} ({f.value}) - {impact_label(f.impact)}, increases risk"
        for f in result.factors[:TOP_FACTORS]
    )
    next_steps = "; ".join(result.recommendations[:TOP_RECOMMENDATIONS])

    lines = [
        "Here's a quick explanation of your assessment:",
        f"- Overall risk: {risk_label(result.risk_level)} ({percent(result.probability)}%)",
        f"- Model confidence: {percent(result.confidence)}%",
        f"- Predicted stage: {stage_label(result.stage)} (stage reflects extent of disease, not pain severity)",
    ]
    if top_factors:
        lines.append(f"- Top factors: {top_factors}")
    if next_steps:
        lines.append(f"- Next steps: {next_steps}")
    lines.append("This is not a diagnosis.")

    return "\n".join(lines)


def build_greeting(entry: HistoryEntry) -> str:
    result = entry.result
    return (
        "Hello! I'm here to help you understand your endometriosis risk assessment. "
        f"Your risk level is {result.risk_level} ({percent(result.probability)}% probability). "
        "Feel free to ask me any questions about your results or endometriosis in general."
    )
