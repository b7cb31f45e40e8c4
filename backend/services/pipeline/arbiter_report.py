"""Template-based explanations of arbiter decisions.

Turns the structured decision records into short sentences a UI or a log
line can show without re-deriving anything.
"""

from models.schemas.arbiter_decision import ArbiterDecision, StageDropDetail
from models.schemas.arbiter_result import ArbiterResult


def format_stage_drop(drop: StageDropDetail) -> str:
    """e.g. ``ATS Compatibility -55 (100 -> 45)``."""
    return f"{drop.stage_name} -{drop.drop} ({drop.original_score} -> {drop.tailored_score})"


def build_decision_summary(decision: ArbiterDecision) -> str:
    """One paragraph explaining which version was kept and why."""
    original_total = decision.original_analysis.total_score
    tailored_total = decision.tailored_analysis.total_score

    parts = [
        f"Kept the {decision.winner} bullet "
        f"(original {original_total}/100, tailored {tailored_total}/100, "
        f"delta {decision.score_delta:+d})."
    ]

    if decision.metric_guard_applied:
        parts.append(
            f"Tailored text dropped quantified results "
            f"({decision.original_metric_count} -> {decision.tailored_metric_count} metrics), "
            f"so the original was preserved."
        )
    elif decision.winner == "original":
        parts.append("Tailored text scored lower overall.")

    if decision.rejection_reasons:
        drops = "; ".join(format_stage_drop(r) for r in decision.rejection_reasons)
        parts.append(f"Stage regressions: {drops}.")
    elif decision.score_delta == 0 and decision.winner == "tailored":
        parts.append("No stage changed.")

    return " ".join(parts)


def build_batch_summary(result: ArbiterResult) -> str:
    """Summary line for a whole bullet list."""
    n = len(result.decisions)
    if n == 0:
        return "No bullets to compare."

    gain = result.optimised_total_score - result.original_total_score
    status = "preserved" if result.methodology_preserved else "NOT preserved"
    guarded = sum(1 for d in result.decisions if d.metric_guard_applied)

    parts = [
        f"{n} bullets compared: kept {result.tailored_kept} tailored, "
        f"restored {result.originals_restored} originals.",
        f"Total score {result.original_total_score} -> {result.optimised_total_score} "
        f"({gain:+d}); methodology {status}.",
    ]
    if guarded:
        parts.append(f"{guarded} tailored bullets rejected for dropping metrics.")
    return " ".join(parts)
