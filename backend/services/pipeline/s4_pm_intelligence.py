"""Stage 4: PM Intelligence - is the bullet framed as a business outcome?

Four signal categories, each worth a bounded share of the scale:
    ownership verb (led, drove, owned, ...)           25
    collaboration language (cross-functional, ...)    20
    quantified business outcome                       30
    problem -> solution -> result framing             25 (10 for an outcome alone)

A bullet with none of them still scores 10: terse but accurate bullets
should not be flattened to zero. The target title only changes how the
evidence is worded.
"""

from models.schemas.stage_result import StageResult
from services.lexicon import (
    COLLABORATION_PHRASES,
    OUTCOME_VERBS,
    OWNERSHIP_VERBS,
    PROBLEM_WORDS,
    compile_phrases,
    find_phrases,
)
from services.metric_detector import find_metrics
from services.role_classifier import is_product_role, normalize_title

STAGE_KEY = "pmIntelligence"

OWNERSHIP_POINTS = 25
COLLABORATION_POINTS = 20
METRIC_POINTS = 30
FRAMING_POINTS = 25
PARTIAL_FRAMING_POINTS = 10
FLOOR = 10

_OWNERSHIP_RE = compile_phrases(OWNERSHIP_VERBS)
_COLLABORATION_RE = compile_phrases(COLLABORATION_PHRASES)
_PROBLEM_RE = compile_phrases(PROBLEM_WORDS)
_OUTCOME_RE = compile_phrases(OUTCOME_VERBS)

# Principle name -> coaching tip, reported when the principle is not evidenced
PM_PRINCIPLES: dict[str, str] = {
    "Cross-Functional Leadership": "Name the teams you led or aligned",
    "Outcome Over Output": "Show ownership of the result, not just the task",
    "Data-Driven Decision Making": "Quantify the impact with a specific metric",
    "Problem-Solving": "Frame the work around the problem it solved",
}


def _grade(score: int) -> str:
    if score >= 80:
        return "Strong PM framing across all dimensions"
    if score >= 60:
        return "Good PM signals - minor gaps"
    if score >= 40:
        return "Some PM thinking present - needs strengthening"
    return "Weak PM framing - significant improvement possible"


def analyze_pm_intelligence(text: str | None, title: str | None = None) -> StageResult:
    text = text or ""
    evidence: list[str] = []
    missing: list[str] = []
    raw = 0

    ownership = find_phrases(_OWNERSHIP_RE, text)
    if ownership:
        raw += OWNERSHIP_POINTS
        evidence.append(f"Ownership: {', '.join(ownership)}")
    else:
        missing.append("Outcome Over Output")

    collaboration = find_phrases(_COLLABORATION_RE, text)
    if collaboration:
        raw += COLLABORATION_POINTS
        evidence.append(f"Collaboration: {', '.join(collaboration)}")
    else:
        missing.append("Cross-Functional Leadership")

    metrics = find_metrics(text)
    if metrics:
        raw += METRIC_POINTS
        evidence.append(f"Quantified outcome: {', '.join(metrics)}")
    else:
        missing.append("Data-Driven Decision Making")

    problems = find_phrases(_PROBLEM_RE, text)
    outcomes = find_phrases(_OUTCOME_RE, text)
    if problems and outcomes:
        raw += FRAMING_POINTS
        evidence.append(
            f"Problem -> result framing: {problems[0]} -> {outcomes[0]}"
        )
    elif outcomes:
        raw += PARTIAL_FRAMING_POINTS
        evidence.append(f"Outcome stated ({outcomes[0]}) without the problem it solved")
        missing.append("Problem-Solving")
    else:
        missing.append("Problem-Solving")

    score = max(FLOOR, min(100, raw))

    details = [_grade(score), *evidence]
    for principle in missing:
        details.append(f"Missing {principle}: {PM_PRINCIPLES[principle]}")

    if normalize_title(title):
        if is_product_role(title):
            details.append("Outcome framing weighs heavily for a product role")
        else:
            details.append("Outcome framing is a secondary signal for this role")

    return StageResult(score=score, details=details)
