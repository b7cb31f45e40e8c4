"""Stage 3: Recruiter UX - scan-ability in the few seconds a reviewer spends.

Rewards short bullets that front-load the outcome and penalises generic
filler and dense product jargon. The target title only changes how the
jargon evidence is worded; the score depends on the text alone.
"""

import math

from models.schemas.stage_result import StageResult
from services.lexicon import (
    ACTION_VERBS,
    GENERIC_PHRASES,
    OUTCOME_CONNECTORS,
    PM_JARGON,
    compile_phrases,
    find_phrases,
    tokenize,
)
from services.metric_detector import count_metrics
from services.role_classifier import is_product_role, normalize_title

STAGE_KEY = "recruiterUX"

CONCISE_POINTS = 40
CONCISE_WORDS = 30
LONG_WORDS = 45
FRONT_VERB_POINTS = 20
FRONT_METRIC_POINTS = 15
LATE_METRIC_POINTS = 5
SPECIFIC_POINTS = 15
OUTCOME_POINTS = 10
JARGON_PENALTY = 15
JARGON_LIMIT = 2  # distinct terms tolerated before the penalty applies

_GENERIC_RE = compile_phrases(GENERIC_PHRASES)
_OUTCOME_RE = compile_phrases(OUTCOME_CONNECTORS)
_JARGON_RE = compile_phrases(PM_JARGON)


def _conciseness_points(word_count: int) -> int:
    if word_count == 0:
        return 0
    if word_count <= CONCISE_WORDS:
        return CONCISE_POINTS
    if word_count <= LONG_WORDS:
        return CONCISE_POINTS - (word_count - CONCISE_WORDS)
    at_long = CONCISE_POINTS - (LONG_WORDS - CONCISE_WORDS)
    return max(0, at_long - 2 * (word_count - LONG_WORDS))


def analyze_recruiter_ux(text: str | None, title: str | None = None) -> StageResult:
    text = text or ""
    details: list[str] = []

    words = tokenize(text)
    word_count = len(words)

    raw = _conciseness_points(word_count)
    if word_count == 0:
        details.append("No content for a recruiter to scan")
    elif word_count <= CONCISE_WORDS:
        details.append(f"Concise and scannable ({word_count} words)")
    elif word_count <= LONG_WORDS:
        details.append(f"Slightly long but readable ({word_count} words)")
    else:
        details.append(f"Too long - recruiter fatigue risk ({word_count} words)")

    # Opening half of the bullet is what survives a skim
    front = words[: math.ceil(word_count / 2)]
    front_verbs = [w.strip(".,;:!?\"'()").lower() for w in front]
    if any(w in ACTION_VERBS for w in front_verbs):
        raw += FRONT_VERB_POINTS
        details.append("Action verb visible in the opening half")

    if count_metrics(" ".join(front)):
        raw += FRONT_METRIC_POINTS
        details.append("Outcome metric front-loaded")
    elif count_metrics(text):
        raw += LATE_METRIC_POINTS
        details.append("Outcome metric buried in the second half")

    generic = find_phrases(_GENERIC_RE, text)
    if word_count and not generic:
        raw += SPECIFIC_POINTS
        details.append("Specific, non-generic language")
    elif generic:
        details.append(f"Generic phrasing: {', '.join(generic)}")

    if _OUTCOME_RE.search(text):
        raw += OUTCOME_POINTS
        details.append('Clear "so what?" connector')

    jargon = find_phrases(_JARGON_RE, text)
    if len(jargon) > JARGON_LIMIT:
        raw -= JARGON_PENALTY
        details.append(f"Heavy product jargon: {', '.join(jargon)}")
    if jargon and normalize_title(title):
        if is_product_role(title):
            details.append("Product vocabulary is expected for this role")
        else:
            details.append(
                f"Product vocabulary ({', '.join(jargon)}) reads as noise "
                f"for a {normalize_title(title)} audience"
            )

    return StageResult(score=max(0, min(100, raw)), details=details)
