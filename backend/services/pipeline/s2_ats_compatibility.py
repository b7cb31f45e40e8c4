"""Stage 2: ATS Compatibility - how an automated keyword parser reads the bullet.

Earned points:
    opens with a strong action verb      35
    at least one quantified metric       35
    length within 8-35 words             30 (proportional outside the range)
Penalties:
    parser-hostile decoration ({}<>|)   -15
    passive / diffuse phrasing          -20

A bullet with no metric is capped at 45, well below a passing score, which
is what makes stripping a number from a bullet expensive.
"""

from models.schemas.stage_result import StageResult
from services.lexicon import (
    ACTION_VERBS,
    DECORATION_RE,
    PASSIVE_MARKERS,
    compile_phrases,
    find_phrases,
    first_word,
    tokenize,
)
from services.metric_detector import find_metrics

STAGE_KEY = "ats"

VERB_POINTS = 35
METRIC_POINTS = 35
LENGTH_POINTS = 30
DECORATION_PENALTY = 15
PASSIVE_PENALTY = 20
NO_METRIC_CAP = 45

MIN_WORDS = 8
MAX_WORDS = 35

_PASSIVE_RE = compile_phrases(PASSIVE_MARKERS)


def _length_points(word_count: int) -> int:
    if MIN_WORDS <= word_count <= MAX_WORDS:
        return LENGTH_POINTS
    if word_count < MIN_WORDS:
        return round(LENGTH_POINTS * word_count / MIN_WORDS)
    return round(LENGTH_POINTS * MAX_WORDS / word_count)


def analyze_ats(text: str | None) -> StageResult:
    text = text or ""
    details: list[str] = []
    raw = 0

    opener = first_word(text)
    if opener in ACTION_VERBS:
        raw += VERB_POINTS
        details.append(f'Starts with action verb: "{opener}"')
    else:
        details.append("Does not start with a strong action verb")

    metrics = find_metrics(text)
    if metrics:
        raw += METRIC_POINTS
        details.append(f"Quantified metrics: {', '.join(metrics)}")
    else:
        details.append("No quantified metric for ATS parsing")

    word_count = len(tokenize(text))
    length_points = _length_points(word_count)
    raw += length_points
    if length_points == LENGTH_POINTS:
        details.append(f"Good length: {word_count} words")
    else:
        details.append(f"Length issue: {word_count} words (ideal: {MIN_WORDS}-{MAX_WORDS})")

    if DECORATION_RE.search(text):
        raw -= DECORATION_PENALTY
        details.append("Contains characters that may confuse ATS parsers")

    passive = find_phrases(_PASSIVE_RE, text)
    if passive:
        raw -= PASSIVE_PENALTY
        details.append(f"Passive or diffuse phrasing: {', '.join(passive)}")

    if not metrics and raw > NO_METRIC_CAP:
        raw = NO_METRIC_CAP
        details.append(f"Capped at {NO_METRIC_CAP} without a quantified result")

    return StageResult(score=max(0, min(100, raw)), details=details)
