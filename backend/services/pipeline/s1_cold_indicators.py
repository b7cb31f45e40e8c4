"""Stage 1: Cold Indicators - breadth of competency language.

Counts how many of the ten canonical competency categories the bullet
evidences. Role-agnostic; saturates once ``settings.indicator_saturation``
distinct categories are hit.
"""

from config import settings
from models.schemas.stage_result import StageResult
from services.lexicon import COMPETENCY_LEXICON, compile_phrases, find_phrases

STAGE_KEY = "indicators"

_CATEGORY_PATTERNS = {
    category: compile_phrases(phrases)
    for category, phrases in COMPETENCY_LEXICON.items()
}


def analyze_cold_indicators(text: str | None) -> StageResult:
    text = text or ""
    saturation = settings.indicator_saturation

    details: list[str] = []
    hits = 0
    for category, pattern in _CATEGORY_PATTERNS.items():
        phrases = find_phrases(pattern, text)
        if phrases:
            hits += 1
            details.append(f"{category}: {', '.join(phrases[:3])}")

    score = round(100 * min(hits, saturation) / saturation)

    if hits == 0:
        details.append("No competency language detected")
    else:
        missing = len(COMPETENCY_LEXICON) - hits
        details.append(
            f"{hits}/{len(COMPETENCY_LEXICON)} competency categories evidenced "
            f"({missing} not shown)"
        )

    return StageResult(score=score, details=details)
