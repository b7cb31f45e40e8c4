"""Four-stage content analysis of a single bullet.

    text (+ optional target title)
      ├─ S1 Cold Indicators   → StageResult
      ├─ S2 ATS Compatibility → StageResult
      ├─ S3 Recruiter UX      → StageResult
      ├─ S4 PM Intelligence   → StageResult
      │            ↓
      └─ get_weights_for_role(title) → weighted total_score (0-100)

Stage scores depend on the text only. The title selects the weight profile
and adjusts the wording of stage evidence.
"""

import logging

from models.schemas.content_analysis import ContentAnalysis
from models.schemas.stage_result import STAGE_KEYS, StageResult
from models.schemas.weight_profile import WeightProfile
from services.pipeline.s1_cold_indicators import analyze_cold_indicators
from services.pipeline.s2_ats_compatibility import analyze_ats
from services.pipeline.s3_recruiter_ux import analyze_recruiter_ux
from services.pipeline.s4_pm_intelligence import analyze_pm_intelligence
from services.weight_profiles import get_weights_for_role

logger = logging.getLogger(__name__)


def compute_total_score(stages: dict[str, StageResult], weights: WeightProfile) -> int:
    """Weighted sum of the four stage scores, rounded and clamped to 0-100."""
    raw = sum(stages[key].score * weights.weight_for(key) for key in STAGE_KEYS)
    return min(100, max(0, round(raw)))


def analyze_cv_content(text: str | None, title: str | None = None) -> ContentAnalysis:
    """Run all four stages on ``text`` and weight them for the target ``title``."""
    text = text or ""
    weights = get_weights_for_role(title)

    stages = {
        "indicators": analyze_cold_indicators(text),
        "ats": analyze_ats(text),
        "recruiterUX": analyze_recruiter_ux(text, title),
        "pmIntelligence": analyze_pm_intelligence(text, title),
    }
    total_score = compute_total_score(stages, weights)

    return ContentAnalysis(
        indicators=stages["indicators"],
        ats=stages["ats"],
        recruiter_ux=stages["recruiterUX"],
        pm_intelligence=stages["pmIntelligence"],
        total_score=total_score,
        profile=weights.name,
    )
