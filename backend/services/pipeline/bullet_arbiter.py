"""Bullet Arbiter: keep the original or the tailored version of one bullet.

Rules, in order:
1. Metric-preservation guard: a tailored bullet with fewer quantified
   metrics than the original never wins, whatever its score.
2. Otherwise the higher weighted total wins; ties go to the tailored text.

``score_delta`` always reports the raw score comparison, and
``rejection_reasons`` lists every stage that regressed even when the
tailored version wins overall.
"""

import logging

from models.schemas.arbiter_decision import ArbiterDecision, StageDropDetail
from models.schemas.content_analysis import ContentAnalysis
from models.schemas.stage_result import STAGE_KEYS, STAGE_NAMES
from services.metric_detector import count_metrics
from services.pipeline.content_analyzer import analyze_cv_content

logger = logging.getLogger(__name__)


def find_stage_drops(
    original: ContentAnalysis,
    tailored: ContentAnalysis,
) -> list[StageDropDetail]:
    """Stages where the original outscored the tailored text, in stage order."""
    drops: list[StageDropDetail] = []
    for key in STAGE_KEYS:
        original_score = original.stage(key).score
        tailored_score = tailored.stage(key).score
        if original_score > tailored_score:
            drops.append(StageDropDetail(
                stage=key,
                stage_name=STAGE_NAMES[key],
                original_score=original_score,
                tailored_score=tailored_score,
                drop=original_score - tailored_score,
            ))
    return drops


def arbitrate_bullet(
    original: str | None,
    tailored: str | None,
    title: str | None = None,
) -> ArbiterDecision:
    """Compare an original bullet with its tailored rewrite and pick one."""
    original = original or ""
    tailored = tailored or ""

    original_analysis = analyze_cv_content(original, title)
    tailored_analysis = analyze_cv_content(tailored, title)
    score_delta = tailored_analysis.total_score - original_analysis.total_score

    original_metrics = count_metrics(original)
    tailored_metrics = count_metrics(tailored)
    guard_applied = tailored_metrics < original_metrics

    if guard_applied:
        winner = "original"
    elif score_delta >= 0:
        winner = "tailored"
    else:
        winner = "original"

    rejection_reasons = find_stage_drops(original_analysis, tailored_analysis)

    logger.debug(
        "Arbitrated bullet: winner=%s delta=%+d guard=%s drops=%s",
        winner,
        score_delta,
        guard_applied,
        [r.stage for r in rejection_reasons],
    )

    return ArbiterDecision(
        bullet=tailored if winner == "tailored" else original,
        winner=winner,
        score_delta=score_delta,
        original_analysis=original_analysis,
        tailored_analysis=tailored_analysis,
        rejection_reasons=rejection_reasons,
        metric_guard_applied=guard_applied,
        original_metric_count=original_metrics,
        tailored_metric_count=tailored_metrics,
    )
