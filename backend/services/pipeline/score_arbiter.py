"""Score Arbiter: best-of-both optimisation over a whole bullet list.

Pairs the two lists by position, arbitrates each pair, and proves the
batch never regresses: the summed score of the chosen bullets must be at
least the summed score of the originals. The check is computed, not
assumed, so a misbehaving stage analyzer shows up as
``methodology_preserved=False`` instead of passing silently.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from config import settings
from models.schemas.arbiter_decision import ArbiterDecision
from models.schemas.arbiter_result import ArbiterResult
from services.pipeline.bullet_arbiter import arbitrate_bullet

logger = logging.getLogger(__name__)


def pair_bullets(
    originals: Sequence[str],
    tailored: Sequence[str],
) -> list[tuple[str, str]]:
    """Pair two bullet lists by index.

    A position missing from one side is filled from the other, so an
    unpaired bullet is compared against itself and keeps its score.
    """
    pairs: list[tuple[str, str]] = []
    for i in range(max(len(originals), len(tailored))):
        original = originals[i] if i < len(originals) else tailored[i]
        candidate = tailored[i] if i < len(tailored) else originals[i]
        pairs.append((original, candidate))
    return pairs


def _arbitrate_pairs(
    pairs: list[tuple[str, str]],
    title: str | None,
) -> list[ArbiterDecision]:
    workers = settings.arbiter_max_workers
    if workers <= 1 or len(pairs) <= 1:
        return [arbitrate_bullet(original, candidate, title) for original, candidate in pairs]

    # executor.map yields results in submission order
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda pair: arbitrate_bullet(pair[0], pair[1], title), pairs))


def score_arbiter(
    originals: Sequence[str] | None,
    tailored: Sequence[str] | None,
    title: str | None = None,
) -> ArbiterResult:
    """Arbitrate every original/tailored pair and aggregate the totals."""
    pairs = pair_bullets(list(originals or []), list(tailored or []))
    decisions = _arbitrate_pairs(pairs, title)

    original_total = sum(d.original_analysis.total_score for d in decisions)
    optimised_total = sum(d.chosen_analysis.total_score for d in decisions)
    tailored_kept = sum(1 for d in decisions if d.winner == "tailored")
    preserved = optimised_total >= original_total

    if preserved:
        logger.info(
            "Score arbiter: %d pairs, original=%d optimised=%d (kept %d tailored, restored %d originals)",
            len(decisions),
            original_total,
            optimised_total,
            tailored_kept,
            len(decisions) - tailored_kept,
        )
    else:
        logger.warning(
            "Score arbiter regressed: optimised total %d below original total %d",
            optimised_total,
            original_total,
        )

    return ArbiterResult(
        decisions=decisions,
        optimised_bullets=[d.bullet for d in decisions],
        original_total_score=original_total,
        optimised_total_score=optimised_total,
        methodology_preserved=preserved,
        tailored_kept=tailored_kept,
        originals_restored=len(decisions) - tailored_kept,
    )
