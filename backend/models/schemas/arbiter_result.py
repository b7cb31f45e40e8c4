"""Batch arbitration output for a whole bullet list."""

from models.schemas.arbiter_decision import ArbiterDecision
from models.schemas.contract import ContractModel


class ArbiterResult(ContractModel):
    """Structured output of the Score Arbiter.

    Totals are sums of per-bullet ``total_score`` values, so a list of N
    bullets ranges over 0..100*N.
    """
    decisions: list[ArbiterDecision] = []
    optimised_bullets: list[str] = []
    original_total_score: int = 0
    optimised_total_score: int = 0
    methodology_preserved: bool = True

    tailored_kept: int = 0
    originals_restored: int = 0
