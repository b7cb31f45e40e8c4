"""Per-bullet arbitration output."""

from typing import Literal

from pydantic import Field

from models.schemas.content_analysis import ContentAnalysis
from models.schemas.contract import ContractModel
from models.schemas.stage_result import StageKey

Winner = Literal["original", "tailored"]


class StageDropDetail(ContractModel):
    """A stage where the original outscored the tailored text."""
    stage: StageKey
    stage_name: str
    original_score: int
    tailored_score: int
    drop: int = Field(gt=0)  # original_score - tailored_score


class ArbiterDecision(ContractModel):
    """Which version of a bullet to keep, and why."""
    bullet: str
    winner: Winner
    score_delta: int  # tailored total - original total, before any guard override
    original_analysis: ContentAnalysis
    tailored_analysis: ContentAnalysis
    rejection_reasons: list[StageDropDetail] = []

    # Metric-preservation guard bookkeeping
    metric_guard_applied: bool = False
    original_metric_count: int = 0
    tailored_metric_count: int = 0

    @property
    def chosen_analysis(self) -> ContentAnalysis:
        if self.winner == "tailored":
            return self.tailored_analysis
        return self.original_analysis
