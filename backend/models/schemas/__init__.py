"""Pydantic contracts shared by the content analysis pipeline and the arbiters."""

from models.schemas.arbiter_decision import ArbiterDecision, StageDropDetail
from models.schemas.arbiter_result import ArbiterResult
from models.schemas.content_analysis import ContentAnalysis
from models.schemas.stage_result import STAGE_KEYS, STAGE_NAMES, StageResult
from models.schemas.weight_profile import WeightProfile

__all__ = [
    "StageResult",
    "ContentAnalysis",
    "WeightProfile",
    "StageDropDetail",
    "ArbiterDecision",
    "ArbiterResult",
    "STAGE_KEYS",
    "STAGE_NAMES",
]
