"""Per-stage output of the four content analyzers."""

from typing import Literal

from pydantic import Field

from models.schemas.contract import ContractModel

StageKey = Literal["indicators", "ats", "recruiterUX", "pmIntelligence"]

# Evaluation and reporting order for the four stages
STAGE_KEYS: tuple[StageKey, ...] = ("indicators", "ats", "recruiterUX", "pmIntelligence")

STAGE_NAMES: dict[str, str] = {
    "indicators": "Cold Indicators",
    "ats": "ATS Compatibility",
    "recruiterUX": "Recruiter UX",
    "pmIntelligence": "PM Intelligence",
}


class StageResult(ContractModel):
    """Score for one stage plus the evidence that produced it."""
    score: int = Field(ge=0, le=100)
    details: list[str] = Field(min_length=1)  # always at least one evidence line
