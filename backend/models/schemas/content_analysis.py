"""Four-stage analysis of a single bullet."""

from pydantic import Field

from models.schemas.contract import ContractModel
from models.schemas.stage_result import StageResult


class ContentAnalysis(ContractModel):
    """Stage results plus the role-weighted total (0-100).

    Stage scores depend on the text only; ``total_score`` and ``profile``
    depend on the weight profile selected for the target role.
    """
    indicators: StageResult
    ats: StageResult
    recruiter_ux: StageResult = Field(alias="recruiterUX")
    pm_intelligence: StageResult
    total_score: int = Field(ge=0, le=100)
    profile: str = "default"

    def stage(self, key: str) -> StageResult:
        """Look up a stage result by its wire key (``recruiterUX`` etc.)."""
        if key == "indicators":
            return self.indicators
        if key == "ats":
            return self.ats
        if key == "recruiterUX":
            return self.recruiter_ux
        if key == "pmIntelligence":
            return self.pm_intelligence
        raise KeyError(key)
