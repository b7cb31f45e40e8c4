"""Role-dependent stage weights."""

import math
from typing import Literal

from pydantic import Field, model_validator

from models.schemas.contract import ContractModel

ProfileName = Literal["default", "pm_specialist", "general_professional"]

WEIGHT_SUM_TOLERANCE = 1e-10


class WeightProfile(ContractModel):
    """Four stage weights summing to 1.0.

    Validated at construction, so a mistyped profile constant fails at
    import time instead of skewing scores at runtime.
    """
    name: ProfileName
    indicators: float = Field(ge=0.0, le=1.0)
    ats: float = Field(ge=0.0, le=1.0)
    recruiter_ux: float = Field(ge=0.0, le=1.0, alias="recruiterUX")
    pm_intelligence: float = Field(ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_sum(self) -> "WeightProfile":
        total = self.total()
        if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=WEIGHT_SUM_TOLERANCE):
            raise ValueError(
                f"Weight profile '{self.name}' sums to {total!r}, expected 1.0"
            )
        return self

    def total(self) -> float:
        return self.indicators + self.ats + self.recruiter_ux + self.pm_intelligence

    def weight_for(self, stage: str) -> float:
        """Weight for a stage wire key (``indicators``, ``ats``, ``recruiterUX``, ``pmIntelligence``)."""
        weights = {
            "indicators": self.indicators,
            "ats": self.ats,
            "recruiterUX": self.recruiter_ux,
            "pmIntelligence": self.pm_intelligence,
        }
        return weights[stage]
