"""Fixed stage-weight profiles and the role -> profile mapping.

    Profile               indicators  ats   recruiterUX  pmIntelligence
    default                  0.20     0.30     0.20          0.30
    pm_specialist            0.20     0.25     0.20          0.35
    general_professional     0.30     0.35     0.30          0.05
"""

import logging

from models.schemas.weight_profile import WeightProfile
from services.role_classifier import is_product_role, normalize_title

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS = WeightProfile(
    name="default",
    indicators=0.20,
    ats=0.30,
    recruiter_ux=0.20,
    pm_intelligence=0.30,
)

PM_SPECIALIST_WEIGHTS = WeightProfile(
    name="pm_specialist",
    indicators=0.20,
    ats=0.25,
    recruiter_ux=0.20,
    pm_intelligence=0.35,
)

GENERAL_PROFESSIONAL_WEIGHTS = WeightProfile(
    name="general_professional",
    indicators=0.30,
    ats=0.35,
    recruiter_ux=0.30,
    pm_intelligence=0.05,
)

# Default profile under its original name
STAGE_WEIGHTS = DEFAULT_WEIGHTS

WEIGHT_PROFILES: tuple[WeightProfile, ...] = (
    DEFAULT_WEIGHTS,
    PM_SPECIALIST_WEIGHTS,
    GENERAL_PROFESSIONAL_WEIGHTS,
)


def get_weights_for_role(title: str | None = None) -> WeightProfile:
    """Select the weight profile for a target job title.

    No title (or a blank one) -> default; a product role -> PM specialist;
    anything else -> general professional.
    """
    if not normalize_title(title):
        profile = DEFAULT_WEIGHTS
    elif is_product_role(title):
        profile = PM_SPECIALIST_WEIGHTS
    else:
        profile = GENERAL_PROFESSIONAL_WEIGHTS
    logger.debug("Weight profile for title %r: %s", title, profile.name)
    return profile
