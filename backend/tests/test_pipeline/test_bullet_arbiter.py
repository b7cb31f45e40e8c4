"""Tests for the Bullet Arbiter: decisions, metric guard, rejection reasons."""

import pytest

from services.metric_detector import count_metrics
from services.pipeline.bullet_arbiter import arbitrate_bullet

STAGE_NAMES = {"Cold Indicators", "ATS Compatibility", "Recruiter UX", "PM Intelligence"}

WEAK = "Improved the onboarding process"
STRONG = (
    "Led cross-functional team to redesign onboarding using RICE prioritization, "
    "increasing activation by 35% for 10K users"
)


class TestDecisions:
    def test_identical_bullets(self):
        text = "Led product strategy for 50K users, increasing DAU by 35%"
        decision = arbitrate_bullet(text, text)
        assert decision.winner == "tailored"
        assert decision.bullet == text
        assert decision.score_delta == 0
        assert decision.rejection_reasons == []
        assert decision.metric_guard_applied is False

    def test_tailored_improvement_wins(self):
        decision = arbitrate_bullet(
            "Built a feature",
            "Led feature launch for analytics platform, increasing user adoption by 30%",
        )
        assert decision.winner == "tailored"
        assert decision.score_delta > 0

    def test_tailored_preserving_metric_and_adding_context_wins(self):
        original = "Increased retention by 40%"
        tailored = (
            "Led cross-functional team to solve customer churn problem, increasing user "
            "retention by 40% through data-driven A/B testing"
        )
        decision = arbitrate_bullet(original, tailored)
        assert decision.winner == "tailored"
        assert decision.bullet == tailored
        assert decision.score_delta > 0

    def test_lower_scoring_tailored_loses_without_guard(self):
        original = "Drove revenue growth and improved customer retention across enterprise clients"
        decision = arbitrate_bullet(original, "Helped with some business stuff")
        assert decision.metric_guard_applied is False
        assert decision.winner == "original"
        assert decision.bullet == original
        assert decision.score_delta < 0

    def test_special_characters(self):
        decision = arbitrate_bullet(
            "Led {team} <project> with |stakeholders|",
            "Led team project with stakeholders improving retention by 30%",
        )
        assert decision.winner == "tailored"

    def test_deterministic(self):
        results = [
            arbitrate_bullet(
                "Managed the product roadmap",
                "Led roadmap strategy for analytics platform, resulting in 35% DAU increase",
            )
            for _ in range(5)
        ]
        assert len({r.winner for r in results}) == 1
        assert len({r.score_delta for r in results}) == 1
        assert all(r == results[0] for r in results)


class TestMetricGuard:
    @pytest.mark.parametrize(
        "original, tailored",
        [
            (
                "Increased user retention by 40% through targeted onboarding improvements",
                "Improved user retention through targeted onboarding improvements",
            ),
            (
                "Generated $2.3M ARR through data-driven pricing strategy",
                "Generated revenue through data-driven pricing strategy",
            ),
            (
                "Launched analytics platform serving 50K users with real-time dashboards",
                "Launched analytics platform with real-time dashboards",
            ),
            (
                "Delivered 3x improvement in page load speed through infrastructure optimization",
                "Delivered improvement in page load speed through infrastructure optimization",
            ),
            (
                "Delivered 3x-faster page loads through infrastructure optimization",
                "Led infrastructure optimization delivering faster page loads",
            ),
        ],
        ids=["percentage", "currency", "user-count", "multiplier", "hyphenated-multiplier"],
    )
    def test_stripped_metric_keeps_original(self, original, tailored):
        decision = arbitrate_bullet(original, tailored)
        assert decision.winner == "original"
        assert decision.bullet == original
        assert decision.metric_guard_applied is True
        assert decision.tailored_metric_count < decision.original_metric_count

    def test_guard_overrides_higher_score(self):
        # Tailored text is far stronger on every stage but drops one of two metrics
        original = "Cut costs 10% for 200 patients"
        tailored = (
            "Led cross-functional team to solve staffing problem, reducing overtime "
            "costs by 10% through data-driven scheduling"
        )
        assert count_metrics(tailored) < count_metrics(original)
        decision = arbitrate_bullet(original, tailored)
        assert decision.score_delta > 0
        assert decision.winner == "original"
        assert decision.bullet == original

    def test_percentage_removal_flags_ats_drop(self):
        decision = arbitrate_bullet(
            "Increased user retention by 40% through targeted onboarding improvements",
            "Improved user retention through targeted onboarding improvements",
        )
        assert any(r.stage in ("ats", "indicators") for r in decision.rejection_reasons)


class TestRejectionReasons:
    def test_fields_on_degraded_bullet(self):
        decision = arbitrate_bullet(
            "Led cross-functional team of 12, increasing customer retention by 40% "
            "and generating $1.5M in savings",
            "Was responsible for helping with various team projects",
        )
        assert decision.winner == "original"
        assert decision.rejection_reasons
        for reason in decision.rejection_reasons:
            assert reason.stage_name in STAGE_NAMES
            assert reason.drop > 0
            assert reason.original_score > reason.tailored_score
            assert reason.drop == reason.original_score - reason.tailored_score

    def test_ats_drop(self):
        decision = arbitrate_bullet(
            "Launched analytics platform for 10K users with 25% engagement lift",
            "Various analytics work was done by the team over several months",
        )
        ats = next(r for r in decision.rejection_reasons if r.stage == "ats")
        assert ats.stage_name == "ATS Compatibility"

    def test_pm_intelligence_drop(self):
        decision = arbitrate_bullet(
            "Led cross-functional team to solve customer churn problem, increased user "
            "retention by 40% through data-driven decisions",
            "Worked on retention",
        )
        pm = next(r for r in decision.rejection_reasons if r.stage == "pmIntelligence")
        assert pm.stage_name == "PM Intelligence"

    def test_cold_indicators_drop(self):
        decision = arbitrate_bullet(
            "Drove revenue growth and improved customer retention across enterprise clients",
            "Helped with some business stuff",
        )
        indicators = next(r for r in decision.rejection_reasons if r.stage == "indicators")
        assert indicators.stage_name == "Cold Indicators"

    def test_recruiter_ux_drop(self):
        decision = arbitrate_bullet(
            "Increased revenue 40% by redesigning checkout flow for 50K customers",
            "Was responsible for participating in various checkout-related meetings and "
            "discussions about potential improvements to the flow that might eventually "
            "help with revenue if implemented correctly and approved by stakeholders and management",
        )
        assert decision.winner == "original"
        assert any(r.stage == "recruiterUX" for r in decision.rejection_reasons)

    def test_reasons_follow_stage_order(self):
        decision = arbitrate_bullet(
            "Led cross-functional team to solve customer churn problem, increased user "
            "retention by 40% through data-driven decisions, resulting in $1.2M savings",
            "Helped with team stuff",
        )
        order = ["indicators", "ats", "recruiterUX", "pmIntelligence"]
        stages = [r.stage for r in decision.rejection_reasons]
        assert stages == sorted(stages, key=order.index)
        assert len(stages) >= 2
        assert decision.score_delta < -20

    def test_weak_to_strong_improves_most_stages(self):
        decision = arbitrate_bullet(
            "Managed the product roadmap",
            "Led product roadmap strategy using RICE framework, shipping 15 features "
            "resulting in 25% revenue growth across enterprise stakeholders",
        )
        assert decision.winner == "tailored"
        improved = sum(
            1
            for key in ("indicators", "ats", "recruiterUX", "pmIntelligence")
            if decision.tailored_analysis.stage(key).score > decision.original_analysis.stage(key).score
        )
        assert improved >= 3


class TestRoleWeighting:
    def test_product_role(self):
        decision = arbitrate_bullet(WEAK, STRONG, "Senior Product Manager")
        assert decision.winner == "tailored"
        assert decision.score_delta > 0
        assert decision.tailored_analysis.profile == "pm_specialist"

    def test_non_product_role_dampens_pm_stage(self):
        pm = arbitrate_bullet(WEAK, STRONG, "Senior Product Manager")
        nurse = arbitrate_bullet(WEAK, STRONG, "Registered Nurse")

        assert nurse.tailored_analysis.pm_intelligence.score == pm.tailored_analysis.pm_intelligence.score
        assert nurse.tailored_analysis.profile == "general_professional"
        assert nurse.score_delta <= pm.score_delta


class TestEdgeCases:
    def test_empty_strings(self):
        decision = arbitrate_bullet("", "")
        assert decision.winner == "tailored"
        assert decision.score_delta == 0
        assert decision.rejection_reasons == []

    def test_none_inputs(self):
        decision = arbitrate_bullet(None, None)
        assert decision.bullet == ""

    def test_very_long_bullet(self):
        long_bullet = "Led " * 500 + "team of 50 users with 30% improvement"
        decision = arbitrate_bullet(long_bullet, "Short bullet")
        assert decision.winner == "original"
        assert decision.metric_guard_applied is True

    def test_wire_shape(self):
        dumped = arbitrate_bullet(WEAK, STRONG).model_dump(by_alias=True)
        assert {"bullet", "winner", "scoreDelta", "originalAnalysis",
                "tailoredAnalysis", "rejectionReasons"} <= set(dumped)
