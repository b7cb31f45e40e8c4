"""Tests for Stage 2: ATS Compatibility."""

from services.pipeline.s2_ats_compatibility import NO_METRIC_CAP, analyze_ats


def test_full_marks():
    result = analyze_ats("Launched analytics platform for 10K users with 25% engagement lift")
    assert result.score == 100
    assert result.details[0] == 'Starts with action verb: "launched"'


def test_missing_metric_is_capped():
    result = analyze_ats("Improved user retention through targeted onboarding improvements")
    assert result.score == NO_METRIC_CAP
    assert any("Capped" in d for d in result.details)


def test_metric_removal_costs_points():
    with_metric = analyze_ats("Increased user retention by 40% through targeted onboarding improvements")
    without = analyze_ats("Improved user retention through targeted onboarding improvements")
    assert with_metric.score - without.score >= 50


def test_decoration_penalty():
    clean = analyze_ats("Led team project with stakeholders")
    decorated = analyze_ats("Led {team} <project> with |stakeholders|")
    assert decorated.score < clean.score
    assert "Contains characters that may confuse ATS parsers" in decorated.details


def test_passive_phrasing_penalty():
    result = analyze_ats("Was responsible for helping with various team projects")
    assert result.score == 10
    assert any(d.startswith("Passive or diffuse phrasing") for d in result.details)


def test_long_bullet_length_penalty():
    bullet = "Led migration increasing throughput by 30% " + "across regional teams " * 22
    result = analyze_ats(bullet)
    assert 35 + 35 < result.score < 100
    assert any(d.startswith("Length issue") for d in result.details)


def test_empty_text():
    result = analyze_ats("")
    assert result.score == 0
    assert result.details
