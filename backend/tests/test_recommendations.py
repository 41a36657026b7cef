"""Tests for recommendation generation."""

from models.schemas.analysis import ExperienceTier
from services.recommendations import generate_recommendations


def test_skill_advice_before_tier_advice():
    recs = generate_recommendations(["AWS", "Docker"], ExperienceTier.ENTRY)
    assert recs == [
        "Learn Docker for containerization to improve DevOps skills",
        "Get AWS certification to boost cloud computing expertise",
        "Focus on building a strong portfolio with personal projects",
        "Contribute to open-source projects to gain experience",
    ]


def test_skill_advice_fills_the_list():
    gap = ["Node.js", "TypeScript", "AWS", "Docker", "Kubernetes"]
    recs = generate_recommendations(gap, ExperienceTier.INTERMEDIATE)
    assert len(recs) == 4
    assert all("system design" not in r for r in recs)


def test_intermediate_tier_advice():
    recs = generate_recommendations([], ExperienceTier.INTERMEDIATE)
    assert recs == [
        "Consider learning system design and architecture patterns",
        "Develop leadership and mentoring skills",
    ]


def test_senior_without_gap_gets_nothing():
    assert generate_recommendations([], ExperienceTier.SENIOR) == []


def test_gap_names_match_exactly():
    recs = generate_recommendations(["docker", "aws"], ExperienceTier.SENIOR)
    assert recs == []


def test_never_more_than_four():
    gap = [f"Skill{i}" for i in range(100)] + ["Docker", "AWS", "TypeScript", "Node.js"]
    for tier in ExperienceTier:
        assert len(generate_recommendations(gap, tier)) <= 4
