from services.skill_catalog import MARKET_SKILLS, skill_coverage


def test_coverage_uses_containment():
    coverage = skill_coverage(["JavaScript", "ReactJS"])
    assert {s.name for s in coverage.has_skills} == {"JavaScript", "React", "Java"}
    assert coverage.skill_gap_count == len(MARKET_SKILLS) - 3
    assert coverage.completeness == 15.0


def test_coverage_empty():
    coverage = skill_coverage([])
    assert coverage.has_skills == []
    assert coverage.skill_gap_count == len(MARKET_SKILLS)
    assert coverage.completeness == 0.0


def test_coverage_serializes_camel_case():
    dumped = skill_coverage(["Docker"]).model_dump(by_alias=True)
    assert dumped["skillGapCount"] == len(MARKET_SKILLS) - 1
    assert dumped["hasSkills"][0]["name"] == "Docker"
