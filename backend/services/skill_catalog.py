"""In-demand skill reference data and resume coverage against it."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.fit_scorer import has_skill


class MarketSkill(BaseModel):
    name: str
    category: str
    level: str  # entry | intermediate | senior
    demand: str  # high | medium


MARKET_SKILLS: tuple[MarketSkill, ...] = tuple(
    MarketSkill(name=name, category=category, level=level, demand=demand)
    for name, category, level, demand in (
        ("JavaScript", "Programming", "entry", "high"),
        ("React", "Frontend", "intermediate", "high"),
        ("Node.js", "Backend", "intermediate", "high"),
        ("Python", "Programming", "entry", "high"),
        ("TypeScript", "Programming", "intermediate", "high"),
        ("Express.js", "Backend", "intermediate", "medium"),
        ("MongoDB", "Database", "intermediate", "medium"),
        ("PostgreSQL", "Database", "intermediate", "high"),
        ("Docker", "DevOps", "intermediate", "high"),
        ("Kubernetes", "DevOps", "senior", "high"),
        ("AWS", "Cloud", "intermediate", "high"),
        ("Azure", "Cloud", "intermediate", "medium"),
        ("Git", "Tools", "entry", "high"),
        ("Jenkins", "DevOps", "intermediate", "medium"),
        ("Redis", "Database", "intermediate", "medium"),
        ("GraphQL", "Backend", "intermediate", "medium"),
        ("Vue.js", "Frontend", "intermediate", "medium"),
        ("Angular", "Frontend", "intermediate", "medium"),
        ("Java", "Programming", "entry", "high"),
        ("Spring Boot", "Backend", "intermediate", "medium"),
    )
)

CATEGORIES = ["Programming", "Frontend", "Backend", "Database", "DevOps", "Cloud", "Tools"]
LEVELS = ["entry", "intermediate", "senior"]


class SkillCoverage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    has_skills: list[MarketSkill] = []
    missing_skills: list[MarketSkill] = []
    skill_gap_count: int = 0
    completeness: float = 0.0  # percent of market skills present


def skill_coverage(
    extracted_skills: Sequence[str],
    market: Sequence[MarketSkill] = MARKET_SKILLS,
) -> SkillCoverage:
    """Split market skills into those the resume shows and those it lacks."""
    has = [skill for skill in market if has_skill(extracted_skills, skill.name)]
    missing = [skill for skill in market if not has_skill(extracted_skills, skill.name)]
    return SkillCoverage(
        has_skills=has,
        missing_skills=missing,
        skill_gap_count=len(missing),
        completeness=round(len(has) / len(market) * 100, 1) if market else 0.0,
    )
