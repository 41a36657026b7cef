"""Actionable advice derived from the skill gap and experience tier."""

from collections.abc import Collection

from models.schemas.analysis import MAX_RECOMMENDATIONS, ExperienceTier

# Checked in this order; matched against the gap by exact name
SKILL_ADVICE: tuple[tuple[str, str], ...] = (
    ("Docker", "Learn Docker for containerization to improve DevOps skills"),
    ("AWS", "Get AWS certification to boost cloud computing expertise"),
    ("TypeScript", "Learn TypeScript to write more robust JavaScript applications"),
    ("Node.js", "Master Node.js for full-stack development opportunities"),
)

TIER_ADVICE: dict[ExperienceTier, tuple[str, ...]] = {
    ExperienceTier.ENTRY: (
        "Focus on building a strong portfolio with personal projects",
        "Contribute to open-source projects to gain experience",
    ),
    ExperienceTier.INTERMEDIATE: (
        "Consider learning system design and architecture patterns",
        "Develop leadership and mentoring skills",
    ),
}


def generate_recommendations(
    skill_gap: Collection[str], tier: ExperienceTier
) -> list[str]:
    """Skill-specific advice first, then tier advice, at most four entries."""
    recommendations = [advice for skill, advice in SKILL_ADVICE if skill in skill_gap]
    recommendations.extend(TIER_ADVICE.get(tier, ()))
    return recommendations[:MAX_RECOMMENDATIONS]
