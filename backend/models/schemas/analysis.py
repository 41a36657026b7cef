"""Resume analysis contracts shared by the AI path and the heuristic engine.

Field aliases follow the camelCase JSON the Gemini prompts ask for, so a
model response can be validated straight into these classes. Skill
collections are duplicate-free lists that keep first-seen order.
"""

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

MAX_RECOMMENDATIONS = 4


class ExperienceTier(str, Enum):
    """Ordinal candidate seniority: entry < intermediate < senior."""

    ENTRY = "entry"
    INTERMEDIATE = "intermediate"
    SENIOR = "senior"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)

    @property
    def label(self) -> str:
        """Name used in API payloads and prompts (fresher/intermediate/professional)."""
        return _EXTERNAL_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "ExperienceTier":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            tier = _LABEL_LOOKUP.get(value.strip().lower())
            if tier is not None:
                return tier
        raise ValueError(f"Unknown experience level: {value!r}")

    def __lt__(self, other):
        if not isinstance(other, ExperienceTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ExperienceTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ExperienceTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ExperienceTier):
            return NotImplemented
        return self.rank >= other.rank


_TIER_ORDER = [ExperienceTier.ENTRY, ExperienceTier.INTERMEDIATE, ExperienceTier.SENIOR]

_EXTERNAL_LABELS = {
    ExperienceTier.ENTRY: "fresher",
    ExperienceTier.INTERMEDIATE: "intermediate",
    ExperienceTier.SENIOR: "professional",
}

_LABEL_LOOKUP = {
    **{tier.value: tier for tier in ExperienceTier},
    **{label: tier for tier, label in _EXTERNAL_LABELS.items()},
}


def unique(values: list[str]) -> list[str]:
    """Drop exact duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(values))


def _round_score(value: object) -> object:
    if isinstance(value, float):
        return round(value)
    return value


Tier = Annotated[
    ExperienceTier,
    BeforeValidator(ExperienceTier.parse),
    PlainSerializer(lambda tier: tier.label, return_type=str),
]
SkillList = Annotated[list[str], AfterValidator(unique)]
FitScore = Annotated[int, BeforeValidator(_round_score), Field(ge=0, le=100)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class JobMatch(_CamelModel):
    job_id: str
    fit_score: FitScore
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    reasoning: str = ""


class AnalysisResult(_CamelModel):
    experience_tier: Tier = Field(alias="experienceLevel")
    extracted_skills: SkillList
    job_matches: list[JobMatch]
    skill_gap: SkillList = Field(default_factory=list)
    recommendations: Annotated[
        list[str], AfterValidator(lambda items: items[:MAX_RECOMMENDATIONS])
    ] = Field(default_factory=list)


class Profile(_CamelModel):
    """Skills and seniority read from a resume, without any job context."""

    skills: SkillList
    experience_tier: Tier = Field(alias="experienceLevel")
