from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.analysis import AnalysisResult, Profile
from models.schemas.job import JobPosting
from services.skill_catalog import MarketSkill

ScoringMethod = Literal["ai", "heuristic"]


class _CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisResponse(AnalysisResult):
    degraded: bool = False
    scoring_method: ScoringMethod = "ai"


class ProfileResponse(Profile):
    degraded: bool = False
    scoring_method: ScoringMethod = "ai"
    text_length: int = 0


class JobListResponse(_CamelResponse):
    jobs: list[JobPosting] = []
    total: int = 0


class SkillsResponse(_CamelResponse):
    skills: list[MarketSkill] = []
    categories: list[str] = []
    levels: list[str] = []
    total_skills: int = 0
    high_demand_skills: int = 0
