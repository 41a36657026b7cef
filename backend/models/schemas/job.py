"""Job postings the resume is scored against."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobRequirement(BaseModel):
    """What the scoring engine needs to know about a job."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str
    title: str = ""
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)  # required skill tokens


class JobPosting(JobRequirement):
    """Catalog entry: a JobRequirement plus listing details."""

    company: str = ""
    location: str = ""
    salary: str | None = None
    experience_level: str = "intermediate"  # entry | intermediate | senior
    source: str = "builtin"
