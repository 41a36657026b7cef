from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_ids: list[str] | None = Field(None, description="Catalog job ids; all jobs when omitted")


class QuickProfileRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class SkillCoverageRequest(BaseModel):
    skills: list[str] = Field(default_factory=list, max_length=500)
