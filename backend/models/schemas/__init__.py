"""Pydantic contracts for resume analysis and job postings."""

from models.schemas.analysis import AnalysisResult, ExperienceTier, JobMatch, Profile
from models.schemas.job import JobPosting, JobRequirement

__all__ = [
    "AnalysisResult",
    "ExperienceTier",
    "JobMatch",
    "JobPosting",
    "JobRequirement",
    "Profile",
]
