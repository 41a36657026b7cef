"""Orchestrator: Gemini analysis with a deterministic heuristic fallback.

Flow per request:
1. No Gemini key configured            -> heuristic engine
2. Gemini call fails                   -> heuristic engine
3. Response has no valid JSON payload  -> heuristic engine
4. Otherwise the validated AI result is returned as-is

The heuristic engine (skill extraction, experience tiering, fit scoring,
recommendations) depends on nothing external and always produces a result.
"""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from models.schemas.analysis import AnalysisResult, Profile
from models.schemas.job import JobRequirement
from services import ai_response, prompt_builder
from services.errors import AnalysisError, ConfigurationMissing
from services.experience_classifier import classify_experience
from services.fit_scorer import compute_skill_gap, score_job
from services.gemini_client import TextGenerationService
from services.recommendations import generate_recommendations
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class Validated(Generic[ResultT]):
    """The Gemini response parsed and validated."""

    result: ResultT
    method = "ai"
    degraded = False


@dataclass(frozen=True)
class Fallback(Generic[ResultT]):
    """The heuristic engine produced the result; reason says why."""

    result: ResultT
    reason: str
    method = "heuristic"
    degraded = True


Outcome = Validated[ResultT] | Fallback[ResultT]


def heuristic_analysis(
    resume_text: str,
    jobs: Sequence[JobRequirement],
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Score the resume against every job using local rules only."""
    skills = extract_skills(resume_text)
    tier = classify_experience(resume_text)
    skill_gap = compute_skill_gap(skills, jobs)

    return AnalysisResult(
        experience_tier=tier,
        extracted_skills=skills,
        job_matches=[score_job(skills, job, rng) for job in jobs],
        skill_gap=skill_gap,
        recommendations=generate_recommendations(skill_gap, tier),
    )


def heuristic_profile(resume_text: str) -> Profile:
    return Profile(
        skills=extract_skills(resume_text),
        experience_tier=classify_experience(resume_text),
    )


class ResumeAnalyzer:
    """Entry point for resume analysis.

    text_service is the generative backend (normally a GeminiClient); pass
    None to always use the heuristic engine. rng feeds the fit-score jitter.
    """

    def __init__(
        self,
        text_service: TextGenerationService | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.text_service = text_service
        self.rng = rng

    @property
    def ai_enabled(self) -> bool:
        return self.text_service is not None and self.text_service.is_configured

    async def _attempt(
        self,
        prompt: str,
        parse: Callable[[str], ResultT],
        fallback: Callable[[], ResultT],
    ) -> Outcome[ResultT]:
        if not self.ai_enabled:
            logger.info("Gemini not configured, using heuristic analysis")
            return Fallback(fallback(), reason="gemini not configured")

        try:
            raw = await self.text_service.generate_text(prompt)
            return Validated(parse(raw))
        except ConfigurationMissing as e:
            logger.info("Gemini not configured, using heuristic analysis: %s", e)
            reason = "gemini not configured"
        except AnalysisError as e:
            logger.warning("Gemini analysis unusable, using heuristic analysis: %s", e)
            reason = str(e)
        except Exception as e:
            logger.exception("Unexpected error during Gemini analysis")
            reason = f"unexpected error: {e}"

        return Fallback(fallback(), reason=reason)

    async def run_analysis(
        self, resume_text: str, jobs: Sequence[JobRequirement] | None
    ) -> Outcome[AnalysisResult]:
        jobs = list(jobs or [])
        return await self._attempt(
            prompt_builder.build_analysis_prompt(resume_text, jobs),
            ai_response.parse_analysis,
            lambda: heuristic_analysis(resume_text, jobs, self.rng),
        )

    async def run_profile(self, resume_text: str) -> Outcome[Profile]:
        return await self._attempt(
            prompt_builder.build_profile_prompt(resume_text),
            ai_response.parse_profile,
            lambda: heuristic_profile(resume_text),
        )

    async def analyze_against_jobs(
        self, resume_text: str, jobs: Sequence[JobRequirement] | None
    ) -> AnalysisResult:
        """Analyze a resume against jobs; never raises for AI-side failures."""
        return (await self.run_analysis(resume_text, jobs)).result

    async def extract_profile(self, resume_text: str) -> Profile:
        """Skills and experience tier only, no job context."""
        return (await self.run_profile(resume_text)).result
