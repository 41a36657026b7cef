"""Heuristic job-fit scoring against a job's required skills."""

import random
from collections.abc import Iterable, Sequence

from models.schemas.analysis import JobMatch
from models.schemas.job import JobRequirement

# Fallback scores never claim a perfect or a hopeless fit
MIN_FIT_SCORE = 40
MAX_FIT_SCORE = 90
JITTER_RANGE = 10.0


def has_skill(extracted_skills: Iterable[str], required_skill: str) -> bool:
    """True if any extracted skill contains the required one, ignoring case.

    Containment is one-way: extracted "ReactJS" satisfies required "React",
    but extracted "React" does not satisfy required "React Native".
    """
    required = required_skill.lower()
    return any(required in skill.lower() for skill in extracted_skills)


def _fit_label(score: float) -> str:
    if score > 75:
        return "strong"
    if score > 50:
        return "good"
    return "moderate"


def score_job(
    extracted_skills: Sequence[str],
    job: JobRequirement,
    rng: random.Random | None = None,
) -> JobMatch:
    """Score one job: skill coverage percentage plus jitter, clamped to 40-90."""
    rng = rng or random
    matched = [skill for skill in job.skills if has_skill(extracted_skills, skill)]
    missing = [skill for skill in job.skills if not has_skill(extracted_skills, skill)]

    coverage = len(matched) / len(job.skills) * 100 if job.skills else 0.0
    raw = coverage + rng.random() * JITTER_RANGE
    clamped = min(MAX_FIT_SCORE, max(MIN_FIT_SCORE, raw))

    return JobMatch(
        job_id=job.id,
        fit_score=round(clamped),
        matched_skills=matched,
        missing_skills=missing,
        reasoning=(
            f"Based on your {len(matched)} matching skills out of {len(job.skills)} required, "
            f"you have a {_fit_label(clamped)} fit for this role."
        ),
    )


def compute_skill_gap(
    extracted_skills: Sequence[str], jobs: Sequence[JobRequirement]
) -> list[str]:
    """Required skills across all jobs that the candidate lacks, first-seen order."""
    required = dict.fromkeys(skill for job in jobs for skill in job.skills)
    return [skill for skill in required if not has_skill(extracted_skills, skill)]
