"""Prompt templates for Gemini API calls."""

from collections.abc import Sequence

from models.schemas.job import JobRequirement


def _format_job(job: JobRequirement) -> str:
    return (
        f"Job ID: {job.id}\n"
        f"Title: {job.title}\n"
        f"Description: {job.description}\n"
        f"Requirements: {', '.join(job.requirements)}\n"
        f"Skills: {', '.join(job.skills)}"
    )


def build_analysis_prompt(resume_text: str, jobs: Sequence[JobRequirement]) -> str:
    """Call A: experience level, skills and per-job fit."""
    jobs_text = "\n---\n".join(_format_job(job) for job in jobs)

    return f"""You are an AI resume analyzer. Analyze the following resume against the provided job descriptions.

RESUME TEXT:
---
{resume_text}
---

JOB DESCRIPTIONS:
---
{jobs_text}
---

EXPERIENCE LEVEL:
- "fresher": 0-2 years of experience or recent graduate
- "intermediate": 2-5 years of experience
- "professional": 5+ years of experience

FIT SCORE RUBRIC:
- 80-100: Excellent match, most requirements met
- 60-79: Good match, some key requirements met
- 40-59: Moderate match, basic requirements met
- 0-39: Poor match, few requirements met

Extract all technical skills, programming languages, frameworks, tools and technologies in the resume.
For each job, list skills present in both the resume and the job as "matchedSkills" and required
skills not found in the resume as "missingSkills". "skillGap" holds the most important missing
skills across all jobs. "recommendations" holds up to 4 actionable pieces of advice.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "experienceLevel": "fresher|intermediate|professional",
  "extractedSkills": [<skills found in the resume>],
  "jobMatches": [
    {{
      "jobId": "<job id>",
      "fitScore": <integer 0-100>,
      "matchedSkills": [<skills>],
      "missingSkills": [<skills>],
      "reasoning": "<brief explanation of the fit score>"
    }}
  ],
  "skillGap": [<missing skills>],
  "recommendations": [<advice>]
}}"""


def build_profile_prompt(resume_text: str) -> str:
    """Call B: skills and experience level only."""
    return f"""Analyze the following resume text and extract key information.

RESUME TEXT:
---
{resume_text}
---

- Extract all technical skills, programming languages, frameworks, tools, and technologies
- Determine experience level from years of experience, job titles, and responsibility levels

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "skills": [<skills found in the resume>],
  "experienceLevel": "fresher|intermediate|professional"
}}"""
