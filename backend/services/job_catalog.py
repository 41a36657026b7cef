"""Job postings available for resume matching.

Sources:
- "builtin": a fixed set of sample postings
- "csv": postings loaded from a CSV file (list columns are ";"-separated)
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from models.schemas.job import JobPosting
from services.errors import JobNotFound, UnsupportedJobSource

logger = logging.getLogger(__name__)

BUILTIN_JOBS: tuple[JobPosting, ...] = (
    JobPosting(
        id="1",
        title="Frontend Developer",
        company="Tech Corp",
        location="San Francisco, CA",
        description="We are looking for a skilled frontend developer to join our team.",
        requirements=[
            "3+ years of React experience",
            "Proficiency in JavaScript, HTML, CSS",
            "Experience with modern build tools",
            "Understanding of responsive design",
        ],
        salary="$80,000 - $120,000",
        experience_level="intermediate",
        skills=["React", "JavaScript", "HTML", "CSS", "Redux", "TypeScript"],
    ),
    JobPosting(
        id="2",
        title="Full Stack Developer",
        company="StartupXYZ",
        location="Remote",
        description="Join our fast-growing startup as a full stack developer.",
        requirements=[
            "2+ years of Node.js experience",
            "Database design and optimization",
            "API development and integration",
            "Cloud deployment experience",
        ],
        salary="$70,000 - $110,000",
        experience_level="intermediate",
        skills=["Node.js", "React", "MongoDB", "Express", "AWS", "Docker"],
    ),
    JobPosting(
        id="3",
        title="Junior Software Engineer",
        company="BigTech Inc",
        location="Austin, TX",
        description="Entry-level position for new graduates.",
        requirements=[
            "Computer Science degree or equivalent",
            "Knowledge of at least one programming language",
            "Problem-solving skills",
            "Willingness to learn",
        ],
        salary="$60,000 - $80,000",
        experience_level="entry",
        skills=["JavaScript", "Python", "Git", "SQL"],
    ),
    JobPosting(
        id="4",
        title="Senior Backend Engineer",
        company="Enterprise Solutions",
        location="New York, NY",
        description="Lead backend development for enterprise applications.",
        requirements=[
            "5+ years of backend development",
            "Microservices architecture",
            "Database optimization",
            "Team leadership experience",
        ],
        salary="$120,000 - $160,000",
        experience_level="senior",
        skills=["Node.js", "Python", "PostgreSQL", "Docker", "Kubernetes", "AWS"],
    ),
    JobPosting(
        id="5",
        title="DevOps Engineer",
        company="Cloud First",
        location="Seattle, WA",
        description="Manage infrastructure and deployment pipelines.",
        requirements=[
            "3+ years of DevOps experience",
            "Container orchestration",
            "CI/CD pipeline setup",
            "Cloud platform expertise",
        ],
        salary="$90,000 - $130,000",
        experience_level="intermediate",
        skills=["Docker", "Kubernetes", "AWS", "Jenkins", "Terraform", "Linux"],
    ),
    JobPosting(
        id="6",
        title="Embedded Systems Engineer",
        company="Volt Labs",
        location="Denver, CO",
        description="Work on IoT and embedded systems projects.",
        requirements=[
            "Arduino/Microcontroller experience",
            "C/C++ programming",
            "Electronics knowledge",
        ],
        experience_level="intermediate",
        skills=["Arduino", "C++", "Electronics", "Microcontrollers", "Sensors", "IoT"],
    ),
)

CSV_LIST_SEPARATOR = ";"


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(CSV_LIST_SEPARATOR) if item.strip()]


def load_jobs_csv(path: str | Path) -> list[JobPosting]:
    """Read postings from a CSV file with a header row.

    Required column: id. Optional: title, company, location, description,
    requirements, skills, salary, experience_level.
    """
    jobs: list[JobPosting] = []
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            if not (row.get("id") or "").strip():
                logger.warning("Skipping CSV job row without id: %s", row)
                continue
            jobs.append(
                JobPosting(
                    id=row["id"].strip(),
                    title=(row.get("title") or "").strip(),
                    company=(row.get("company") or "").strip(),
                    location=(row.get("location") or "").strip(),
                    description=(row.get("description") or "").strip(),
                    requirements=_split_list(row.get("requirements")),
                    skills=_split_list(row.get("skills")),
                    salary=(row.get("salary") or "").strip() or None,
                    experience_level=(row.get("experience_level") or "intermediate").strip(),
                    source="csv",
                )
            )
    logger.info("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def _matches_query(job: JobPosting, query: str) -> bool:
    query = query.lower()
    haystack = [job.title, job.description, *job.skills]
    return any(query in field.lower() for field in haystack)


class JobCatalog:
    """Ordered, read-only collection of job postings."""

    def __init__(self, jobs: Sequence[JobPosting] = BUILTIN_JOBS) -> None:
        self._jobs = list(jobs)

    @classmethod
    def from_source(cls, source: str, csv_path: str = "") -> "JobCatalog":
        if source == "builtin":
            return cls()
        if source == "csv":
            if not csv_path:
                raise UnsupportedJobSource("CSV job source needs a file path")
            return cls(load_jobs_csv(csv_path))
        raise UnsupportedJobSource(f"Unsupported job source: {source}")

    def list_jobs(self, query: str | None = None, limit: int | None = None) -> list[JobPosting]:
        jobs = [job for job in self._jobs if not query or _matches_query(job, query)]
        return jobs if limit is None else jobs[:max(0, limit)]

    def get_job(self, job_id: str) -> JobPosting:
        for job in self._jobs:
            if job.id == job_id:
                return job
        raise JobNotFound(job_id)

    def get_jobs(self, job_ids: Sequence[str] | None = None) -> list[JobPosting]:
        """Jobs by id, in the requested order; all jobs when no ids are given."""
        if not job_ids:
            return list(self._jobs)
        return [self.get_job(job_id) for job_id in job_ids]
