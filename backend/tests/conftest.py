"""Shared test configuration, sample resumes and a scripted text service."""

import copy
import json

import pytest

SENIOR_RESUME = """
Jane Smith
Senior Software Engineer

Summary
Backend engineer with 7 years of experience building distributed systems.

Experience
Tech Lead, Acme Corp (2019 - Present)
- Designed microservices in Python and Node.js deployed with Docker and Kubernetes on AWS
- Led a team of 6 engineers

Skills
Python, Node.js, PostgreSQL, Redis, Docker, Kubernetes, AWS, Git
"""

FRESHER_RESUME = """
Sam Lee
Recent graduate looking for opportunities as a web developer.

Projects
- Portfolio site with HTML, CSS and JavaScript
- Knowledge of Python from university coursework

Internship
Web intern at Local Agency, 1 year experience
"""

ANALYSIS_JSON = {
    "experienceLevel": "professional",
    "extractedSkills": ["Python", "Docker", "AWS"],
    "jobMatches": [
        {
            "jobId": "4",
            "fitScore": 88,
            "matchedSkills": ["Python", "Docker", "AWS"],
            "missingSkills": ["Kubernetes"],
            "reasoning": "Strong backend background.",
        }
    ],
    "skillGap": ["Kubernetes"],
    "recommendations": ["Learn Kubernetes"],
}


class ScriptedTextService:
    """Text service double: returns a fixed response or raises a fixed error."""

    def __init__(self, response: str = "", error: Exception | None = None, configured: bool = True):
        self.response = response
        self.error = error
        self.configured = configured
        self.prompts: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def text_service():
    """Factory for ScriptedTextService instances."""
    return ScriptedTextService


@pytest.fixture
def analysis_json_text():
    return "Here is the analysis:\n```json\n" + json.dumps(ANALYSIS_JSON) + "\n```"


@pytest.fixture
def analysis_payload():
    return copy.deepcopy(ANALYSIS_JSON)


@pytest.fixture
def senior_resume():
    return SENIOR_RESUME


@pytest.fixture
def fresher_resume():
    return FRESHER_RESUME


@pytest.fixture
def docx_bytes():
    """Build a small DOCX resume in memory."""
    import io

    from docx import Document

    def _build(*paragraphs: str) -> bytes:
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    return _build
