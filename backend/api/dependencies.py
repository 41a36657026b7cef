"""Shared dependencies for API routes.

Collaborators are built once in main.py and stored on app.state; tests swap
them through app.dependency_overrides.
"""

from fastapi import Request

from services.job_catalog import JobCatalog
from services.resume_analyzer import ResumeAnalyzer


def get_analyzer(request: Request) -> ResumeAnalyzer:
    return request.app.state.analyzer


def get_job_catalog(request: Request) -> JobCatalog:
    return request.app.state.job_catalog
