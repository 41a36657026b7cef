import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.gemini_client import GeminiClient
from services.job_catalog import JobCatalog
from services.resume_analyzer import ResumeAnalyzer

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Fit Analyzer API",
    description="Resume skill extraction, experience tiering and job-fit scoring",
    version="1.0.0",
)

app.state.limiter = limiter
app.state.analyzer = ResumeAnalyzer(text_service=GeminiClient.from_settings(settings))
app.state.job_catalog = JobCatalog.from_source(settings.job_source, settings.job_catalog_csv)

app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
