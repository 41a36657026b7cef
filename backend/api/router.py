from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_analyzer, get_job_catalog
from config import settings
from models.requests import QuickAnalyzeRequest, QuickProfileRequest, SkillCoverageRequest
from models.responses import AnalysisResponse, JobListResponse, ProfileResponse, SkillsResponse
from models.schemas.job import JobPosting
from services import document_parser
from services.errors import DocumentError, JobNotFound
from services.job_catalog import JobCatalog
from services.resume_analyzer import ResumeAnalyzer
from services.skill_catalog import CATEGORIES, LEVELS, MARKET_SKILLS, SkillCoverage, skill_coverage

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

ALLOWED_EXTENSIONS = (".pdf", ".docx")


async def _read_resume(resume_file: UploadFile) -> str:
    """Validate an uploaded resume and return its text."""
    filename = (resume_file.filename or "").lower()
    if not filename.endswith(ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only PDF and DOCX files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = document_parser.extract_text(content, filename)
    except DocumentError as e:
        raise HTTPException(status_code=400, detail=f"Could not parse resume file: {e}")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from the file")
    return resume_text[:settings.max_resume_chars]


def _select_jobs(catalog: JobCatalog, job_ids: list[str] | None) -> list[JobPosting]:
    try:
        return catalog.get_jobs(job_ids)
    except JobNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


def _parse_job_ids(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    return [job_id.strip() for job_id in raw.split(",") if job_id.strip()] or None


async def _analysis_response(
    analyzer: ResumeAnalyzer, resume_text: str, jobs: list[JobPosting]
) -> AnalysisResponse:
    outcome = await analyzer.run_analysis(resume_text, jobs)
    return AnalysisResponse(
        **outcome.result.model_dump(),
        degraded=outcome.degraded,
        scoring_method=outcome.method,
    )


async def _profile_response(analyzer: ResumeAnalyzer, resume_text: str) -> ProfileResponse:
    outcome = await analyzer.run_profile(resume_text)
    return ProfileResponse(
        **outcome.result.model_dump(),
        degraded=outcome.degraded,
        scoring_method=outcome.method,
        text_length=len(resume_text),
    )


@router.get("/health")
async def health(analyzer: ResumeAnalyzer = Depends(get_analyzer)):
    return {
        "status": "ok",
        "gemini_configured": analyzer.ai_enabled,
    }


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_ids: str | None = Form(None),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    jobs = _select_jobs(catalog, _parse_job_ids(job_ids))
    resume_text = await _read_resume(resume_file)
    return await _analysis_response(analyzer, resume_text, jobs)


@router.post("/analyze/quick", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
    catalog: JobCatalog = Depends(get_job_catalog),
):
    jobs = _select_jobs(catalog, body.job_ids)
    return await _analysis_response(analyzer, body.resume_text, jobs)


@router.post("/profile", response_model=ProfileResponse)
@limiter.limit(settings.rate_limit)
async def profile(
    request: Request,
    resume_file: UploadFile = File(...),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    resume_text = await _read_resume(resume_file)
    return await _profile_response(analyzer, resume_text)


@router.post("/profile/quick", response_model=ProfileResponse)
@limiter.limit(settings.rate_limit)
async def profile_quick(
    request: Request,
    body: QuickProfileRequest,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
):
    return await _profile_response(analyzer, body.resume_text)


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    query: str | None = None,
    limit: int | None = None,
    catalog: JobCatalog = Depends(get_job_catalog),
):
    jobs = catalog.list_jobs(query=query, limit=limit)
    return JobListResponse(jobs=jobs, total=len(jobs))


@router.get("/jobs/{job_id}", response_model=JobPosting)
async def get_job(job_id: str, catalog: JobCatalog = Depends(get_job_catalog)):
    try:
        return catalog.get_job(job_id)
    except JobNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/skills", response_model=SkillsResponse)
async def skills():
    return SkillsResponse(
        skills=list(MARKET_SKILLS),
        categories=CATEGORIES,
        levels=LEVELS,
        total_skills=len(MARKET_SKILLS),
        high_demand_skills=sum(1 for s in MARKET_SKILLS if s.demand == "high"),
    )


@router.post("/skills/coverage", response_model=SkillCoverage)
async def coverage(body: SkillCoverageRequest):
    return skill_coverage(body.skills)
