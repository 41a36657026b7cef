"""Tests for the job catalog."""

import pytest

from services.errors import JobNotFound, UnsupportedJobSource
from services.job_catalog import BUILTIN_JOBS, JobCatalog, load_jobs_csv

CSV_TEXT = """id,title,company,description,requirements,skills,salary,experience_level
10,Data Engineer,DataCo,Build pipelines,3+ years of SQL;Airflow,Python; SQL ;Airflow,,senior
,Missing Id,Nobody,,,,,
11,QA Engineer,TestCo,Own test automation,,Selenium;Python,$70k,entry
"""


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "jobs.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_builtin_catalog():
    catalog = JobCatalog()
    jobs = catalog.list_jobs()
    assert [job.id for job in jobs] == ["1", "2", "3", "4", "5", "6"]
    assert all(job.skills for job in jobs)


def test_list_jobs_limit():
    assert [job.id for job in JobCatalog().list_jobs(limit=2)] == ["1", "2"]
    assert JobCatalog().list_jobs(limit=0) == []


def test_list_jobs_query_matches_title_description_and_skills():
    catalog = JobCatalog()
    assert [job.id for job in catalog.list_jobs(query="devops")] == ["5"]
    assert [job.id for job in catalog.list_jobs(query="PYTHON")] == ["3", "4"]
    assert [job.id for job in catalog.list_jobs(query="graduates")] == ["3"]


def test_get_job():
    assert JobCatalog().get_job("4").title == "Senior Backend Engineer"
    with pytest.raises(JobNotFound):
        JobCatalog().get_job("99")


def test_get_jobs_keeps_requested_order():
    catalog = JobCatalog()
    assert [job.id for job in catalog.get_jobs(["3", "1"])] == ["3", "1"]
    assert len(catalog.get_jobs(None)) == len(BUILTIN_JOBS)
    assert len(catalog.get_jobs([])) == len(BUILTIN_JOBS)
    with pytest.raises(JobNotFound):
        catalog.get_jobs(["1", "404"])


def test_load_jobs_csv(csv_path):
    jobs = load_jobs_csv(csv_path)
    assert [job.id for job in jobs] == ["10", "11"]
    assert jobs[0].skills == ["Python", "SQL", "Airflow"]
    assert jobs[0].requirements == ["3+ years of SQL", "Airflow"]
    assert jobs[0].salary is None
    assert jobs[0].experience_level == "senior"
    assert jobs[1].source == "csv"


def test_from_source(csv_path):
    assert len(JobCatalog.from_source("builtin").list_jobs()) == len(BUILTIN_JOBS)
    assert JobCatalog.from_source("csv", str(csv_path)).get_job("11").title == "QA Engineer"


@pytest.mark.parametrize("source, path", [("linkedin", ""), ("csv", "")])
def test_from_source_rejects_unknown(source, path):
    with pytest.raises(UnsupportedJobSource):
        JobCatalog.from_source(source, path)
