"""Shared fixtures for the job board tests."""

import pytest

from job_board.core.models import JobPosting, JobStatus, Profile, UserRole
from job_board.integrations.memory import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def employer(store):
    profile = Profile(
        id="employer-1",
        email="hr@acme.test",
        role=UserRole.EMPLOYER,
        full_name="Acme HR",
        company_name="Acme",
    )
    store.insert("profiles", profile.to_dict())
    return profile


@pytest.fixture
def seeker(store):
    profile = Profile(
        id="seeker-1",
        email="ada@example.test",
        role=UserRole.JOB_SEEKER,
        full_name="Ada",
        skills=["Python", "SQL", "Docker"],
    )
    store.insert("profiles", profile.to_dict())
    return profile


@pytest.fixture
def python_job(store, employer):
    job = JobPosting(
        id="job-python",
        title="Backend Engineer",
        company_name="Acme",
        description="Build APIs.",
        employer_id=employer.id,
        location="Berlin",
        job_type="Full-time",
        salary_min=60000,
        salary_max=80000,
        required_skills=["python", "sql"],
        created_at="2024-01-02T09:00:00",
    )
    store.insert("jobs", job.to_dict())
    return job


@pytest.fixture
def rust_job(store, employer):
    job = JobPosting(
        id="job-rust",
        title="Systems Engineer",
        company_name="Acme",
        description="Low latency services.",
        employer_id=employer.id,
        location=None,
        job_type="Contract",
        required_skills=["Rust"],
        created_at="2024-01-03T09:00:00",
    )
    store.insert("jobs", job.to_dict())
    return job


@pytest.fixture
def closed_job(store, employer):
    job = JobPosting(
        id="job-closed",
        title="Data Analyst",
        company_name="Acme",
        description="Dashboards.",
        employer_id=employer.id,
        required_skills=["SQL"],
        status=JobStatus.CLOSED,
        created_at="2024-01-01T09:00:00",
    )
    store.insert("jobs", job.to_dict())
    return job
