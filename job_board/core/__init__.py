"""Core models, skill matching and job filtering."""

from .models import (
    UserRole,
    JobStatus,
    ApplicationStatus,
    Profile,
    JobPosting,
    JobApplication,
    Rating,
    FilterCriteria,
    SkillComparisonResult,
    parse_salary,
)
from .matcher import (
    SkillMatcher,
    matching_skills,
    missing_skills,
    can_apply,
    compare_skills,
    additional_skills,
)
from .filters import JobFilterEngine, filter_jobs

__all__ = [
    "UserRole",
    "JobStatus",
    "ApplicationStatus",
    "Profile",
    "JobPosting",
    "JobApplication",
    "Rating",
    "FilterCriteria",
    "SkillComparisonResult",
    "parse_salary",
    "SkillMatcher",
    "matching_skills",
    "missing_skills",
    "can_apply",
    "compare_skills",
    "additional_skills",
    "JobFilterEngine",
    "filter_jobs",
]
