"""
Job Filter Engine - Narrows a list of job postings to the active filter.

Axes are combined with AND:
- Search: case-insensitive substring of title, company, description or location
- Location: case-insensitive substring of the job's location
- Job type: exact, case-sensitive equality
- Salary: the stated bounds of a posting must not contradict the requested ones

A blank or missing criteria field leaves its axis unconstrained.
"""

from typing import Iterable, Optional
import logging

from .models import FilterCriteria, JobPosting


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _contains(haystack: Optional[str], needle_lower: str) -> bool:
    if haystack is None:
        return False
    return needle_lower in haystack.lower()


class JobFilterEngine:
    """Applies FilterCriteria to job postings. Stateless and order-preserving."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def apply(self, jobs: Iterable[JobPosting], criteria: FilterCriteria) -> list[JobPosting]:
        """
        Return the jobs that satisfy every active axis of the criteria.

        Args:
            jobs: Job postings, in display order
            criteria: Active filter

        Returns:
            Retained jobs in their original relative order
        """
        jobs = list(jobs)
        retained = [job for job in jobs if self.matches(job, criteria)]
        self.logger.debug(f"Filtered {len(jobs)} jobs down to {len(retained)}")
        return retained

    def matches(self, job: JobPosting, criteria: FilterCriteria) -> bool:
        """Check a single job against all axes."""
        return (
            self._matches_search(job, criteria.search)
            and self._matches_location(job, criteria.location)
            and self._matches_job_type(job, criteria.job_type)
            and self._matches_salary(job, criteria.salary_min, criteria.salary_max)
        )

    def _matches_search(self, job: JobPosting, search: str) -> bool:
        if _blank(search):
            return True

        search_lower = search.lower()
        return (
            _contains(job.title, search_lower)
            or _contains(job.company_name, search_lower)
            or _contains(job.description, search_lower)
            or _contains(job.location, search_lower)
        )

    def _matches_location(self, job: JobPosting, location: str) -> bool:
        if _blank(location):
            return True
        return _contains(job.location, location.lower())

    def _matches_job_type(self, job: JobPosting, job_type: str) -> bool:
        if _blank(job_type):
            return True
        # Unlike search and location, job type is compared case-sensitively
        return job.job_type == job_type

    def _matches_salary(
        self,
        job: JobPosting,
        salary_min: Optional[int],
        salary_max: Optional[int],
    ) -> bool:
        if salary_min is not None and job.salary_max is not None and job.salary_max < salary_min:
            return False
        if salary_max is not None and job.salary_min is not None and job.salary_min > salary_max:
            return False
        return True


def filter_jobs(jobs: Iterable[JobPosting], criteria: FilterCriteria) -> list[JobPosting]:
    """Shortcut for JobFilterEngine().apply()."""
    return JobFilterEngine().apply(jobs, criteria)
