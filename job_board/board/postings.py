"""
Posting Manager - Employer-side creation and upkeep of job postings.
"""

from datetime import datetime
from typing import Optional
import logging

from job_board.core.models import JobPosting, JobStatus, parse_salary
from job_board.integrations.base import DataStore, DataStoreError


class PostingManager:
    """Creates, updates and lists job postings."""

    COLLECTION = "jobs"

    REQUIRED_FIELDS = {
        "title": "Job title",
        "company_name": "Company name",
        "description": "Job description",
    }

    def __init__(self, store: DataStore):
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)

    def list_active_jobs(self) -> list[JobPosting]:
        """All active postings, newest first."""
        records = self.store.select(
            self.COLLECTION,
            filters={"status": JobStatus.ACTIVE.value},
            order_by="created_at",
            descending=True,
        )
        return [JobPosting.from_dict(r) for r in records]

    def list_employer_jobs(self, employer_id: str) -> list[JobPosting]:
        """Every posting owned by an employer, newest first."""
        records = self.store.select(
            self.COLLECTION,
            filters={"employer_id": employer_id},
            order_by="created_at",
            descending=True,
        )
        return [JobPosting.from_dict(r) for r in records]

    def get_job(self, job_id: str) -> Optional[JobPosting]:
        """Get a posting by id."""
        record = self.store.get(self.COLLECTION, job_id)
        if record is None:
            self.logger.warning(f"Job not found: {job_id}")
            return None
        return JobPosting.from_dict(record)

    def save_job(
        self,
        employer_id: str,
        form: dict,
        job_id: Optional[str] = None,
    ) -> tuple[Optional[JobPosting], str]:
        """
        Create a posting, or update one when ``job_id`` is given.

        Args:
            employer_id: Owner of the posting
            form: Raw form values: title, company_name, description, location,
                  job_type, requirements, salary_min, salary_max (strings or
                  ints) and required_skills (list)
            job_id: Existing posting to update

        Returns:
            Tuple of (saved JobPosting or None, message)
        """
        for field_name, label in self.REQUIRED_FIELDS.items():
            if not str(form.get(field_name) or "").strip():
                return None, f"{label} is required."

        required_skills = list(form.get("required_skills") or [])
        if not required_skills:
            return None, "Please add at least one required skill for this job."

        job_data = {
            "title": form["title"].strip(),
            "description": form["description"].strip(),
            "company_name": form["company_name"].strip(),
            "location": self._optional_text(form.get("location")),
            "salary_min": parse_salary(form.get("salary_min")),
            "salary_max": parse_salary(form.get("salary_max")),
            "job_type": self._optional_text(form.get("job_type")),
            "requirements": self._optional_text(form.get("requirements")),
            "required_skills": required_skills,
            "employer_id": employer_id,
            "status": JobStatus.ACTIVE.value,
            "updated_at": datetime.now().isoformat(),
        }

        try:
            if job_id:
                _, error = self._owned_job(job_id, employer_id)
                if error:
                    return None, error

                record = self.store.update(self.COLLECTION, job_id, job_data)
                if record is None:
                    return None, "Job not found."
                self.logger.info(f"Updated job {job_id}: {job_data['title']}")
                return JobPosting.from_dict(record), "Your job posting has been updated successfully."

            record = self.store.insert(self.COLLECTION, job_data)
        except DataStoreError as e:
            self.logger.error(f"Error saving job: {e}")
            return None, "Failed to save job posting. Please try again."

        self.logger.info(f"Posted job {record['id']}: {job_data['title']} at {job_data['company_name']}")
        return JobPosting.from_dict(record), "Your job has been posted successfully."

    def set_status(
        self,
        job_id: str,
        status: JobStatus,
        employer_id: str,
    ) -> tuple[Optional[JobPosting], str]:
        """
        Change a posting's status (close, reopen, move to draft).

        Returns:
            Tuple of (updated JobPosting or None, message)
        """
        existing, error = self._owned_job(job_id, employer_id)
        if error:
            return None, error

        record = self.store.update(self.COLLECTION, job_id, {
            "status": status.value,
            "updated_at": datetime.now().isoformat(),
        })
        if record is None:
            self.logger.warning(f"Job not found: {job_id}")
            return None, "Job not found."

        self.logger.info(f"Job {job_id} is now {status.value}")
        return JobPosting.from_dict(record), f"{existing.title} is now {status.value}."

    def delete_job(self, job_id: str, employer_id: str) -> tuple[bool, str]:
        """
        Delete a posting owned by the employer.

        Returns:
            Tuple of (success, message)
        """
        existing, error = self._owned_job(job_id, employer_id)
        if error:
            return False, error

        try:
            deleted = self.store.delete(self.COLLECTION, job_id)
        except DataStoreError as e:
            self.logger.error(f"Error deleting job: {e}")
            return False, "Failed to delete job posting."

        if not deleted:
            self.logger.warning(f"Job not found: {job_id}")
            return False, "Job not found."

        self.logger.info(f"Deleted job {job_id}: {existing.title}")
        return True, "The job posting has been deleted successfully."

    def _owned_job(self, job_id: str, employer_id: str) -> tuple[Optional[JobPosting], Optional[str]]:
        """Load a posting and check that the employer owns it."""
        existing = self.get_job(job_id)
        if existing is None:
            return None, "Job not found."
        if existing.employer_id != employer_id:
            self.logger.warning(f"Employer {employer_id} does not own job {job_id}")
            return None, "You can only edit your own job postings."
        return existing, None

    def _optional_text(self, value) -> Optional[str]:
        if value is None:
            return None
        return str(value).strip() or None
