"""Unit tests for the posting manager."""

import pytest

from job_board.board.postings import PostingManager
from job_board.core.models import JobStatus
from job_board.integrations.base import DataStoreError
from job_board.integrations.memory import InMemoryStore


class FailingWriteStore(InMemoryStore):
    """Store that can be switched to reject every write."""

    fail_writes = False

    def insert(self, collection, record):
        if self.fail_writes:
            raise DataStoreError("write rejected")
        return super().insert(collection, record)

    def delete(self, collection, record_id):
        if self.fail_writes:
            raise DataStoreError("write rejected")
        return super().delete(collection, record_id)


@pytest.fixture
def manager(store):
    return PostingManager(store)


def make_form(**overrides):
    form = {
        "title": " Platform Engineer ",
        "company_name": "Acme",
        "description": "Keep the lights on.",
        "location": "",
        "job_type": "Full-time",
        "requirements": "   ",
        "salary_min": "70000",
        "salary_max": "95k",
        "required_skills": ["Kubernetes", "Go"],
    }
    form.update(overrides)
    return form


class TestSaveJob:
    def test_create(self, manager, employer):
        job, message = manager.save_job(employer.id, make_form())

        assert message == "Your job has been posted successfully."
        assert job.title == "Platform Engineer"
        assert job.employer_id == employer.id
        assert job.location is None
        assert job.requirements is None
        assert job.salary_min == 70000
        assert job.salary_max == 95
        assert job.status == JobStatus.ACTIVE
        assert manager.get_job(job.id).required_skills == ["Kubernetes", "Go"]

    @pytest.mark.parametrize("field_name,message", [
        ("title", "Job title is required."),
        ("company_name", "Company name is required."),
        ("description", "Job description is required."),
    ])
    def test_required_fields(self, manager, employer, field_name, message):
        job, result = manager.save_job(employer.id, make_form(**{field_name: "  "}))
        assert job is None
        assert result == message

    def test_requires_a_skill(self, manager, employer):
        job, message = manager.save_job(employer.id, make_form(required_skills=[]))
        assert job is None
        assert message == "Please add at least one required skill for this job."
        assert manager.list_employer_jobs(employer.id) == []

    def test_update_resets_status(self, manager, employer, closed_job):
        job, message = manager.save_job(employer.id, make_form(title="Analyst"), job_id=closed_job.id)
        assert message == "Your job posting has been updated successfully."
        assert job.id == closed_job.id
        assert job.title == "Analyst"
        assert job.is_active

    def test_update_other_employers_job(self, manager, python_job):
        job, message = manager.save_job("someone-else", make_form(), job_id=python_job.id)
        assert job is None
        assert message == "You can only edit your own job postings."
        assert manager.get_job(python_job.id).title == python_job.title

    def test_update_missing_job(self, manager, employer):
        assert manager.save_job(employer.id, make_form(), job_id="ghost") == (None, "Job not found.")


class TestListing:
    def test_active_jobs_newest_first(self, manager, python_job, rust_job, closed_job):
        assert [j.id for j in manager.list_active_jobs()] == [rust_job.id, python_job.id]

    def test_employer_jobs_include_closed(self, manager, employer, python_job, closed_job):
        ids = [j.id for j in manager.list_employer_jobs(employer.id)]
        assert ids == [python_job.id, closed_job.id]

    def test_get_missing(self, manager):
        assert manager.get_job("ghost") is None


class TestStatusAndDelete:
    def test_close_and_reopen(self, manager, python_job, employer):
        job, message = manager.set_status(python_job.id, JobStatus.CLOSED, employer.id)
        assert job.status == JobStatus.CLOSED
        assert message == "Backend Engineer is now closed."
        assert manager.list_active_jobs() == []

        job, _ = manager.set_status(python_job.id, JobStatus.ACTIVE, employer.id)
        assert job.is_active

    def test_set_status_missing(self, manager, employer):
        assert manager.set_status("ghost", JobStatus.CLOSED, employer.id) == (None, "Job not found.")

    def test_set_status_other_employer(self, manager, python_job):
        assert manager.set_status(python_job.id, JobStatus.CLOSED, "employer-2") == (
            None, "You can only edit your own job postings.",
        )
        assert manager.get_job(python_job.id).is_active

    def test_delete(self, manager, python_job, employer):
        assert manager.delete_job(python_job.id, employer.id) == (
            True, "The job posting has been deleted successfully.",
        )
        assert manager.get_job(python_job.id) is None
        assert manager.delete_job(python_job.id, employer.id) == (False, "Job not found.")

    def test_delete_other_employer(self, manager, python_job):
        assert manager.delete_job(python_job.id, "employer-2") == (
            False, "You can only edit your own job postings.",
        )
        assert manager.get_job(python_job.id) is not None


class TestStoreFailures:
    def test_save_job_insert_failure(self, employer):
        store = FailingWriteStore(seed={"profiles": [employer.to_dict()]})
        store.fail_writes = True
        job, message = PostingManager(store).save_job(employer.id, make_form())
        assert job is None
        assert message == "Failed to save job posting. Please try again."

    def test_delete_failure(self, python_job, employer):
        store = FailingWriteStore(seed={"jobs": [python_job.to_dict()]})
        store.fail_writes = True
        assert PostingManager(store).delete_job(python_job.id, employer.id) == (
            False, "Failed to delete job posting.",
        )
