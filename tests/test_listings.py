"""Unit tests for the job browser."""

import pytest

from job_board.board.listings import ApplyState, JobBrowser
from job_board.core.models import FilterCriteria, Profile


@pytest.fixture
def browser(store):
    return JobBrowser(store)


@pytest.fixture
def board(python_job, rust_job, closed_job):
    return [python_job, rust_job, closed_job]


class TestBrowse:
    def test_anonymous_sees_active_jobs(self, browser, board):
        result = browser.browse()
        assert [listing.job.id for listing in result.listings] == ["job-rust", "job-python"]
        assert result.total_count == 2
        assert all(listing.apply_state is None for listing in result.listings)
        assert result.empty_message is None

    def test_employer_gets_plain_listings(self, browser, board, employer):
        result = browser.browse(user_id=employer.id)
        assert all(listing.apply_label is None for listing in result.listings)

    def test_filtered_counts(self, browser, board):
        result = browser.browse(FilterCriteria(location="berlin"))
        assert result.shown_count == 1
        assert result.total_count == 2

    def test_empty_messages(self, browser, board, store):
        assert browser.browse(FilterCriteria(search="astronaut")).empty_message == (
            "Try adjusting your search criteria"
        )
        assert JobBrowser(type(store)()).browse().empty_message == "No jobs are currently available"


class TestApplyStates:
    def test_ready_and_missing(self, browser, board, seeker):
        listings = {listing.job.id: listing for listing in browser.browse(user_id=seeker.id).listings}

        ready = listings["job-python"]
        assert ready.apply_state == ApplyState.READY
        assert ready.can_apply
        assert ready.apply_label == "Apply Now"
        assert ready.comparison.matching == ("Python", "SQL")

        blocked = listings["job-rust"]
        assert blocked.apply_state == ApplyState.MISSING_SKILLS
        assert blocked.comparison.missing == ("Rust",)
        assert not blocked.can_apply

    def test_applied(self, browser, board, seeker, store):
        store.insert("job_applications", {"job_id": "job-python", "applicant_id": seeker.id})
        listings = {listing.job.id: listing for listing in browser.browse(user_id=seeker.id).listings}
        assert listings["job-python"].apply_state == ApplyState.APPLIED
        assert listings["job-python"].already_applied
        assert listings["job-python"].apply_label == "Applied"

    def test_no_skills(self, browser, board, store):
        store.insert("profiles", Profile(id="newbie", email="n@example.test").to_dict())
        listings = browser.browse(user_id="newbie").listings
        assert {listing.apply_state for listing in listings} == {ApplyState.ADD_SKILLS}
        assert listings[0].apply_label == "Add Skills to Apply"

    def test_to_dict(self, browser, board, seeker):
        data = browser.browse(user_id=seeker.id).listings[1].to_dict()
        assert data["job"]["id"] == "job-python"
        assert data["comparison"]["can_apply"] is True
        assert data["apply_state"] == "ready"

    def test_application_made_through_tracker_is_seen(self, browser, board, seeker):
        ok, _ = browser.applications.apply_to_job("job-python", seeker.id)
        assert ok
        listings = {listing.job.id: listing for listing in browser.browse(user_id=seeker.id).listings}
        assert listings["job-python"].apply_state == ApplyState.APPLIED
        assert listings["job-rust"].apply_state == ApplyState.MISSING_SKILLS
