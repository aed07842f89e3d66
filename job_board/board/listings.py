"""
Job Browser - Builds the job seeker's view of the board.

Loads active postings, narrows them with the active filter, and for a signed
in job seeker attaches the skill comparison and the apply gate of each job.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

from job_board.core.filters import JobFilterEngine
from job_board.core.matcher import SkillMatcher
from job_board.core.models import FilterCriteria, JobPosting, Profile, SkillComparisonResult
from job_board.integrations.base import DataStore

from .postings import PostingManager
from .profiles import ProfileManager


class ApplyState:
    """Why the apply action is or is not available for a listing."""
    APPLIED = "applied"
    ADD_SKILLS = "add_skills"
    MISSING_SKILLS = "missing_skills"
    READY = "ready"

    LABELS = {
        APPLIED: "Applied",
        ADD_SKILLS: "Add Skills to Apply",
        MISSING_SKILLS: "Missing Required Skills",
        READY: "Apply Now",
    }


@dataclass
class JobListing:
    """A job with the viewer's skill comparison attached."""
    job: JobPosting
    comparison: SkillComparisonResult = field(default_factory=SkillComparisonResult)
    already_applied: bool = False
    apply_state: Optional[str] = None  # None when the viewer is not a job seeker

    @property
    def can_apply(self) -> bool:
        return self.apply_state == ApplyState.READY

    @property
    def apply_label(self) -> Optional[str]:
        return ApplyState.LABELS.get(self.apply_state)

    def to_dict(self) -> dict:
        return {
            "job": self.job.to_dict(),
            "comparison": self.comparison.to_dict(),
            "already_applied": self.already_applied,
            "apply_state": self.apply_state,
        }


@dataclass
class BrowseResult:
    """Filtered listings plus the size of the unfiltered board."""
    listings: list[JobListing]
    total_count: int
    criteria: FilterCriteria

    @property
    def shown_count(self) -> int:
        return len(self.listings)

    @property
    def empty_message(self) -> Optional[str]:
        if self.listings:
            return None
        if self.criteria.is_active:
            return "Try adjusting your search criteria"
        return "No jobs are currently available"


class JobBrowser:
    """Combines postings, the filter engine and skill matching."""

    def __init__(self, store: DataStore):
        # Imported here: the tracker package depends on this one
        from job_board.tracker.application_tracker import ApplicationTracker

        self.store = store
        self.applications = ApplicationTracker(store)
        self.postings = PostingManager(store)
        self.profiles = ProfileManager(store)
        self.filter_engine = JobFilterEngine()
        self.logger = logging.getLogger(self.__class__.__name__)

    def browse(
        self,
        criteria: Optional[FilterCriteria] = None,
        user_id: Optional[str] = None,
    ) -> BrowseResult:
        """
        List active jobs that match the criteria.

        Args:
            criteria: Active filter (None shows everything)
            user_id: Viewer; skill data is attached for job seekers

        Returns:
            BrowseResult with one listing per retained job
        """
        criteria = criteria or FilterCriteria()
        jobs = self.postings.list_active_jobs()
        retained = self.filter_engine.apply(jobs, criteria)

        profile = self.profiles.get_profile(user_id) if user_id else None
        if profile is None or profile.is_employer:
            listings = [JobListing(job=job) for job in retained]
        else:
            applied = self.applications.applied_job_ids(profile.id)
            listings = [self._listing_for(job, profile, applied) for job in retained]

        self.logger.info(f"Showing {len(listings)} of {len(jobs)} jobs")
        return BrowseResult(listings=listings, total_count=len(jobs), criteria=criteria)

    def _listing_for(self, job: JobPosting, profile: Profile, applied: set[str]) -> JobListing:
        comparison = SkillMatcher(profile.skills).compare(job)
        already_applied = job.id in applied

        if already_applied:
            state = ApplyState.APPLIED
        elif not profile.has_skills:
            state = ApplyState.ADD_SKILLS
        elif not comparison.can_apply:
            state = ApplyState.MISSING_SKILLS
        else:
            state = ApplyState.READY

        return JobListing(
            job=job,
            comparison=comparison,
            already_applied=already_applied,
            apply_state=state,
        )
