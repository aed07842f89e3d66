"""
Application Tracker - Manages job applications from submission to review.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional
import csv
import logging

from job_board.board.postings import PostingManager
from job_board.board.profiles import ProfileManager
from job_board.core.matcher import additional_skills, compare_skills
from job_board.core.models import (
    ApplicationStatus,
    JobApplication,
    JobPosting,
    Profile,
    SkillComparisonResult,
)
from job_board.integrations.base import DataStore, DataStoreError


@dataclass
class ApplicationReview:
    """An application as an employer sees it."""
    application: JobApplication
    job: JobPosting
    applicant: Optional[Profile] = None
    comparison: SkillComparisonResult = field(default_factory=SkillComparisonResult)
    additional_skills: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "application": self.application.to_dict(),
            "job": {"id": self.job.id, "title": self.job.title},
            "applicant": {
                "id": self.application.applicant_id,
                "full_name": self.applicant.full_name if self.applicant else None,
            },
            "comparison": self.comparison.to_dict(),
            "additional_skills": self.additional_skills,
        }


class ApplicationTracker:
    """Tracks and manages job applications throughout their lifecycle."""

    COLLECTION = "job_applications"

    def __init__(self, store: DataStore):
        """
        Initialize the application tracker.

        Args:
            store: Data store holding jobs, profiles and applications
        """
        self.store = store
        self.postings = PostingManager(store)
        self.profiles = ProfileManager(store)
        self.logger = logging.getLogger(self.__class__.__name__)

    def apply_to_job(
        self,
        job_id: str,
        applicant_id: str,
        cover_letter: Optional[str] = None,
    ) -> tuple[bool, str]:
        """
        Submit an application for a job seeker.

        The applicant must hold every required skill of the job and have at
        least one skill on their profile.

        Args:
            job_id: Job being applied to
            applicant_id: Job seeker's profile id
            cover_letter: Optional cover letter text

        Returns:
            Tuple of (success, message)
        """
        job = self.postings.get_job(job_id)
        if job is None:
            return False, "Job not found."

        profile = self.profiles.get_profile(applicant_id)
        if profile is None:
            return False, "Profile not found."

        if profile.is_employer:
            return False, "Only job seekers can apply to jobs."

        if not job.is_active:
            return False, "This job is no longer accepting applications."

        if job_id in self.applied_job_ids(applicant_id):
            return False, "You have already applied to this job."

        if not compare_skills(profile.skills, job.required_skills).can_apply:
            return False, "You need all required skills to apply for this job."

        if not profile.has_skills:
            return False, "Please add your skills to your profile before applying."

        application = JobApplication(
            job_id=job_id,
            applicant_id=applicant_id,
            status=ApplicationStatus.PENDING,
            cover_letter=(cover_letter or "").strip() or None,
            skill=", ".join(profile.skills),
        )
        try:
            record = self.store.insert(self.COLLECTION, application.to_dict())
        except DataStoreError as e:
            self.logger.error(f"Error submitting application: {e}")
            return False, "Application failed. Please try again."

        self.logger.info(f"Application {record['id']}: {profile.display_name} -> {job.title} at {job.company_name}")

        return True, "Your application has been submitted successfully."

    def get_application(self, application_id: str) -> Optional[JobApplication]:
        """Get an application by ID."""
        record = self.store.get(self.COLLECTION, application_id)
        if record is None:
            return None
        return JobApplication.from_dict(record)

    def applied_job_ids(self, applicant_id: str) -> set[str]:
        """Ids of the jobs a job seeker has applied to."""
        records = self.store.select(self.COLLECTION, filters={"applicant_id": applicant_id})
        return {r["job_id"] for r in records}

    def get_applications_for_seeker(self, applicant_id: str) -> list[JobApplication]:
        """A job seeker's applications, newest first."""
        records = self.store.select(
            self.COLLECTION,
            filters={"applicant_id": applicant_id},
            order_by="applied_at",
            descending=True,
        )
        return [JobApplication.from_dict(r) for r in records]

    def get_applications_for_employer(self, employer_id: str) -> list[ApplicationReview]:
        """
        Applications to all of an employer's postings, newest first.

        Each entry carries the job, the applicant's profile and how the
        applicant's skills compare with the job's requirements.
        """
        reviews = []
        profiles: dict[str, Optional[Profile]] = {}

        for job in self.postings.list_employer_jobs(employer_id):
            for record in self.store.select(self.COLLECTION, filters={"job_id": job.id}):
                application = JobApplication.from_dict(record)

                if application.applicant_id not in profiles:
                    profiles[application.applicant_id] = self.profiles.get_profile(application.applicant_id)
                applicant = profiles[application.applicant_id]

                skills = applicant.skills if applicant else application.submitted_skills
                comparison = compare_skills(skills, job.required_skills)

                reviews.append(ApplicationReview(
                    application=application,
                    job=job,
                    applicant=applicant,
                    comparison=comparison,
                    additional_skills=additional_skills(skills, comparison.matching),
                ))

        reviews.sort(key=lambda r: r.application.applied_at, reverse=True)
        return reviews

    def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> Optional[JobApplication]:
        """
        Update the status of an application.

        Args:
            application_id: ID of the application
            status: New status

        Returns:
            Updated JobApplication or None if not found
        """
        existing = self.get_application(application_id)
        if existing is None:
            self.logger.warning(f"Application not found: {application_id}")
            return None

        record = self.store.update(self.COLLECTION, application_id, {
            "status": status.value,
            "reviewed_at": datetime.now().isoformat(),
        })
        if record is None:
            self.logger.warning(f"Application not found: {application_id}")
            return None

        self.logger.info(f"Updated application {application_id}: {existing.status.value} -> {status.value}")
        return JobApplication.from_dict(record)

    def get_statistics(self, applicant_id: Optional[str] = None) -> dict:
        """
        Count applications by status.

        Args:
            applicant_id: Limit to one job seeker (None counts everything)
        """
        filters = {"applicant_id": applicant_id} if applicant_id else None
        records = self.store.select(self.COLLECTION, filters=filters)

        stats = {"total": len(records)}
        for status in ApplicationStatus:
            stats[status.value] = len([r for r in records if r.get("status") == status.value])
        return stats

    def export_to_csv(
        self,
        applications: list[JobApplication],
        filepath: str,
    ) -> str:
        """
        Export applications to CSV format.

        Args:
            applications: Applications to export
            filepath: Destination CSV file

        Returns:
            Path to the exported CSV file
        """
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        jobs: dict[str, Optional[JobPosting]] = {}

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)

            writer.writerow([
                "ID", "Job ID", "Title", "Company", "Applicant ID", "Status",
                "Applied At", "Reviewed At", "Skills",
            ])

            for app in applications:
                if app.job_id not in jobs:
                    jobs[app.job_id] = self.postings.get_job(app.job_id)
                job = jobs[app.job_id]

                writer.writerow([
                    app.id,
                    app.job_id,
                    job.title if job else "",
                    job.company_name if job else "",
                    app.applicant_id,
                    app.status.value,
                    app.applied_at,
                    app.reviewed_at or "",
                    app.skill or "",
                ])

        self.logger.info(f"Exported {len(applications)} applications to {filepath}")
        return filepath
