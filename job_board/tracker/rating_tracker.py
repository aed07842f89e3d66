"""
Rating Tracker - Employer ratings of job seekers.

Each application can be rated once, by the employer who posted the job, with
1 to 5 stars and an optional review.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import math

from job_board.board.postings import PostingManager
from job_board.core.models import JobApplication, Rating
from job_board.integrations.base import DataStore, DataStoreError


RATING_LABELS = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}


def rating_label(stars: int) -> Optional[str]:
    """Word for a star count, or None outside 1-5."""
    return RATING_LABELS.get(stars)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


@dataclass(frozen=True)
class RatingSummary:
    """Aggregate of a job seeker's ratings."""
    count: int
    average: float  # rounded to one decimal
    stars: int  # average rounded to a whole star

    @property
    def review_label(self) -> str:
        return f"{self.count} review{'' if self.count == 1 else 's'}"

    def to_dict(self) -> dict:
        return {"count": self.count, "average": self.average, "stars": self.stars}


class RatingTracker:
    """Stores and summarizes employer ratings."""

    COLLECTION = "ratings"
    APPLICATIONS = "job_applications"

    def __init__(self, store: DataStore):
        self.store = store
        self.postings = PostingManager(store)
        self.logger = logging.getLogger(self.__class__.__name__)

    def submit_rating(
        self,
        application_id: str,
        employer_id: str,
        rating: int,
        review: str = "",
    ) -> tuple[bool, str]:
        """
        Rate the job seeker behind an application.

        Args:
            application_id: Application being rated
            employer_id: Employer giving the rating
            rating: Stars, 1-5
            review: Optional review text

        Returns:
            Tuple of (success, message)
        """
        if isinstance(rating, bool) or not isinstance(rating, int) or rating not in RATING_LABELS:
            return False, "You must provide a rating between 1 and 5 stars."

        record = self.store.get(self.APPLICATIONS, application_id)
        if record is None:
            return False, "Application not found."
        application = JobApplication.from_dict(record)

        job = self.postings.get_job(application.job_id)
        if job is None:
            return False, "Job not found."
        if job.employer_id != employer_id:
            self.logger.warning(f"Employer {employer_id} cannot rate application {application_id}")
            return False, "You can only rate applicants to your own job postings."

        if self.store.select(self.COLLECTION, filters={"application_id": application_id}):
            return False, "This application has already been rated."

        entry = Rating(
            application_id=application_id,
            employer_id=employer_id,
            job_seeker_id=application.applicant_id,
            rating=rating,
            review=(review or "").strip() or None,
        )

        try:
            self.store.insert(self.COLLECTION, entry.to_dict())
        except DataStoreError as e:
            self.logger.error(f"Error submitting rating: {e}")
            return False, "Failed to submit rating. Please try again."

        self.logger.info(f"Rated application {application_id}: {rating} stars")
        return True, "Rating submitted successfully!"

    def get_ratings(self, job_seeker_id: str) -> list[Rating]:
        """All ratings a job seeker has received, newest first."""
        records = self.store.select(
            self.COLLECTION,
            filters={"job_seeker_id": job_seeker_id},
            order_by="created_at",
            descending=True,
        )
        return [Rating.from_dict(r) for r in records]

    def get_summary(self, job_seeker_id: str) -> Optional[RatingSummary]:
        """Average rating of a job seeker, or None without ratings."""
        ratings = self.get_ratings(job_seeker_id)
        if not ratings:
            return None

        average = sum(r.rating for r in ratings) / len(ratings)
        return RatingSummary(
            count=len(ratings),
            average=_round_half_up(average, 1),
            stars=int(_round_half_up(average)),
        )
