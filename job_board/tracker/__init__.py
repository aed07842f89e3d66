"""
Application Tracker - Track applications and employer ratings.
"""

from .application_tracker import ApplicationReview, ApplicationTracker
from .rating_tracker import RatingSummary, RatingTracker, rating_label

__all__ = [
    "ApplicationReview",
    "ApplicationTracker",
    "RatingSummary",
    "RatingTracker",
    "rating_label",
]
