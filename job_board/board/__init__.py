"""
Board services: profiles, job postings and the job seeker's job list.
"""

from .profiles import ProfileManager
from .postings import PostingManager
from .listings import ApplyState, BrowseResult, JobBrowser, JobListing

__all__ = [
    "ProfileManager",
    "PostingManager",
    "ApplyState",
    "BrowseResult",
    "JobBrowser",
    "JobListing",
]
