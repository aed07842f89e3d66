"""
Profile Manager - Reads and edits job seeker and employer profiles.
"""

from datetime import datetime
from typing import Optional
import logging

from job_board.core.matcher import add_skill, remove_skill
from job_board.core.models import Profile, UserRole
from job_board.integrations.base import DataStore, DataStoreError


class ProfileManager:
    """Profile reads and updates against the data store."""

    COLLECTION = "profiles"

    # Fields a user may change on their own profile
    EDITABLE_FIELDS = {
        "full_name",
        "company_name",
        "location",
        "phone",
        "bio",
        "avatar_url",
        "role",
        "skills",
    }

    def __init__(self, store: DataStore):
        self.store = store
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Get a profile by user id."""
        record = self.store.get(self.COLLECTION, user_id)
        if record is None:
            self.logger.warning(f"Profile not found: {user_id}")
            return None
        return Profile.from_dict(record)

    def create_profile(
        self,
        user_id: str,
        email: str,
        role: UserRole = UserRole.JOB_SEEKER,
        full_name: Optional[str] = None,
        company_name: Optional[str] = None,
    ) -> Profile:
        """
        Create the profile row for a newly registered user.

        Args:
            user_id: Id issued by the authentication service
            email: Account email
            role: Job seeker or employer
            full_name: Display name
            company_name: Employer company

        Returns:
            Created Profile
        """
        profile = Profile(
            id=user_id,
            email=email,
            role=role,
            full_name=full_name or None,
            company_name=company_name or None,
        )
        record = self.store.insert(self.COLLECTION, profile.to_dict())
        self.logger.info(f"Created {role.value} profile for {email}")
        return Profile.from_dict(record)

    def update_profile(self, user_id: str, **changes) -> Optional[Profile]:
        """
        Update editable profile fields.

        Blank strings are stored as None. Unknown fields raise ValueError.

        Returns:
            Updated Profile or None if not found
        """
        unknown = set(changes) - self.EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update profile fields: {', '.join(sorted(unknown))}")

        payload = {}
        for key, value in changes.items():
            if isinstance(value, UserRole):
                value = value.value
            elif isinstance(value, str):
                value = value.strip() or None
            payload[key] = value
        payload["updated_at"] = datetime.now().isoformat()

        record = self.store.update(self.COLLECTION, user_id, payload)
        if record is None:
            self.logger.warning(f"Profile not found: {user_id}")
            return None
        return Profile.from_dict(record)

    def add_skill(self, user_id: str, skill: str) -> tuple[bool, str]:
        """
        Add a skill to a profile.

        Returns:
            Tuple of (success, message)
        """
        profile = self.get_profile(user_id)
        if profile is None:
            return False, "Profile not found."

        try:
            skills = add_skill(profile.skills, skill)
        except ValueError as e:
            return False, str(e)

        try:
            self.update_profile(user_id, skills=skills)
        except DataStoreError as e:
            self.logger.error(f"Error adding skill: {e}")
            return False, "Failed to add skill. Please try again."

        return True, "Your skill has been added successfully."

    def remove_skill(self, user_id: str, skill: str) -> tuple[bool, str]:
        """
        Remove a skill from a profile.

        Returns:
            Tuple of (success, message)
        """
        profile = self.get_profile(user_id)
        if profile is None:
            return False, "Profile not found."

        if skill not in profile.skills:
            return False, f"'{skill}' is not in your skills."

        try:
            self.update_profile(user_id, skills=remove_skill(profile.skills, skill))
        except DataStoreError as e:
            self.logger.error(f"Error removing skill: {e}")
            return False, "Failed to remove skill. Please try again."

        return True, "Your skill has been removed successfully."
