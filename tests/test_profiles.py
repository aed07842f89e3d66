"""Unit tests for the profile manager."""

import pytest

from job_board.board.profiles import ProfileManager
from job_board.core.models import UserRole
from job_board.integrations.base import DataStoreError
from job_board.integrations.memory import InMemoryStore


class FailingUpdateStore(InMemoryStore):
    """Store whose writes to existing records always fail."""

    def update(self, collection, record_id, changes):
        raise DataStoreError("connection reset")


@pytest.fixture
def manager(store):
    return ProfileManager(store)


class TestCreateAndGet:
    def test_create_profile(self, manager):
        profile = manager.create_profile("u1", "boss@corp.test", role=UserRole.EMPLOYER, company_name="Corp")
        assert profile.is_employer
        assert profile.company_name == "Corp"
        assert profile.full_name is None
        assert manager.get_profile("u1").email == "boss@corp.test"

    def test_get_missing(self, manager):
        assert manager.get_profile("ghost") is None


class TestUpdateProfile:
    def test_blank_strings_become_none(self, manager, seeker):
        updated = manager.update_profile(seeker.id, location="  Paris ", bio="   ")
        assert updated.location == "Paris"
        assert updated.bio is None
        assert updated.skills == seeker.skills

    def test_role_enum(self, manager, seeker):
        updated = manager.update_profile(seeker.id, role=UserRole.EMPLOYER)
        assert updated.is_employer

    def test_unknown_field(self, manager, seeker):
        with pytest.raises(ValueError, match="email"):
            manager.update_profile(seeker.id, email="new@example.test")

    def test_missing_profile(self, manager):
        assert manager.update_profile("ghost", bio="hi") is None


class TestSkills:
    def test_add_skill_trims(self, manager, seeker):
        ok, message = manager.add_skill(seeker.id, "  Go ")
        assert ok
        assert message == "Your skill has been added successfully."
        assert manager.get_profile(seeker.id).skills == ["Python", "SQL", "Docker", "Go"]

    def test_add_exact_duplicate(self, manager, seeker):
        ok, message = manager.add_skill(seeker.id, "SQL")
        assert not ok
        assert message == "This skill is already in your list."

    def test_add_case_variant_is_allowed(self, manager, seeker):
        ok, _ = manager.add_skill(seeker.id, "sql")
        assert ok
        assert manager.get_profile(seeker.id).skills[-1] == "sql"

    def test_add_blank(self, manager, seeker):
        ok, message = manager.add_skill(seeker.id, "   ")
        assert not ok
        assert message == "Skill name cannot be empty."

    def test_add_to_missing_profile(self, manager):
        assert manager.add_skill("ghost", "Go") == (False, "Profile not found.")

    def test_add_store_failure(self, seeker):
        store = FailingUpdateStore(seed={"profiles": [seeker.to_dict()]})
        ok, message = ProfileManager(store).add_skill(seeker.id, "Go")
        assert not ok
        assert message == "Failed to add skill. Please try again."

    def test_remove_skill(self, manager, seeker):
        ok, message = manager.remove_skill(seeker.id, "SQL")
        assert ok
        assert message == "Your skill has been removed successfully."
        assert manager.get_profile(seeker.id).skills == ["Python", "Docker"]

    def test_remove_is_exact(self, manager, seeker):
        ok, message = manager.remove_skill(seeker.id, "sql")
        assert not ok
        assert message == "'sql' is not in your skills."
