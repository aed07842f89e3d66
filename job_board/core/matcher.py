"""
Skill Matcher - Compares a candidate's skills against a job's required skills.

Two skills are equal when their lower-cased forms are identical. There is no
trimming, no alias table and no partial matching: "Java Script" and
"JavaScript" are different skills, "SQL" and "sql" are the same one.

Matching is positional rather than set based. A skill listed twice by the
candidate is reported twice if it satisfies a requirement.
"""

from typing import Iterable, Optional, Sequence

from .models import JobPosting, SkillComparisonResult


def _folded(skills: Optional[Iterable[str]]) -> set[str]:
    return {skill.lower() for skill in skills or ()}


def matching_skills(
    candidate_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]],
) -> list[str]:
    """Candidate skills (in candidate order) that satisfy some requirement."""
    required = _folded(required_skills)
    return [skill for skill in candidate_skills or () if skill.lower() in required]


def missing_skills(
    candidate_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]],
) -> list[str]:
    """Required skills (in required order) the candidate does not have."""
    candidate = _folded(candidate_skills)
    return [skill for skill in required_skills or () if skill.lower() not in candidate]


def can_apply(
    candidate_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]],
) -> bool:
    """True when no required skill is missing. Always true without requirements."""
    return not missing_skills(candidate_skills, required_skills)


def compare_skills(
    candidate_skills: Optional[Sequence[str]],
    required_skills: Optional[Sequence[str]],
) -> SkillComparisonResult:
    """Matching and missing skills in one result."""
    return SkillComparisonResult(
        matching=tuple(matching_skills(candidate_skills, required_skills)),
        missing=tuple(missing_skills(candidate_skills, required_skills)),
    )


def additional_skills(
    candidate_skills: Optional[Sequence[str]],
    matching: Optional[Sequence[str]],
) -> list[str]:
    """Candidate skills beyond the ones that matched a requirement."""
    matched = list(matching or ())
    return [skill for skill in candidate_skills or () if skill not in matched]


def add_skill(skills: Optional[Sequence[str]], new_skill: str) -> list[str]:
    """
    Return a new skill list with ``new_skill`` appended.

    The new skill is trimmed. Blank input and exact duplicates are rejected
    with ValueError; the duplicate check is case-sensitive, so "sql" can sit
    next to "SQL".
    """
    trimmed = (new_skill or "").strip()
    if not trimmed:
        raise ValueError("Skill name cannot be empty.")

    current = list(skills or ())
    if trimmed in current:
        raise ValueError("This skill is already in your list.")

    current.append(trimmed)
    return current


def remove_skill(skills: Optional[Sequence[str]], skill_to_remove: str) -> list[str]:
    """Return a new skill list without any exact occurrence of the skill."""
    return [skill for skill in skills or () if skill != skill_to_remove]


class SkillMatcher:
    """Compares one candidate's skills against job postings."""

    def __init__(self, skills: Optional[Sequence[str]] = None):
        self.skills = list(skills or ())

    def compare(self, job: JobPosting) -> SkillComparisonResult:
        """Skill comparison for a single job."""
        return compare_skills(self.skills, job.required_skills)

    def can_apply_to(self, job: JobPosting) -> bool:
        return can_apply(self.skills, job.required_skills)

    def eligible_jobs(self, jobs: Iterable[JobPosting]) -> list[JobPosting]:
        """Jobs whose every required skill the candidate has, in input order."""
        return [job for job in jobs if self.can_apply_to(job)]

    def additional_skills(self, job: JobPosting) -> list[str]:
        """Candidate skills the job does not ask for."""
        return additional_skills(self.skills, self.compare(job).matching)
