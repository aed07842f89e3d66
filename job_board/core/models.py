"""
Core data models for the job board.

Records are stored by the data-access layer as plain dicts; these dataclasses
give each collection an explicit shape with clear nullability per field.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
import re
import uuid


class UserRole(Enum):
    """Account type of a profile."""
    JOB_SEEKER = "job_seeker"
    EMPLOYER = "employer"


class JobStatus(Enum):
    """Publication status of a job posting."""
    ACTIVE = "active"
    CLOSED = "closed"
    DRAFT = "draft"


class ApplicationStatus(Enum):
    """Review status of a job application."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


def _now() -> str:
    return datetime.now().isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_salary(text) -> Optional[int]:
    """
    Parse a salary form field into an optional integer.

    Mirrors a browser's parseInt: leading whitespace, an optional sign and
    the leading run of digits are used, the rest is ignored. Blank or
    unparseable input gives None.
    """
    if text is None:
        return None
    if isinstance(text, int):
        return text
    match = _LEADING_INT.match(str(text))
    if not match:
        return None
    return int(match.group(1))


@dataclass
class Profile:
    """A job seeker or employer account profile."""
    id: str = field(default_factory=_new_id)
    email: str = ""
    role: UserRole = UserRole.JOB_SEEKER
    full_name: Optional[str] = None
    company_name: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    skills: list[str] = field(default_factory=list)
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER

    @property
    def has_skills(self) -> bool:
        return bool(self.skills)

    @property
    def display_name(self) -> str:
        return self.full_name or self.email

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "role": self.role.value,
            "full_name": self.full_name,
            "company_name": self.company_name,
            "location": self.location,
            "phone": self.phone,
            "bio": self.bio,
            "avatar_url": self.avatar_url,
            "skills": list(self.skills),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        return cls(
            id=data.get("id") or _new_id(),
            email=data.get("email", ""),
            role=UserRole(data.get("role") or UserRole.JOB_SEEKER.value),
            full_name=data.get("full_name"),
            company_name=data.get("company_name"),
            location=data.get("location"),
            phone=data.get("phone"),
            bio=data.get("bio"),
            avatar_url=data.get("avatar_url"),
            skills=list(data.get("skills") or []),
            created_at=data.get("created_at") or _now(),
            updated_at=data.get("updated_at") or _now(),
        )


@dataclass
class JobPosting:
    """A job posting created by an employer."""
    id: str = field(default_factory=_new_id)
    title: str = ""
    company_name: str = ""
    description: str = ""
    employer_id: str = ""
    location: Optional[str] = None
    job_type: Optional[str] = None  # free-form, e.g. "Full-time", "Contract"
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    requirements: Optional[str] = None
    required_skills: list[str] = field(default_factory=list)
    status: JobStatus = JobStatus.ACTIVE
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    @property
    def is_active(self) -> bool:
        return self.status == JobStatus.ACTIVE

    @property
    def salary_display(self) -> Optional[str]:
        """Human readable salary range, or None when no bound is stated."""
        if not self.salary_min and not self.salary_max:
            return None
        if self.salary_min and self.salary_max:
            return f"${self.salary_min:,} - ${self.salary_max:,}"
        if self.salary_min:
            return f"${self.salary_min:,}+"
        return f"Up to ${self.salary_max:,}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company_name": self.company_name,
            "description": self.description,
            "employer_id": self.employer_id,
            "location": self.location,
            "job_type": self.job_type,
            "salary_min": self.salary_min,
            "salary_max": self.salary_max,
            "requirements": self.requirements,
            "required_skills": list(self.required_skills),
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        return cls(
            id=data.get("id") or _new_id(),
            title=data.get("title", ""),
            company_name=data.get("company_name", ""),
            description=data.get("description", ""),
            employer_id=data.get("employer_id", ""),
            location=data.get("location"),
            job_type=data.get("job_type"),
            salary_min=data.get("salary_min"),
            salary_max=data.get("salary_max"),
            requirements=data.get("requirements"),
            required_skills=list(data.get("required_skills") or []),
            status=JobStatus(data.get("status") or JobStatus.ACTIVE.value),
            created_at=data.get("created_at") or _now(),
            updated_at=data.get("updated_at") or _now(),
        )


@dataclass
class JobApplication:
    """A job seeker's application to a posting."""
    id: str = field(default_factory=_new_id)
    job_id: str = ""
    applicant_id: str = ""
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: str = field(default_factory=_now)
    reviewed_at: Optional[str] = None
    cover_letter: Optional[str] = None
    skill: Optional[str] = None  # applicant skills at apply time, comma separated
    cv_id: Optional[str] = None
    resume_url: Optional[str] = None

    @property
    def submitted_skills(self) -> list[str]:
        if not self.skill:
            return []
        return [s for s in self.skill.split(", ") if s]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "job_id": self.job_id,
            "applicant_id": self.applicant_id,
            "status": self.status.value,
            "applied_at": self.applied_at,
            "reviewed_at": self.reviewed_at,
            "cover_letter": self.cover_letter,
            "skill": self.skill,
            "cv_id": self.cv_id,
            "resume_url": self.resume_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobApplication":
        return cls(
            id=data.get("id") or _new_id(),
            job_id=data.get("job_id", ""),
            applicant_id=data.get("applicant_id", ""),
            status=ApplicationStatus(data.get("status") or ApplicationStatus.PENDING.value),
            applied_at=data.get("applied_at") or _now(),
            reviewed_at=data.get("reviewed_at"),
            cover_letter=data.get("cover_letter"),
            skill=data.get("skill"),
            cv_id=data.get("cv_id"),
            resume_url=data.get("resume_url"),
        )


@dataclass
class Rating:
    """An employer's rating of a job seeker, tied to one application."""
    id: str = field(default_factory=_new_id)
    application_id: str = ""
    employer_id: str = ""
    job_seeker_id: str = ""
    rating: int = 0  # 1-5 stars
    review: Optional[str] = None
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "application_id": self.application_id,
            "employer_id": self.employer_id,
            "job_seeker_id": self.job_seeker_id,
            "rating": self.rating,
            "review": self.review,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Rating":
        return cls(
            id=data.get("id") or _new_id(),
            application_id=data.get("application_id", ""),
            employer_id=data.get("employer_id", ""),
            job_seeker_id=data.get("job_seeker_id", ""),
            rating=int(data.get("rating") or 0),
            review=data.get("review"),
            created_at=data.get("created_at") or _now(),
            updated_at=data.get("updated_at") or _now(),
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Active job filter. Empty or missing fields impose no constraint."""
    search: str = ""
    location: str = ""
    job_type: str = ""
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None

    @classmethod
    def from_form(
        cls,
        search: Optional[str] = "",
        location: Optional[str] = "",
        job_type: Optional[str] = "",
        salary_min: Optional[str] = "",
        salary_max: Optional[str] = "",
    ) -> "FilterCriteria":
        """Build criteria from raw filter form strings."""
        return cls(
            search=search or "",
            location=location or "",
            job_type=job_type or "",
            salary_min=parse_salary(salary_min),
            salary_max=parse_salary(salary_max),
        )

    @property
    def is_active(self) -> bool:
        return bool(
            self.search.strip()
            or self.location.strip()
            or self.job_type.strip()
            or self.salary_min is not None
            or self.salary_max is not None
        )

    def to_dict(self) -> dict:
        return {
            "search": self.search,
            "location": self.location,
            "job_type": self.job_type,
            "salary_min": self.salary_min,
            "salary_max": self.salary_max,
        }


@dataclass(frozen=True)
class SkillComparisonResult:
    """Which required skills a candidate has and which they lack."""
    matching: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    @property
    def can_apply(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict:
        return {
            "matching": list(self.matching),
            "missing": list(self.missing),
            "can_apply": self.can_apply,
        }
