"""Database models"""
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.models.careers_section import CareersSection, SectionType
from app.models.job import Job, JobType

__all__ = [
    "Company",
    "Recruiter",
    "CareersSection",
    "SectionType",
    "Job",
    "JobType",
]
