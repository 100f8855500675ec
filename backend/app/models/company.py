"""Company model: the tenant root of a careers page."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer
from sqlalchemy.orm import relationship
import uuid

from app.database import Base
from app.database_types import GUID


DEFAULT_PRIMARY_COLOR = "#2563EB"
DEFAULT_SECONDARY_COLOR = "#1E40AF"


class Company(Base):
    __tablename__ = "companies"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)

    # Lowercase [a-z0-9-]+, normalised before it reaches the model
    slug = Column(String(50), nullable=False, unique=True, index=True)

    # Branding
    logo_url = Column(String(2048), nullable=True)
    banner_url = Column(String(2048), nullable=True)
    culture_video_url = Column(String(2048), nullable=True)
    primary_color = Column(String(7), nullable=False, default=DEFAULT_PRIMARY_COLOR)
    secondary_color = Column(String(7), nullable=False, default=DEFAULT_SECONDARY_COLOR)

    # Bumped by every mutation that can change section ordering.
    # Reorder uses it as a compare-and-swap token.
    sections_version = Column(Integer, nullable=False, default=0)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    recruiters = relationship(
        "Recruiter",
        back_populates="company",
        cascade="all, delete-orphan",
    )
    sections = relationship(
        "CareersSection",
        back_populates="company",
        order_by="CareersSection.order_index",
        cascade="all, delete-orphan",
    )
    jobs = relationship(
        "Job",
        back_populates="company",
        cascade="all, delete-orphan",
    )
