from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text, Boolean, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
import uuid
import enum

from app.database import Base
from app.database_types import GUID


class SectionType(str, enum.Enum):
    """Kind of content block on a careers page."""
    ABOUT = "about"
    MISSION = "mission"
    VALUES = "values"
    CULTURE = "culture"
    LIFE = "life"
    BENEFITS = "benefits"
    CUSTOM = "custom"


class CareersSection(Base):
    __tablename__ = "careers_sections"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    company_id = Column(
        GUID,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    type = Column(
        SQLEnum(
            SectionType,
            name="section_type",
            create_type=True,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=SectionType.CUSTOM
    )
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False, default="")
    media_url = Column(String(2048), nullable=True)

    # Ascending order_index = display order. Not unique at the storage
    # level; the bulk reorder keeps it contiguous, single-row edits may not.
    order_index = Column(Integer, nullable=False, default=0)
    is_visible = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    company = relationship("Company", back_populates="sections")
