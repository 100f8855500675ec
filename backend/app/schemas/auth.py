"""Authentication-related Pydantic schemas."""
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.schemas.company import CompanyResponse, normalize_slug

PASSWORD_MIN_LENGTH = 8


class RegisterRequest(BaseModel):
    """Create a company workspace together with its first recruiter."""
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=72)  # bcrypt input limit
    name: str = Field(..., min_length=1, max_length=100)
    company_name: str = Field(..., min_length=1, max_length=100)
    company_slug: str

    @field_validator("company_slug")
    @classmethod
    def _normalize_slug(cls, value: str) -> str:
        return normalize_slug(value)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RecruiterResponse(BaseModel):
    id: UUID
    email: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class MeResponse(BaseModel):
    """The authenticated recruiter and their company."""
    user: RecruiterResponse
    company: CompanyResponse


class AuthResponse(MeResponse):
    """Response after successful registration or login."""
    access_token: str
    token_type: str = "bearer"
