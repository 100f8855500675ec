"""
Recruiter authentication: password hashing, bearer tokens, registration.

Tokens are HS256 JWTs carrying the recruiter id in `sub`. The company is
always re-read from the database, so a token never grants access to a
company the recruiter no longer belongs to.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import bcrypt
import jwt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import ConflictError
from app.models.company import Company
from app.models.recruiter import Recruiter
from app.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(recruiter_id: UUID, expires_in: Optional[timedelta] = None) -> str:
    """Sign a bearer token for a recruiter."""
    now = datetime.now(timezone.utc)
    expires_at = now + (expires_in or timedelta(days=settings.access_token_ttl_days))
    payload = {
        "sub": str(recruiter_id),
        "iat": now,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[UUID]:
    """
    Return the recruiter id from a token, or None if the token is
    expired, tampered with, or otherwise unreadable.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
        return UUID(payload["sub"])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except (jwt.InvalidTokenError, KeyError, ValueError):
        return None


async def register_recruiter(db: AsyncSession, data: RegisterRequest) -> Recruiter:
    """
    Create a company and its first recruiter in one transaction.

    Raises:
        ConflictError: If the email or the (case-folded) slug is taken
    """
    email = data.email.lower()

    existing = await db.execute(select(Recruiter.id).where(Recruiter.email == email))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError("Email is already registered")

    existing = await db.execute(select(Company.id).where(Company.slug == data.company_slug))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError(f"Slug '{data.company_slug}' is already taken")

    company = Company(name=data.company_name, slug=data.company_slug)
    password_hash = hash_password(data.password)

    try:
        db.add(company)
        await db.flush()

        recruiter = Recruiter(
            email=email,
            password_hash=password_hash,
            name=data.name,
            company_id=company.id,
        )
        db.add(recruiter)
        await db.commit()
    except IntegrityError:
        # A concurrent registration took the email or slug after our checks
        await db.rollback()
        logger.warning(f"Registration race lost for {email} / {data.company_slug}")
        raise ConflictError("Email or slug is already taken")

    await db.refresh(recruiter)
    await db.refresh(company)

    logger.info(f"Registered recruiter {recruiter.email} for company {company.slug}")
    return recruiter


async def authenticate(db: AsyncSession, email: str, password: str) -> Optional[Recruiter]:
    """Return the recruiter for valid credentials, else None."""
    result = await db.execute(select(Recruiter).where(Recruiter.email == email.lower()))
    recruiter = result.scalar_one_or_none()

    if recruiter is None or not verify_password(password, recruiter.password_hash):
        return None

    recruiter.last_login_at = datetime.utcnow()
    await db.commit()
    await db.refresh(recruiter)
    return recruiter


async def get_recruiter_company(db: AsyncSession, recruiter: Recruiter) -> Company:
    company = await db.get(Company, recruiter.company_id)
    return company
