"""
Authentication endpoints for recruiters.

- Register: creates a company workspace and its first recruiter
- Login: email + password, returns a bearer token
- Me: resolves the bearer token to the recruiter and their company

Every protected endpoint depends on get_current_recruiter, which carries
the caller's company_id for ownership checks.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.recruiter import Recruiter
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RecruiterResponse,
    RegisterRequest,
)
from app.schemas.company import CompanyResponse
from app.services.auth import (
    authenticate,
    create_access_token,
    decode_access_token,
    get_recruiter_company,
    register_recruiter,
)

logger = logging.getLogger(__name__)
router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


# Authentication Dependencies
async def get_current_recruiter(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db)
) -> Recruiter:
    """
    Dependency to get the authenticated recruiter from the Authorization header.

    Raises:
        HTTPException 401: If the header is missing, the token is invalid or
            expired, or the recruiter no longer exists
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=401,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    recruiter_id = decode_access_token(credentials.credentials)
    if recruiter_id is None:
        raise HTTPException(
            status_code=401,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    recruiter = await db.get(Recruiter, recruiter_id)
    if recruiter is None:
        raise HTTPException(
            status_code=401,
            detail="Invalid token. User not found.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return recruiter


async def _auth_response(db: AsyncSession, recruiter: Recruiter) -> AuthResponse:
    company = await get_recruiter_company(db, recruiter)
    return AuthResponse(
        access_token=create_access_token(recruiter.id),
        user=RecruiterResponse.model_validate(recruiter),
        company=CompanyResponse.model_validate(company),
    )


# Endpoints
@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a recruiter together with a new company.

    Returns:
        201: Company and recruiter created, token issued
        400: Validation failed (bad email, short password, malformed slug)
        409: Email or slug already taken
    """
    recruiter = await register_recruiter(db, request)
    return await _auth_response(db, recruiter)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Exchange email + password for a bearer token.

    Returns:
        200: Credentials valid
        401: Unknown email or wrong password (same message for both)
    """
    recruiter = await authenticate(db, request.email, request.password)
    if recruiter is None:
        logger.warning(f"Failed login attempt for {request.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info(f"Successful login: {recruiter.email}")
    return await _auth_response(db, recruiter)


@router.get("/me", response_model=MeResponse)
async def me(
    current_recruiter: Recruiter = Depends(get_current_recruiter),
    db: AsyncSession = Depends(get_db)
):
    """Return the authenticated recruiter and their company."""
    company = await get_recruiter_company(db, current_recruiter)
    return MeResponse(
        user=RecruiterResponse.model_validate(current_recruiter),
        company=CompanyResponse.model_validate(company),
    )
