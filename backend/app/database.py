"""
Database engine, session factory and declarative base.

Every request gets its own AsyncSession through the get_db dependency.
Tests swap `engine` and `AsyncSessionLocal` for an in-memory SQLite pair,
so get_db looks the session factory up at call time.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


engine = create_async_engine(settings.database_url, echo=settings.debug)

AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped session."""
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def transactional(db: AsyncSession):
    """Commit on success, roll back and re-raise on any error."""
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
