"""Transaction helper for repositories.

Repositories commit their own writes. A write that spans several rows or
tables (an evaluation and its attributes, a membership and the player's age
groups) runs inside ``atomic`` so it commits once or not at all.

Usage:
    async with atomic(self.session):
        await self.session.execute(delete(EvaluationAttribute)...)
        await self.session.execute(delete(AttributeEvaluation)...)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession


@asynccontextmanager
async def atomic(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Commit on success; roll back and re-raise on any exception."""
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
