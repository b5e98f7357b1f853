"""Dispatcher dependency.

Builds a request-scoped ``Dispatcher`` bound to the request's database
session. Routes depend on this instead of on individual handlers.

Usage:
    @router.get("/clubs/{club_id}")
    async def get_club(
        club_id: UUID,
        dispatcher: Dispatcher = Depends(get_dispatcher),
    ) -> ClubDetailResponse:
        ...
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.dispatcher import Dispatcher


async def get_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> "Dispatcher":
    """Return a dispatcher for the current request (request-scoped)."""
    from src.application.dispatcher import Dispatcher

    return Dispatcher(session, logger=get_logger())
