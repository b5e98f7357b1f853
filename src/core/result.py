"""Result types for railway-oriented programming.

Handlers never raise for expected failures. They return a Result so that the
caller (dispatcher, router, test) decides how a failure is surfaced.

Usage:
    async def handle(self, cmd: AddPlayerToTeam) -> Result[TeamMembershipResult, DomainError]:
        team = await self._teams.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=NotFoundError(...))
        return Success(value=TeamMembershipResult(...))

    match await handler.handle(cmd):
        case Success(value=membership):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
