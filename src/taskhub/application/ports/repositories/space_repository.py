"""Space repository port."""

from typing import Protocol


class SpaceRepository(Protocol):
    """Port for the space roster."""

    async def has_member(self, space_id: str, user_id: str) -> bool: ...
