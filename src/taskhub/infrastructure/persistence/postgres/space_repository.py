"""PostgreSQL space repository implementation."""

from psycopg import AsyncConnection


class PostgresSpaceRepository:
    """Space roster lookups."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def has_member(self, space_id: str, user_id: str) -> bool:
        """Check whether user is on the space roster."""
        cur = await self._conn.execute(
            "SELECT 1 FROM space_roster WHERE space_id = %s AND user_id = %s",
            (space_id, user_id),
        )
        return await cur.fetchone() is not None
