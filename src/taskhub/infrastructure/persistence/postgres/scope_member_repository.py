"""PostgreSQL scope member (override) repository implementation."""

import logging
from uuid import UUID

from psycopg import AsyncConnection

from taskhub.domain.entities import ScopeMember
from taskhub.domain.value_objects import ScopeType

logger = logging.getLogger(__name__)

_TABLES = {
    ScopeType.SPACE: "space_member",
    ScopeType.FOLDER: "folder_member",
    ScopeType.LIST: "list_member",
    ScopeType.TABLE: "table_member",
}

_COLUMNS = "id, scope_id, user_id, workspace_id, permission_level, created_at, added_by"


class PostgresScopeMemberRepository:
    """Override repository for one scope; each scope has its own table.

    Every lookup is keyed by workspace, so an override row only ever
    applies inside the workspace that granted it.
    """

    def __init__(self, conn: AsyncConnection, scope: ScopeType) -> None:
        self._conn = conn
        self._scope = scope
        self._table = _TABLES[scope]

    def _to_entity(self, r: tuple) -> ScopeMember:
        return ScopeMember(
            id=r[0],
            scope=self._scope,
            scope_id=r[1],
            user_id=r[2],
            workspace_id=r[3],
            permission_level=r[4],
            created_at=r[5],
            added_by=r[6],
        )

    async def get_permission_level(
        self, workspace_id: str, user_id: str, scope_id: str
    ) -> str | None:
        """Get the override level of user on scope, None without override."""
        cur = await self._conn.execute(
            f"SELECT permission_level FROM {self._table} "
            "WHERE workspace_id = %s AND scope_id = %s AND user_id = %s",
            (workspace_id, scope_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        level = r[0]
        if level not in self._scope.level_type.__members__.values():
            # Still returned: the permission matrix denies unknown levels.
            logger.warning(
                "Unknown %s permission level %r for %s on %s", self._scope, level, user_id, scope_id
            )
        return level

    async def get_for_scope(
        self, workspace_id: str, scope_id: str, user_id: str
    ) -> ScopeMember | None:
        """Get override row for user on scope."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM {self._table} "
            "WHERE workspace_id = %s AND scope_id = %s AND user_id = %s",
            (workspace_id, scope_id, user_id),
        )
        r = await cur.fetchone()
        return self._to_entity(r) if r else None

    async def list_by_scope(self, workspace_id: str, scope_id: str) -> list[ScopeMember]:
        """List overrides on scope."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM {self._table} "
            "WHERE workspace_id = %s AND scope_id = %s ORDER BY created_at",
            (workspace_id, scope_id),
        )
        return [self._to_entity(r) for r in await cur.fetchall()]

    async def upsert(self, member: ScopeMember) -> ScopeMember:
        """Insert override, replacing the level of an existing (workspace, scope, user) row."""
        await self._conn.execute(
            f"INSERT INTO {self._table} ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (workspace_id, scope_id, user_id) DO UPDATE "
            "SET permission_level = EXCLUDED.permission_level, added_by = EXCLUDED.added_by",
            (
                member.id,
                member.scope_id,
                member.user_id,
                member.workspace_id,
                member.permission_level,
                member.created_at,
                member.added_by,
            ),
        )
        return member

    async def delete(self, member_id: UUID) -> None:
        """Delete override."""
        await self._conn.execute(
            f"DELETE FROM {self._table} WHERE id = %s",
            (member_id,),
        )
