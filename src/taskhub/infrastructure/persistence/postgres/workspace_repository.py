"""PostgreSQL workspace repository implementation."""

import logging

from psycopg import AsyncConnection

from taskhub.domain.entities import Workspace, WorkspaceMember
from taskhub.domain.exceptions import InvalidRole
from taskhub.domain.value_objects import WorkspaceRole

logger = logging.getLogger(__name__)


class PostgresWorkspaceRepository:
    """Workspace repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, workspace_id: str) -> Workspace | None:
        """Get workspace with owner and member roster."""
        cur = await self._conn.execute(
            "SELECT id, owner_id FROM workspace WHERE id = %s AND deleted_at IS NULL",
            (workspace_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None

        cur = await self._conn.execute(
            "SELECT user_id, role FROM workspace_member WHERE workspace_id = %s",
            (workspace_id,),
        )
        members = []
        for user_id, raw_role in await cur.fetchall():
            try:
                role = WorkspaceRole.parse(raw_role)
            except InvalidRole:
                # Quarantined: the member gets no access until the row is fixed.
                logger.warning(
                    "Ignoring membership of %s in workspace %s: unknown role %r",
                    user_id,
                    workspace_id,
                    raw_role,
                )
                continue
            if role is WorkspaceRole.OWNER and user_id != r[1]:
                logger.warning(
                    "Ignoring owner role of %s in workspace %s: not the recorded owner",
                    user_id,
                    workspace_id,
                )
                continue
            members.append(WorkspaceMember(user_id=user_id, role=role))
        return Workspace(id=r[0], owner_id=r[1], members=members)
