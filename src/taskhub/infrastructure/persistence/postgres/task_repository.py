"""PostgreSQL task repository implementation."""

from psycopg import AsyncConnection

from taskhub.domain.entities import Task
from taskhub.domain.value_objects import TaskStatus

_COLUMNS = (
    "id, workspace_id, space_id, folder_id, list_id, title, status, "
    "assignee_id, start_date, due_date, is_milestone"
)


def _to_entity(r: tuple) -> Task:
    return Task(
        id=r[0],
        workspace_id=r[1],
        space_id=r[2],
        folder_id=r[3],
        list_id=r[4],
        title=r[5],
        status=TaskStatus(r[6]),
        assignee_id=r[7],
        start_date=r[8],
        due_date=r[9],
        is_milestone=r[10],
    )


class PostgresTaskRepository:
    """Task repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, task_id: str) -> Task | None:
        """Get task by id (soft-deleted tasks are invisible)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task WHERE id = %s AND deleted_at IS NULL",
            (task_id,),
        )
        r = await cur.fetchone()
        return _to_entity(r) if r else None

    async def list_by_space(self, workspace_id: str, space_id: str) -> list[Task]:
        """List live tasks of a space, earliest start first, undated last."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task "
            "WHERE workspace_id = %s AND space_id = %s AND deleted_at IS NULL "
            "ORDER BY start_date NULLS LAST, id",
            (workspace_id, space_id),
        )
        return [_to_entity(r) for r in await cur.fetchall()]

    async def get_assignee(self, task_id: str) -> str | None:
        """Get assignee of task."""
        cur = await self._conn.execute(
            "SELECT assignee_id FROM task WHERE id = %s AND deleted_at IS NULL",
            (task_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def update_dates(self, task: Task) -> None:
        """Persist start and due dates."""
        await self._conn.execute(
            "UPDATE task SET start_date = %s, due_date = %s, updated_at = now() WHERE id = %s",
            (task.start_date, task.due_date, task.id),
        )
