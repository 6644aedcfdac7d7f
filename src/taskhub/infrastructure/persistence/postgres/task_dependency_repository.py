"""PostgreSQL task dependency repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from taskhub.domain.entities import TaskDependency
from taskhub.domain.value_objects import DependencyType

_COLUMNS = "id, task_id, depends_on_id, workspace_id, type, created_at, created_by"


def _to_entity(r: tuple) -> TaskDependency:
    return TaskDependency(
        id=r[0],
        task_id=r[1],
        depends_on_id=r[2],
        workspace_id=r[3],
        type=DependencyType(r[4]),
        created_at=r[5],
        created_by=r[6],
    )


class PostgresTaskDependencyRepository:
    """Task dependency repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, dependency_id: UUID) -> TaskDependency | None:
        """Get dependency by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task_dependency WHERE id = %s",
            (dependency_id,),
        )
        r = await cur.fetchone()
        return _to_entity(r) if r else None

    async def find(self, task_id: str, depends_on_id: str) -> TaskDependency | None:
        """Get the edge task_id -> depends_on_id if present."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task_dependency WHERE task_id = %s AND depends_on_id = %s",
            (task_id, depends_on_id),
        )
        r = await cur.fetchone()
        return _to_entity(r) if r else None

    async def list_by_task(self, task_id: str) -> list[TaskDependency]:
        """List what task_id depends on."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task_dependency WHERE task_id = %s ORDER BY created_at",
            (task_id,),
        )
        return [_to_entity(r) for r in await cur.fetchall()]

    async def list_by_depends_on(self, depends_on_id: str) -> list[TaskDependency]:
        """List edges pointing at depends_on_id (its dependents)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task_dependency WHERE depends_on_id = %s ORDER BY created_at",
            (depends_on_id,),
        )
        return [_to_entity(r) for r in await cur.fetchall()]

    async def list_by_tasks(self, task_ids: list[str]) -> list[TaskDependency]:
        """List what any of task_ids depends on."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM task_dependency WHERE task_id = ANY(%s) ORDER BY created_at",
            (task_ids,),
        )
        return [_to_entity(r) for r in await cur.fetchall()]

    async def create(self, dependency: TaskDependency) -> TaskDependency:
        """Create dependency."""
        await self._conn.execute(
            f"INSERT INTO task_dependency ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                dependency.id,
                dependency.task_id,
                dependency.depends_on_id,
                dependency.workspace_id,
                dependency.type.value,
                dependency.created_at,
                dependency.created_by,
            ),
        )
        return dependency

    async def delete(self, dependency_id: UUID) -> None:
        """Delete dependency."""
        await self._conn.execute(
            "DELETE FROM task_dependency WHERE id = %s",
            (dependency_id,),
        )
