"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from taskhub.domain.value_objects import ScopeType
from taskhub.infrastructure.persistence.postgres.scope_member_repository import (
    PostgresScopeMemberRepository,
)
from taskhub.infrastructure.persistence.postgres.space_repository import (
    PostgresSpaceRepository,
)
from taskhub.infrastructure.persistence.postgres.task_dependency_repository import (
    PostgresTaskDependencyRepository,
)
from taskhub.infrastructure.persistence.postgres.task_repository import (
    PostgresTaskRepository,
)
from taskhub.infrastructure.persistence.postgres.workspace_repository import (
    PostgresWorkspaceRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._workspaces = PostgresWorkspaceRepository(self._conn)
        self._spaces = PostgresSpaceRepository(self._conn)
        self._members = {
            scope: PostgresScopeMemberRepository(self._conn, scope) for scope in ScopeType
        }
        self._tasks = PostgresTaskRepository(self._conn)
        self._dependencies = PostgresTaskDependencyRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def workspaces(self) -> PostgresWorkspaceRepository:
        return self._workspaces

    @property
    def spaces(self) -> PostgresSpaceRepository:
        return self._spaces

    @property
    def space_members(self) -> PostgresScopeMemberRepository:
        return self._members[ScopeType.SPACE]

    @property
    def folder_members(self) -> PostgresScopeMemberRepository:
        return self._members[ScopeType.FOLDER]

    @property
    def list_members(self) -> PostgresScopeMemberRepository:
        return self._members[ScopeType.LIST]

    @property
    def table_members(self) -> PostgresScopeMemberRepository:
        return self._members[ScopeType.TABLE]

    @property
    def tasks(self) -> PostgresTaskRepository:
        return self._tasks

    @property
    def dependencies(self) -> PostgresTaskDependencyRepository:
        return self._dependencies

    def members_of(self, scope: ScopeType) -> PostgresScopeMemberRepository:
        return self._members[scope]

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
