"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from taskhub.application.ports.repositories import (
    ScopeMemberRepository,
    SpaceRepository,
    TaskDependencyRepository,
    TaskRepository,
    WorkspaceRepository,
)
from taskhub.domain.value_objects import ScopeType


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def workspaces(self) -> WorkspaceRepository: ...

    @property
    def spaces(self) -> SpaceRepository: ...

    @property
    def space_members(self) -> ScopeMemberRepository: ...

    @property
    def folder_members(self) -> ScopeMemberRepository: ...

    @property
    def list_members(self) -> ScopeMemberRepository: ...

    @property
    def table_members(self) -> ScopeMemberRepository: ...

    @property
    def tasks(self) -> TaskRepository: ...

    @property
    def dependencies(self) -> TaskDependencyRepository: ...

    def members_of(self, scope: ScopeType) -> ScopeMemberRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
