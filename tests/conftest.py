"""Pytest fixtures for TaskHub tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

import pytest

from taskhub.domain.entities import (
    ScopeMember,
    Task,
    TaskDependency,
    Workspace,
    WorkspaceMember,
)
from taskhub.domain.value_objects import ScopeType, WorkspaceRole


# --- Fake repositories ---


class FakeWorkspaceRepository:
    """In-memory workspace repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Workspace] = {}
        self.fail_with: Exception | None = None

    async def get_by_id(self, workspace_id: str) -> Workspace | None:
        if self.fail_with:
            raise self.fail_with
        return self._by_id.get(workspace_id)

    def add_workspace(self, workspace_id: str, owner_id: str) -> Workspace:
        """Helper to add workspace for tests."""
        workspace = Workspace(id=workspace_id, owner_id=owner_id)
        self._by_id[workspace_id] = workspace
        return workspace

    def add_member(self, workspace_id: str, user_id: str, role: WorkspaceRole) -> None:
        """Helper to add a member row for tests."""
        self._by_id[workspace_id].members.append(WorkspaceMember(user_id=user_id, role=role))


class FakeScopeMemberRepository:
    """In-memory override repository for one scope."""

    def __init__(self, scope: ScopeType) -> None:
        self.scope = scope
        self._by_id: dict[UUID, ScopeMember] = {}
        self.fail_with: Exception | None = None

    async def get_permission_level(
        self, workspace_id: str, user_id: str, scope_id: str
    ) -> str | None:
        if self.fail_with:
            raise self.fail_with
        member = await self.get_for_scope(workspace_id, scope_id, user_id)
        return member.permission_level if member else None

    async def get_for_scope(
        self, workspace_id: str, scope_id: str, user_id: str
    ) -> ScopeMember | None:
        for m in self._by_id.values():
            if m.workspace_id == workspace_id and m.scope_id == scope_id and m.user_id == user_id:
                return m
        return None

    async def list_by_scope(self, workspace_id: str, scope_id: str) -> list[ScopeMember]:
        return [
            m
            for m in self._by_id.values()
            if m.workspace_id == workspace_id and m.scope_id == scope_id
        ]

    async def upsert(self, member: ScopeMember) -> ScopeMember:
        existing = await self.get_for_scope(member.workspace_id, member.scope_id, member.user_id)
        if existing and existing.id != member.id:
            self._by_id.pop(existing.id)
        self._by_id[member.id] = member
        return member

    async def delete(self, member_id: UUID) -> None:
        self._by_id.pop(member_id, None)

    def add(self, member: ScopeMember) -> ScopeMember:
        """Helper to store an override row as-is for tests."""
        self._by_id[member.id] = member
        return member


class FakeSpaceRepository:
    """In-memory space roster."""

    def __init__(self) -> None:
        self._roster: set[tuple[str, str]] = set()

    async def has_member(self, space_id: str, user_id: str) -> bool:
        return (space_id, user_id) in self._roster

    def add_member(self, space_id: str, user_id: str) -> None:
        """Helper to put user on a space roster."""
        self._roster.add((space_id, user_id))


class FakeTaskRepository:
    """In-memory task repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Task] = {}
        self.updated: list[str] = []

    async def get_by_id(self, task_id: str) -> Task | None:
        return self._by_id.get(task_id)

    async def get_assignee(self, task_id: str) -> str | None:
        task = self._by_id.get(task_id)
        return task.assignee_id if task else None

    async def update_dates(self, task: Task) -> None:
        self._by_id[task.id] = task
        self.updated.append(task.id)

    async def list_by_space(self, workspace_id: str, space_id: str) -> list[Task]:
        tasks = [
            t for t in self._by_id.values() if t.workspace_id == workspace_id and t.space_id == space_id
        ]
        return sorted(tasks, key=lambda t: (t.start_date is None, t.start_date or 0, t.id))

    def add(self, task: Task) -> Task:
        """Helper to add task for tests."""
        self._by_id[task.id] = task
        return task


class FakeTaskDependencyRepository:
    """In-memory dependency edges."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, TaskDependency] = {}

    async def get_by_id(self, dependency_id: UUID) -> TaskDependency | None:
        return self._by_id.get(dependency_id)

    async def find(self, task_id: str, depends_on_id: str) -> TaskDependency | None:
        for d in self._by_id.values():
            if d.task_id == task_id and d.depends_on_id == depends_on_id:
                return d
        return None

    async def list_by_task(self, task_id: str) -> list[TaskDependency]:
        return [d for d in self._by_id.values() if d.task_id == task_id]

    async def list_by_depends_on(self, depends_on_id: str) -> list[TaskDependency]:
        return [d for d in self._by_id.values() if d.depends_on_id == depends_on_id]

    async def list_by_tasks(self, task_ids: list[str]) -> list[TaskDependency]:
        return [d for d in self._by_id.values() if d.task_id in task_ids]

    async def create(self, dependency: TaskDependency) -> TaskDependency:
        self._by_id[dependency.id] = dependency
        return dependency

    async def delete(self, dependency_id: UUID) -> None:
        self._by_id.pop(dependency_id, None)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.workspaces = FakeWorkspaceRepository()
        self.spaces = FakeSpaceRepository()
        self._members = {scope: FakeScopeMemberRepository(scope) for scope in ScopeType}
        self.tasks = FakeTaskRepository()
        self.dependencies = FakeTaskDependencyRepository()

    @property
    def space_members(self) -> FakeScopeMemberRepository:
        return self._members[ScopeType.SPACE]

    @property
    def folder_members(self) -> FakeScopeMemberRepository:
        return self._members[ScopeType.FOLDER]

    @property
    def list_members(self) -> FakeScopeMemberRepository:
        return self._members[ScopeType.LIST]

    @property
    def table_members(self) -> FakeScopeMemberRepository:
        return self._members[ScopeType.TABLE]

    def members_of(self, scope: ScopeType) -> FakeScopeMemberRepository:
        return self._members[scope]

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so tests can seed it up front."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def make_bounded_factory(uow: FakeUnitOfWork, connections: int = 1, timeout: float = 0.2):
    """Factory that hands out at most `connections` units of work at once.

    Opening one more while all are held times out, like a pool with no free
    connection.
    """
    slots = asyncio.Semaphore(connections)

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        await asyncio.wait_for(slots.acquire(), timeout)
        try:
            yield uow
        finally:
            slots.release()

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.can.return_value = True
    mock.can_access_table.return_value = True
    mock.is_admin_or_owner.return_value = True
    mock.get_user_role.return_value = WorkspaceRole.ADMIN
    return mock
