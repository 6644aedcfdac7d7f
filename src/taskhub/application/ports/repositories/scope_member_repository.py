"""Scope member (override) repository port."""

from typing import Protocol
from uuid import UUID

from taskhub.domain.entities import ScopeMember


class ScopeMemberRepository(Protocol):
    """Port for per-user overrides on one kind of scope (space, folder, list or table).

    Lookups are scoped to one workspace.
    """

    async def get_permission_level(
        self, workspace_id: str, user_id: str, scope_id: str
    ) -> str | None: ...

    async def get_for_scope(
        self, workspace_id: str, scope_id: str, user_id: str
    ) -> ScopeMember | None: ...

    async def list_by_scope(self, workspace_id: str, scope_id: str) -> list[ScopeMember]: ...

    async def upsert(self, member: ScopeMember) -> ScopeMember: ...

    async def delete(self, member_id: UUID) -> None: ...
