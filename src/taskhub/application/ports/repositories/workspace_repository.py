"""Workspace repository port."""

from typing import Protocol

from taskhub.domain.entities import Workspace


class WorkspaceRepository(Protocol):
    """Port for workspace membership lookups."""

    async def get_by_id(self, workspace_id: str) -> Workspace | None: ...
