"""Scope member entity - per-user override on a space, folder, list or table."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from taskhub.domain.value_objects import ScopeType


@dataclass
class ScopeMember:
    """Override that replaces the workspace role inside one scope.

    At most one row exists per (workspace_id, scope, scope_id, user_id).
    """

    id: UUID
    scope: ScopeType
    scope_id: str
    user_id: str
    workspace_id: str
    permission_level: str
    created_at: datetime
    added_by: str | None = None
