"""Workspace entity - tenant container with its member roster."""

from dataclasses import dataclass, field

from taskhub.domain.value_objects import WorkspaceRole


@dataclass
class WorkspaceMember:
    """A user's membership row in a workspace."""

    user_id: str
    role: WorkspaceRole


@dataclass
class Workspace:
    """Workspace - exactly one owner, every other participant is a member row."""

    id: str
    owner_id: str
    members: list[WorkspaceMember] = field(default_factory=list)

    def role_of(self, user_id: str) -> WorkspaceRole | None:
        """Role of user in this workspace, or None without a membership."""
        if self.owner_id == user_id:
            return WorkspaceRole.OWNER
        for member in self.members:
            if member.user_id == user_id:
                return member.role
        return None
