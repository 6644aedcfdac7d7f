"""Workspace roles."""

from enum import StrEnum

from taskhub.domain.exceptions import InvalidRole


class WorkspaceRole(StrEnum):
    """Role of a user inside a workspace."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"

    @classmethod
    def parse(cls, raw: str) -> "WorkspaceRole":
        """Parse a stored role string (case-insensitive).

        Raises InvalidRole for anything outside the known set instead of
        falling back to a weaker role.
        """
        try:
            return cls(raw.strip().lower())
        except (AttributeError, ValueError):
            raise InvalidRole(f"Unknown workspace role: {raw!r}") from None
