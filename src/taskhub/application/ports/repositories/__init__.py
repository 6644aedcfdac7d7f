"""Repository ports."""

from taskhub.application.ports.repositories.scope_member_repository import (
    ScopeMemberRepository,
)
from taskhub.application.ports.repositories.space_repository import SpaceRepository
from taskhub.application.ports.repositories.task_dependency_repository import (
    TaskDependencyRepository,
)
from taskhub.application.ports.repositories.task_repository import TaskRepository
from taskhub.application.ports.repositories.workspace_repository import (
    WorkspaceRepository,
)

__all__ = [
    "ScopeMemberRepository",
    "SpaceRepository",
    "TaskDependencyRepository",
    "TaskRepository",
    "WorkspaceRepository",
]
