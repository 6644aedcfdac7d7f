"""Domain entities."""

from taskhub.domain.entities.scope_member import ScopeMember
from taskhub.domain.entities.task import Task
from taskhub.domain.entities.task_dependency import TaskDependency
from taskhub.domain.entities.workspace import Workspace, WorkspaceMember

__all__ = [
    "ScopeMember",
    "Task",
    "TaskDependency",
    "Workspace",
    "WorkspaceMember",
]
