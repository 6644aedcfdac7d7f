"""DTOs for dependency-gated transitions."""

from dataclasses import dataclass, field

from taskhub.domain.entities import TaskDependency


@dataclass
class BlockingTask:
    """A predecessor that currently blocks a status change."""

    dependency: TaskDependency
    task_id: str
    title: str
    reason: str


@dataclass
class TransitionCheck:
    """Result of checking whether a task may move to a new status."""

    allowed: bool
    reason: str | None = None
    blocking_tasks: list[BlockingTask] = field(default_factory=list)
