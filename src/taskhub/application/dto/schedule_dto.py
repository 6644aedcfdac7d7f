"""DTOs for Gantt rescheduling, timeline validation and chart data."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from taskhub.domain.value_objects import DependencyType, TaskStatus


@dataclass
class RescheduledTask:
    """Dates of a dependent task before and after the cascade."""

    task_id: str
    title: str
    old_start_date: datetime | None
    old_due_date: datetime | None
    new_start_date: datetime | None
    new_due_date: datetime | None


@dataclass
class RescheduleResult:
    """Outcome of moving one task and cascading to its dependents."""

    task_id: str
    delta: timedelta
    updated: int = 0
    tasks: list[RescheduledTask] = field(default_factory=list)


@dataclass
class TimelineValidation:
    """Date constraint violations of one task; valid when there are none."""

    task_id: str
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass
class GanttLink:
    depends_on_id: str
    type: DependencyType


@dataclass
class GanttTask:
    """One bar of a space's Gantt chart."""

    task_id: str
    title: str
    status: TaskStatus
    start_date: datetime | None
    due_date: datetime | None
    duration_days: int
    progress: int
    is_milestone: bool
    assignee_id: str | None = None
    dependencies: list[GanttLink] = field(default_factory=list)
