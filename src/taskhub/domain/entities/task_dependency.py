"""Task dependency entity - directed edge task -> depends_on."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from taskhub.domain.value_objects import DependencyType


@dataclass
class TaskDependency:
    """task_id cannot progress until depends_on_id satisfies the link type."""

    id: UUID
    task_id: str
    depends_on_id: str
    workspace_id: str
    type: DependencyType
    created_at: datetime
    created_by: str | None = None
