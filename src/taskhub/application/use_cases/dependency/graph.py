"""Dependency graph traversal."""

from taskhub.application.ports.repositories import TaskDependencyRepository


async def check_circular_dependency(
    dependencies: TaskDependencyRepository,
    from_task_id: str,
    to_task_id: str,
    visited: set[str] | None = None,
) -> bool:
    """Return True if to_task_id is reachable from from_task_id over "depends on" edges.

    Called as check_circular_dependency(repo, depends_on_id, task_id) before
    adding task_id -> depends_on_id: reaching task_id would close a cycle.
    A task reaching itself counts as circular.
    """
    if from_task_id == to_task_id:
        return True
    if visited is None:
        visited = set()
    if from_task_id in visited:
        return False
    visited.add(from_task_id)

    for dependency in await dependencies.list_by_task(from_task_id):
        if await check_circular_dependency(
            dependencies, dependency.depends_on_id, to_task_id, visited
        ):
            return True
    return False
