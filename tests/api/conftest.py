"""Fixtures for API tests."""

import falcon.asgi
import pytest

from taskhub.application.use_cases.dependency.check_status_transition import (
    CheckStatusTransitionUseCase,
)
from taskhub.application.use_cases.dependency.create_dependency import CreateDependencyUseCase
from taskhub.application.use_cases.dependency.delete_dependency import DeleteDependencyUseCase
from taskhub.application.use_cases.permission.assign_scope_permission import (
    AssignScopePermissionUseCase,
)
from taskhub.application.use_cases.permission.revoke_scope_permission import (
    RevokeScopePermissionUseCase,
)
from taskhub.application.use_cases.schedule.get_gantt_data import GetGanttDataUseCase
from taskhub.application.use_cases.schedule.reschedule_task import RescheduleTaskUseCase
from taskhub.application.use_cases.schedule.validate_timeline import ValidateTimelineUseCase
from taskhub.domain.entities import Task
from taskhub.domain.value_objects import ScopeType, WorkspaceRole
from taskhub.infrastructure.permission.permission_checker import WorkspacePermissionChecker
from taskhub.interfaces.api.permission_hooks import PermissionContextBuilder

from tests.conftest import FakeUnitOfWork, make_factory

WORKSPACE_ID = "ws-1"


class _TestUser:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id


class AuthBypassMiddleware:
    """Middleware that sets context.user from the X-Test-User header for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = _TestUser(user_id) if user_id else None


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """Workspace ws-1 owned by "owner" with member "alice", guest "gus" and two tasks."""
    uow = FakeUnitOfWork()
    uow.workspaces.add_workspace(WORKSPACE_ID, owner_id="owner")
    uow.workspaces.add_member(WORKSPACE_ID, "alice", WorkspaceRole.MEMBER)
    uow.workspaces.add_member(WORKSPACE_ID, "gus", WorkspaceRole.GUEST)
    uow.spaces.add_member("S", "alice")
    uow.tasks.add(
        Task(id="t1", workspace_id=WORKSPACE_ID, space_id="S", list_id="L", title="Design")
    )
    uow.tasks.add(
        Task(
            id="t2",
            workspace_id=WORKSPACE_ID,
            space_id="S",
            list_id="L",
            title="Build",
            assignee_id="alice",
        )
    )
    uow.tasks.add(Task(id="foreign", workspace_id="ws-2", space_id="S9", title="Foreign"))
    return uow


@pytest.fixture
def app(api_uow):
    """Falcon ASGI app wired with the real permission checker over fake storage."""
    from taskhub.interfaces.api.resources.health import HealthResource
    from taskhub.interfaces.api.resources.permissions import (
        PermissionCheckResource,
        ScopeMemberResource,
        ScopeMembersResource,
        TableAccessResource,
    )
    from taskhub.interfaces.api.resources.tasks import (
        SpaceGanttResource,
        TaskDependenciesResource,
        TaskDependencyResource,
        TaskTimelineResource,
        TaskTimelineValidationResource,
        TaskTransitionResource,
    )

    uow_factory = make_factory(api_uow)
    checker = WorkspacePermissionChecker(uow_factory)
    builder = PermissionContextBuilder(uow_factory)
    assign = AssignScopePermissionUseCase(uow_factory, checker)
    revoke = RevokeScopePermissionUseCase(uow_factory, checker)

    app = falcon.asgi.App(middleware=[AuthBypassMiddleware()])
    base = "/v1/workspaces/{workspace_id}"
    app.add_route("/v1/health", HealthResource())
    app.add_route(f"{base}/permissions/check", PermissionCheckResource(checker, builder))
    app.add_route(f"{base}/tables/{{table_id}}/access", TableAccessResource(checker))
    for scope in ScopeType:
        members = f"{base}/{scope}s/{{{scope}_id}}/members"
        app.add_route(members, ScopeMembersResource(scope, uow_factory, checker))
        app.add_route(f"{members}/{{subject}}", ScopeMemberResource(scope, assign, revoke))
    app.add_route(
        f"{base}/tasks/{{task_id}}/dependencies",
        TaskDependenciesResource(
            uow_factory, checker, builder, CreateDependencyUseCase(uow_factory, checker)
        ),
    )
    app.add_route(
        f"{base}/tasks/{{task_id}}/dependencies/{{dependency_id}}",
        TaskDependencyResource(DeleteDependencyUseCase(uow_factory, checker)),
    )
    app.add_route(
        f"{base}/tasks/{{task_id}}/transition",
        TaskTransitionResource(checker, builder, CheckStatusTransitionUseCase(uow_factory)),
    )
    app.add_route(
        f"{base}/tasks/{{task_id}}/timeline",
        TaskTimelineResource(RescheduleTaskUseCase(uow_factory, checker)),
    )
    app.add_route(
        f"{base}/tasks/{{task_id}}/timeline/validate",
        TaskTimelineValidationResource(checker, builder, ValidateTimelineUseCase(uow_factory)),
    )
    app.add_route(
        f"{base}/spaces/{{space_id}}/gantt",
        SpaceGanttResource(checker, builder, GetGanttDataUseCase(uow_factory)),
    )
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
