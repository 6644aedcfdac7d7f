"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from taskhub import __version__
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
from taskhub.config import get_settings
from taskhub.domain.value_objects import ScopeType
from taskhub.infrastructure.auth.keycloak_provider import KeycloakProvider
from taskhub.infrastructure.permission.permission_checker import WorkspacePermissionChecker
from taskhub.infrastructure.persistence.postgres.connection import create_pool
from taskhub.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from taskhub.interfaces.api.middleware.auth import AuthMiddleware
from taskhub.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from taskhub.interfaces.api.permission_hooks import PermissionContextBuilder
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
from taskhub.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"TaskHub v{__version__}")


def create_taskhub_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set, every request is anonymous")

    permission_checker = WorkspacePermissionChecker(uow_factory)
    context_builder = PermissionContextBuilder(uow_factory)

    assign_permission = AssignScopePermissionUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    revoke_permission = RevokeScopePermissionUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    create_dependency = CreateDependencyUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    delete_dependency = DeleteDependencyUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    check_transition = CheckStatusTransitionUseCase(unit_of_work_factory=uow_factory)
    reschedule_task = RescheduleTaskUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    validate_timeline = ValidateTimelineUseCase(unit_of_work_factory=uow_factory)
    get_gantt_data = GetGanttDataUseCase(unit_of_work_factory=uow_factory)

    health_resource = HealthResource(pool)
    check_resource = PermissionCheckResource(permission_checker, context_builder)
    table_access_resource = TableAccessResource(permission_checker)
    dependencies_resource = TaskDependenciesResource(
        uow_factory, permission_checker, context_builder, create_dependency
    )
    dependency_resource = TaskDependencyResource(delete_dependency)
    transition_resource = TaskTransitionResource(
        permission_checker, context_builder, check_transition
    )
    timeline_resource = TaskTimelineResource(reschedule_task)
    timeline_validation_resource = TaskTimelineValidationResource(
        permission_checker, context_builder, validate_timeline
    )
    gantt_resource = SpaceGanttResource(permission_checker, context_builder, get_gantt_data)

    app = falcon.asgi.App(
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)

    workspace = "/v1/workspaces/{workspace_id}"
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route(f"{workspace}/permissions/check", check_resource)
    app.add_route(f"{workspace}/tables/{{table_id}}/access", table_access_resource)
    for scope in ScopeType:
        base = f"{workspace}/{scope}s/{{{scope}_id}}/members"
        app.add_route(
            base, ScopeMembersResource(scope, uow_factory, permission_checker)
        )
        app.add_route(
            f"{base}/{{subject}}",
            ScopeMemberResource(scope, assign_permission, revoke_permission),
        )
    app.add_route(f"{workspace}/tasks/{{task_id}}/dependencies", dependencies_resource)
    app.add_route(
        f"{workspace}/tasks/{{task_id}}/dependencies/{{dependency_id}}",
        dependency_resource,
    )
    app.add_route(f"{workspace}/tasks/{{task_id}}/transition", transition_resource)
    app.add_route(f"{workspace}/tasks/{{task_id}}/timeline", timeline_resource)
    app.add_route(
        f"{workspace}/tasks/{{task_id}}/timeline/validate", timeline_validation_resource
    )
    app.add_route(f"{workspace}/spaces/{{space_id}}/gantt", gantt_resource)

    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_taskhub_app(),
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
