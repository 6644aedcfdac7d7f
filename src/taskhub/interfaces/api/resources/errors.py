"""Translation of domain exceptions into HTTP responses."""

import falcon
import falcon.asgi

from taskhub.domain.exceptions import NotFound, PermissionDenied, TaskHubError, ValidationError


def error_response(resp: falcon.asgi.Response, exc: TaskHubError) -> None:
    """Set status and body for a domain exception raised by a use case."""
    if isinstance(exc, PermissionDenied):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}
    elif isinstance(exc, NotFound):
        resp.status = falcon.HTTP_404
        resp.media = {"error": " ".join(str(a) for a in exc.args) + " not found"}
    elif isinstance(exc, ValidationError):
        resp.status = falcon.HTTP_400
        resp.media = {"error": str(exc)}
    else:
        raise exc


def unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}
