"""Domain exceptions."""


class TaskHubError(Exception):
    """Base exception for TaskHub."""

    pass


class PermissionDenied(TaskHubError):
    """User does not have permission for the requested action."""

    pass


class NotFound(TaskHubError):
    """Requested resource was not found."""

    pass


class ValidationError(TaskHubError):
    """Validation failed for input data."""

    pass


class CircularDependency(ValidationError):
    """Adding the dependency would close a cycle in the task graph."""

    pass


class DataIntegrityError(TaskHubError):
    """Stored data does not match the domain vocabulary."""

    pass


class InvalidRole(DataIntegrityError):
    """Stored workspace role is not one of the known roles."""

    pass
