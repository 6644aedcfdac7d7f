"""Application ports - interfaces for external adapters."""

from taskhub.application.ports.permission_checker import PermissionChecker
from taskhub.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
