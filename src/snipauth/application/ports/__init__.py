"""Application ports - interfaces for external adapters."""

from snipauth.application.ports.permission_checker import PermissionChecker
from snipauth.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
