"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidPatternError
    ├── ApplicationError     (application.py)
    │   ├── UnauthorizedError
    │   └── ForbiddenError
    └── InfrastructureError  (infrastructure.py)
        └── ResolutionError
"""

from gatepass_access.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from gatepass_access.kernel.errors.base import BaseError
from gatepass_access.kernel.errors.domain import (
    DomainError,
    InvalidPatternError,
    ValidationError,
)
from gatepass_access.kernel.errors.infrastructure import (
    InfrastructureError,
    ResolutionError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InvalidPatternError",
    "ResolutionError",
    "UnauthorizedError",
    "ValidationError",
]
