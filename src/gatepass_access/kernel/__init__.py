"""Kernel – framework-agnostic access-control building blocks."""

from gatepass_access.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InvalidPatternError,
    ResolutionError,
    UnauthorizedError,
    ValidationError,
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
