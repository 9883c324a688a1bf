"""Application access – request-facing authorization service."""
from gatepass_access.application.access.scope import RequestScopedResolver
from gatepass_access.application.access.service import AccessService

__all__ = ["AccessService", "RequestScopedResolver"]
