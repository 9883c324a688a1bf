"""Observability – request correlation."""
from gatepass_access.observability.correlation.context import CorrelationContext, RequestContext

__all__ = ["CorrelationContext", "RequestContext"]
