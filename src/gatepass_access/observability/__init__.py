"""Observability – logging and request correlation."""
from gatepass_access.observability.correlation import CorrelationContext, RequestContext
from gatepass_access.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["CorrelationContext", "JsonLoggerFactory", "RequestContext", "get_logger"]
