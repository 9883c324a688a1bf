"""
gatepass_access – permission resolution for the gate-pass backend.

Import path convention::

    from gatepass_access.kernel.access import AuthorizationGate, FeaturePattern
    from gatepass_access.application.access import AccessService
    from gatepass_access.adapters.sqlalchemy import SqlAlchemyPrincipalLinkageProvider
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
