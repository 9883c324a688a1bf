"""Testing support – in-memory fakes for the permission engine.

Use the fake provider to exercise resolution without a database::

    from gatepass_access.testing import InMemoryPrincipalLinkageProvider
"""

from gatepass_access.testing.fakes import (
    InMemoryPrincipalLinkageProvider,
    ProviderUnavailableError,
)

__all__ = ["InMemoryPrincipalLinkageProvider", "ProviderUnavailableError"]
