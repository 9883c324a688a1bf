"""Testing fakes – in-memory doubles for kernel ports."""
from gatepass_access.testing.fakes.linkage import (
    InMemoryPrincipalLinkageProvider,
    ProviderUnavailableError,
)

__all__ = ["InMemoryPrincipalLinkageProvider", "ProviderUnavailableError"]
