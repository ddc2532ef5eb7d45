"""
Exception hierarchy for LingoChain.

Only two kinds of failure ever reach a caller:
- ValidationError: the request was rejected before any network call
- NoProviderAvailable: every provider tier was tried and none produced a
  usable translation (ProviderTransportError when all of them failed at
  the network layer)

Per-provider failures are recorded as ProviderOutcome values by the chain
and never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from lingochain.translate.base import ProviderOutcome


class LingoChainError(Exception):
    """Base class for all LingoChain errors."""


class ValidationError(LingoChainError, ValueError):
    """Request rejected before any provider was contacted."""

    EMPTY_TEXT = "empty text"
    EMPTY_TARGET = "empty target language"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NoProviderAvailable(LingoChainError):
    """Every provider was attempted without producing a translation."""

    def __init__(self, attempts: Sequence["ProviderOutcome"] = (), message: str | None = None):
        self.attempts = list(attempts)
        if message is None:
            tried = ", ".join(f"{a.provider}={a.kind.value}" for a in self.attempts)
            message = f"No translation provider available (tried: {tried or 'none'})"
        super().__init__(message)


class ProviderTransportError(NoProviderAvailable):
    """Every provider attempt failed at the network layer."""

    def __init__(self, attempts: Sequence["ProviderOutcome"] = ()):
        details = "; ".join(f"{a.provider}: {a.detail}" for a in attempts)
        super().__init__(attempts, f"All translation providers unreachable ({details})")
