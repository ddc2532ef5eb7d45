"""
Provider interface and per-attempt outcome types.

This module defines:
- Provider: abstract base class every translation backend implements
- ProviderRequest: the single HTTP call a provider wants issued
- Extraction: what a provider pulled out of a response body
- ProviderOutcome: the recorded result of one attempt in the chain

Design Philosophy:
- Providers are stateless: they describe a request and parse a response,
  the chain owns the HTTP session and performs the call
- Parsing never raises; a body that cannot be understood extracts to None
- Every attempt yields an explicit outcome value instead of an exception,
  so the chain inspects results rather than unwinding
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Tier(str, Enum):
    """Rank of a provider in the fallback chain."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


@dataclass(frozen=True)
class ProviderRequest:
    """One outbound HTTP call.

    Attributes:
        method: HTTP method ('GET' or 'POST')
        url: Endpoint URL
        params: Query parameters as (name, value) pairs; names may repeat
        json: JSON body for POST requests
        headers: Extra request headers
    """
    method: str
    url: str
    params: tuple[tuple[str, str], ...] = ()
    json: Optional[dict] = None
    headers: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Extraction:
    """Fields a provider managed to pull out of a response."""
    text: str
    pronunciation: Optional[str] = None
    source_lang: Optional[str] = None


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"   # timeout, refused connection, TLS
    PROTOCOL_ERROR = "protocol_error"     # bad status or key-required body
    EMPTY = "empty"                       # unparseable body or blank translation


@dataclass(frozen=True)
class ProviderOutcome:
    """Result of one provider attempt.

    Attributes:
        provider: Provider name
        kind: What happened
        extraction: Extracted fields (SUCCESS only)
        detail: Human readable reason for a failure
        status_code: HTTP status, when a response was received
    """
    provider: str
    kind: OutcomeKind
    extraction: Optional[Extraction] = None
    detail: str = ""
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


class Provider(ABC):
    """Abstract base class for all translation providers.

    All providers must implement:
    - name: identifier used in logs and results
    - tier: rank in the fallback chain
    - build_request(): describe the single HTTP call for a translation
    - extract(): pull a translation out of a raw response body

    reject() may be overridden to classify responses that arrive but must
    not be parsed (bad status codes, quota or key-required notices).
    """

    tier: Tier = Tier.SECONDARY

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name (e.g., 'google-web', 'mymemory')."""
        pass

    @abstractmethod
    def build_request(self, text: str, target_lang: str) -> ProviderRequest:
        """Describe the HTTP call that translates text into target_lang."""
        pass

    @abstractmethod
    def extract(self, body: Any) -> Optional[Extraction]:
        """Extract a translation from a response body.

        Args:
            body: Raw response text (or an already decoded JSON value)

        Returns:
            Extraction, or None when the body holds no usable translation
        """
        pass

    def reject(self, status_code: int, body: str) -> Optional[str]:
        """Return a reason if the response must be treated as a failure."""
        if not 200 <= status_code < 300:
            return f"HTTP {status_code}"
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} ({self.tier.value})>"
