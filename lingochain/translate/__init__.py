"""
Translation providers and the fallback chain.

This module provides:
- Provider interface and per-attempt outcome values
- Response extractors for each provider wire format
- Google web, LibreTranslate and MyMemory providers
- ProviderChain, the strict-priority orchestrator
"""

from lingochain.translate.base import (
    Extraction,
    OutcomeKind,
    Provider,
    ProviderOutcome,
    ProviderRequest,
    Tier,
)
from lingochain.translate.chain import ProviderChain
from lingochain.translate.providers import (
    GoogleWebProvider,
    LibreTranslateProvider,
    MyMemoryProvider,
    default_providers,
)

__all__ = [
    "Extraction",
    "OutcomeKind",
    "Provider",
    "ProviderOutcome",
    "ProviderRequest",
    "Tier",
    "ProviderChain",
    "GoogleWebProvider",
    "LibreTranslateProvider",
    "MyMemoryProvider",
    "default_providers",
]
