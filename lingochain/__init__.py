"""
LingoChain: multi-provider text translation with phonetic romanization.

Translates text through a fixed fallback chain of free translation services
(Google web endpoint, LibreTranslate instances, MyMemory) so that one
failing or rate-limited service does not fail the request. For Telugu,
Hindi and Japanese targets, a best-effort Latin-letter pronunciation is
attached to the result.

License: MIT
"""

__version__ = "0.1.0"

from lingochain.errors import (
    LingoChainError,
    NoProviderAvailable,
    ProviderTransportError,
    ValidationError,
)
from lingochain.models import TranslationRequest, TranslationResult
from lingochain.pipeline import TranslationService, translate_text

__all__ = [
    "LingoChainError",
    "NoProviderAvailable",
    "ProviderTransportError",
    "ValidationError",
    "TranslationRequest",
    "TranslationResult",
    "TranslationService",
    "translate_text",
]
