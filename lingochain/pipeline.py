"""
Translation facade for LingoChain.

This module is the single entry point for callers (web handlers, CLI):
1. Validate the request (blank text / target language fail fast)
2. Optionally clean the input text
3. Run the provider fallback chain
4. Return the translation plus an optional pronunciation

Design Philosophy:
- The service owns one ProviderChain (and through it one pooled HTTP session)
  and can be reused across requests
- Everything configurable lives in ChainConfig; the chain and its session can
  also be injected directly for tests
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from lingochain.config import ChainConfig
from lingochain.errors import ValidationError
from lingochain.models import TranslationRequest, TranslationResult
from lingochain.translate.chain import ProviderChain
from lingochain.utils import clean_text

logger = logging.getLogger(__name__)


class TranslationService:
    """Translate text through the provider fallback chain.

    Usage:
        with TranslationService() as service:
            result = service.translate("Hello", "te")
            print(result.text)           # translated text
            print(result.pronunciation)  # Latin rendering, or None
    """

    def __init__(
        self,
        config: ChainConfig | None = None,
        chain: ProviderChain | None = None,
        session: requests.Session | None = None,
        clean_input: bool = False,
    ):
        self.config = config or (chain.config if chain else ChainConfig.from_env())
        self.chain = chain or ProviderChain(config=self.config, session=session)
        self.clean_input = clean_input

    def translate(self, text: str, target_lang: str) -> TranslationResult:
        """Translate text into target_lang.

        Args:
            text: Source text (any language; the primary provider detects it)
            target_lang: Target language code, e.g. 'te', 'hi-IN', 'ja'

        Returns:
            TranslationResult with non-blank text

        Raises:
            ValidationError: text or target_lang is blank
            NoProviderAvailable: every provider failed
        """
        if self.clean_input:
            text = clean_text(text)
        request = TranslationRequest(text=text, target_lang=target_lang)
        logger.debug(f"translate -> {request.target_lang} ({len(request.text)} chars)")
        return self.chain.translate(request.text, request.target_lang)

    def close(self):
        self.chain.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


# ============================================================================
# Convenience Functions
# ============================================================================

def translate_text(
    text: str,
    target_lang: str,
    config: Optional[ChainConfig] = None,
    clean_input: bool = False,
) -> TranslationResult:
    """Quick translation of plain text.

    This is the simplest API:

        result = translate_text("Hello", "te")

    For repeated calls, keep a TranslationService so the HTTP session is
    pooled.
    """
    if not text or not text.strip():
        raise ValidationError(ValidationError.EMPTY_TEXT)
    with TranslationService(config=config, clean_input=clean_input) as service:
        return service.translate(text, target_lang)
