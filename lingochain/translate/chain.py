"""
Provider fallback chain.

ProviderChain walks a fixed, ordered tuple of providers and stops at the
first one that yields a non-blank translation:

1. Validate the request (no network activity on failure)
2. For each provider in priority order, issue exactly one HTTP call with
   bounded (connect, read) timeouts and classify the result as a
   ProviderOutcome
3. On success, attach a pronunciation for romanizable target languages,
   preferring the one embedded in the provider response
4. If every provider fails, raise NoProviderAvailable (or
   ProviderTransportError when no provider could even be reached)

Attempts are strictly sequential; there is no caching, retry or circuit
breaking, and every call restarts at the first provider. The HTTP session is
injected, so tests can substitute a fake transport.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

import requests

from lingochain.config import ChainConfig
from lingochain.errors import NoProviderAvailable, ProviderTransportError
from lingochain.models import TranslationRequest, TranslationResult
from lingochain.romanize import is_romanizable, romanize
from lingochain.translate.base import OutcomeKind, Provider, ProviderOutcome
from lingochain.translate.providers import default_providers

logger = logging.getLogger(__name__)

Romanizer = Callable[[str, str], Optional[str]]


class ProviderChain:
    """Strict-priority fallback over translation providers.

    Usage:
        chain = ProviderChain()
        result = chain.translate("Hello", "te")
        print(result.text, result.pronunciation)
    """

    def __init__(
        self,
        providers: Iterable[Provider] | None = None,
        session: requests.Session | None = None,
        config: ChainConfig | None = None,
        romanizer: Romanizer = romanize,
    ):
        self.config = config or ChainConfig()
        self.providers: tuple[Provider, ...] = (
            tuple(providers) if providers is not None else default_providers(self.config)
        )
        if not self.providers:
            raise ValueError("ProviderChain needs at least one provider")
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.romanizer = romanizer

    def attempt(self, provider: Provider, request: TranslationRequest) -> ProviderOutcome:
        """Issue one provider call and classify what came back."""
        call = provider.build_request(request.text, request.target_lang)
        try:
            response = self.session.request(
                call.method,
                call.url,
                params=list(call.params) or None,
                json=call.json,
                headers=call.headers or None,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            return ProviderOutcome(
                provider=provider.name,
                kind=OutcomeKind.TRANSPORT_ERROR,
                detail=f"{type(e).__name__}: {e}",
            )

        body = response.text
        reason = provider.reject(response.status_code, body)
        if reason:
            return ProviderOutcome(
                provider=provider.name,
                kind=OutcomeKind.PROTOCOL_ERROR,
                detail=reason,
                status_code=response.status_code,
            )

        extraction = provider.extract(body)
        if extraction is None or not extraction.text.strip():
            return ProviderOutcome(
                provider=provider.name,
                kind=OutcomeKind.EMPTY,
                detail="no translation in response",
                status_code=response.status_code,
            )

        return ProviderOutcome(
            provider=provider.name,
            kind=OutcomeKind.SUCCESS,
            extraction=extraction,
            status_code=response.status_code,
        )

    def run(self, request: TranslationRequest) -> list[ProviderOutcome]:
        """Try providers in order; the last outcome is the success, if any."""
        attempts: list[ProviderOutcome] = []
        for provider in self.providers:
            outcome = self.attempt(provider, request)
            attempts.append(outcome)
            if outcome.ok:
                logger.info(f"{provider.name} answered ({provider.tier.value})")
                break
            logger.warning(
                f"{provider.name} failed [{outcome.kind.value}]: {outcome.detail}; trying next provider"
            )
        return attempts

    def translate(self, text: str, target_lang: str) -> TranslationResult:
        """Translate text into target_lang.

        Raises:
            ValidationError: text or target_lang is blank
            NoProviderAvailable: every provider failed
            ProviderTransportError: every provider failed at the network layer
        """
        request = TranslationRequest(text=text, target_lang=target_lang)
        attempts = self.run(request)

        final = attempts[-1]
        if not final.ok:
            if all(a.kind is OutcomeKind.TRANSPORT_ERROR for a in attempts):
                raise ProviderTransportError(attempts)
            raise NoProviderAvailable(attempts)

        extraction = final.extraction
        translated = extraction.text.strip()
        return TranslationResult(
            text=translated,
            pronunciation=self._pronounce(translated, request.target_lang, extraction.pronunciation),
            provider=final.provider,
            source_lang=extraction.source_lang,
        )

    def _pronounce(self, translated: str, target_lang: str, native: Optional[str]) -> Optional[str]:
        if not is_romanizable(target_lang):
            return None
        if native:
            return native
        return self.romanizer(translated, target_lang)

    def close(self):
        """Close the HTTP session if this chain created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
