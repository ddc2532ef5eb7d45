"""
Translation providers reachable without an account.

Fallback chain (fixed priority):
1. GoogleWebProvider - unofficial web-translate endpoint (fast, carries an
   optional romanization of the translation)
2. LibreTranslateProvider - one per configured LibreTranslate instance
3. MyMemoryProvider - free translation memory lookup

Providers only describe requests and parse responses; ProviderChain performs
the HTTP calls.
"""

from __future__ import annotations

from typing import Any, Optional

from lingochain.config import (
    DEFAULT_SOURCE_LANG,
    GOOGLE_WEB_URL,
    MYMEMORY_URL,
    USER_AGENT,
    ChainConfig,
)
from lingochain.translate.base import Extraction, Provider, ProviderRequest, Tier
from lingochain.translate.extractors import (
    extract_detected_language,
    extract_envelope,
    extract_flat_object,
    extract_nested_array,
    extract_nested_pronunciation,
    has_key_required_marker,
)


class GoogleWebProvider(Provider):
    """Google Translate web endpoint (client=gtx), no key required.

    Requests both the translation (dt=t) and the romanization hint (dt=rm).
    Only HTTP 200 is accepted.

    Note: This is an unofficial API and may be rate-limited or change shape.
    """

    tier = Tier.PRIMARY

    def __init__(self, url: str = GOOGLE_WEB_URL, user_agent: str = USER_AGENT):
        self.url = url
        self.user_agent = user_agent

    @property
    def name(self) -> str:
        return "google-web"

    def build_request(self, text: str, target_lang: str) -> ProviderRequest:
        return ProviderRequest(
            method="GET",
            url=self.url,
            params=(
                ("client", "gtx"),
                ("sl", "auto"),
                ("tl", target_lang),
                ("dt", "t"),
                ("dt", "rm"),
                ("q", text),
            ),
            headers={"User-Agent": self.user_agent},
        )

    def reject(self, status_code: int, body: str) -> Optional[str]:
        if status_code != 200:
            return f"HTTP {status_code}"
        return None

    def extract(self, body: Any) -> Optional[Extraction]:
        text = extract_nested_array(body)
        if text is None:
            return None
        return Extraction(
            text=text,
            pronunciation=extract_nested_pronunciation(body),
            source_lang=extract_detected_language(body),
        )


class LibreTranslateProvider(Provider):
    """A LibreTranslate-compatible instance.

    POSTs {q, source: "auto", target, format: "text"} to <instance>/translate.
    Public instances increasingly answer with a "get an API key" notice,
    sometimes with a 2xx status; such bodies are rejected outright.
    """

    tier = Tier.SECONDARY

    def __init__(
        self,
        instance: str,
        api_key: Optional[str] = None,
        user_agent: str = USER_AGENT,
    ):
        self.instance = instance.rstrip("/")
        self.api_key = api_key
        self.user_agent = user_agent

    @property
    def name(self) -> str:
        host = self.instance.split("://", 1)[-1]
        return f"libretranslate:{host}"

    def build_request(self, text: str, target_lang: str) -> ProviderRequest:
        payload = {
            "q": text,
            "source": "auto",
            "target": target_lang,
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key
        return ProviderRequest(
            method="POST",
            url=f"{self.instance}/translate",
            json=payload,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
        )

    def reject(self, status_code: int, body: str) -> Optional[str]:
        if has_key_required_marker(body):
            return "API key required"
        return super().reject(status_code, body)

    def extract(self, body: Any) -> Optional[Extraction]:
        text = extract_flat_object(body)
        return Extraction(text=text) if text else None


class MyMemoryProvider(Provider):
    """MyMemory translation memory API - free, no key required.

    The free tier needs an explicit source language (no auto-detection);
    an optional contact e-mail raises the daily quota.
    """

    tier = Tier.TERTIARY

    def __init__(
        self,
        source_lang: str = DEFAULT_SOURCE_LANG,
        email: Optional[str] = None,
        url: str = MYMEMORY_URL,
        user_agent: str = USER_AGENT,
    ):
        self.source_lang = source_lang
        self.email = email
        self.url = url
        self.user_agent = user_agent

    @property
    def name(self) -> str:
        return "mymemory"

    def build_request(self, text: str, target_lang: str) -> ProviderRequest:
        params = [
            ("q", text),
            ("langpair", f"{self.source_lang}|{target_lang}"),
        ]
        if self.email:
            params.append(("de", self.email))
        return ProviderRequest(
            method="GET",
            url=self.url,
            params=tuple(params),
            headers={"User-Agent": self.user_agent},
        )

    def extract(self, body: Any) -> Optional[Extraction]:
        text = extract_envelope(body)
        return Extraction(text=text) if text else None


def default_providers(config: ChainConfig | None = None) -> tuple[Provider, ...]:
    """Build the fixed provider chain: primary, secondaries, tertiary."""
    config = config or ChainConfig()
    secondaries = tuple(
        LibreTranslateProvider(
            instance,
            api_key=config.libretranslate_api_key,
            user_agent=config.user_agent,
        )
        for instance in config.libretranslate_instances
    )
    return (
        GoogleWebProvider(user_agent=config.user_agent),
        *secondaries,
        MyMemoryProvider(
            source_lang=config.source_lang,
            email=config.mymemory_email,
            user_agent=config.user_agent,
        ),
    )
