"""
Project-wide configuration.

This module defines the endpoints, timeouts and defaults used by the provider
chain, plus ChainConfig, the per-chain settings object.

Module Contents:
    APP_NAME: Application name for display purposes
    USER_AGENT: User-Agent header sent to every provider
    GOOGLE_WEB_URL: Primary (unauthenticated web-translate) endpoint
    LIBRETRANSLATE_INSTANCES: Secondary LibreTranslate-compatible instances
    MYMEMORY_URL: Tertiary translation memory endpoint
    CONNECT_TIMEOUT / READ_TIMEOUT: Per-attempt network timeouts (seconds)

Environment overrides (read by ChainConfig.from_env):
    LINGOCHAIN_CONNECT_TIMEOUT, LINGOCHAIN_READ_TIMEOUT,
    LINGOCHAIN_LIBRE_INSTANCES (comma separated),
    LINGOCHAIN_SOURCE_LANG, LINGOCHAIN_MYMEMORY_EMAIL

Example:
    >>> from lingochain.config import ChainConfig
    >>> config = ChainConfig.from_env()
    >>> config.timeout
    (8.0, 10.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from lingochain import __version__

# Application name for display and identification
APP_NAME = "LingoChain"

USER_AGENT = f"LingoChain/{__version__}"

# Per-user config directory (API keys)
CONFIG_DIR = Path.home() / ".lingochain"

GOOGLE_WEB_URL = "https://translate.googleapis.com/translate_a/single"

LIBRETRANSLATE_INSTANCES = (
    "https://libretranslate.com",
    "https://translate.argosopentech.com",
    "https://libretranslate.de",
)

MYMEMORY_URL = "https://api.mymemory.translated.net/get"

# MyMemory needs an explicit source language
DEFAULT_SOURCE_LANG = "en"

CONNECT_TIMEOUT = 8.0
READ_TIMEOUT = 10.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


@dataclass
class ChainConfig:
    """Settings for one ProviderChain.

    Attributes:
        connect_timeout: Seconds to wait for a connection
        read_timeout: Seconds to wait for a response
        libretranslate_instances: Secondary instances, tried in order
        libretranslate_api_key: Optional key sent to LibreTranslate instances
        source_lang: Source language for the tertiary provider
        mymemory_email: Optional contact address (raises MyMemory's free quota)
        user_agent: User-Agent header for all requests
    """
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT
    libretranslate_instances: tuple[str, ...] = field(default=LIBRETRANSLATE_INSTANCES)
    libretranslate_api_key: Optional[str] = None
    source_lang: str = DEFAULT_SOURCE_LANG
    mymemory_email: Optional[str] = None
    user_agent: str = USER_AGENT

    def __post_init__(self):
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError("Timeouts must be positive")
        self.libretranslate_instances = tuple(
            url.strip().rstrip("/") for url in self.libretranslate_instances if url.strip()
        )

    @property
    def timeout(self) -> tuple[float, float]:
        """(connect, read) tuple in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_env(cls) -> "ChainConfig":
        """Build a config from defaults plus LINGOCHAIN_* environment variables."""
        from lingochain.keys import get_key

        instances = os.getenv("LINGOCHAIN_LIBRE_INSTANCES")
        return cls(
            connect_timeout=_env_float("LINGOCHAIN_CONNECT_TIMEOUT", CONNECT_TIMEOUT),
            read_timeout=_env_float("LINGOCHAIN_READ_TIMEOUT", READ_TIMEOUT),
            libretranslate_instances=(
                tuple(instances.split(",")) if instances else LIBRETRANSLATE_INSTANCES
            ),
            libretranslate_api_key=get_key("libretranslate"),
            source_lang=os.getenv("LINGOCHAIN_SOURCE_LANG") or DEFAULT_SOURCE_LANG,
            mymemory_email=os.getenv("LINGOCHAIN_MYMEMORY_EMAIL") or None,
        )

    def to_dict(self) -> dict:
        """Serialize config for logging/debugging (API key masked)."""
        return {
            "connect_timeout": self.connect_timeout,
            "read_timeout": self.read_timeout,
            "libretranslate_instances": list(self.libretranslate_instances),
            "libretranslate_api_key": "***" if self.libretranslate_api_key else None,
            "source_lang": self.source_lang,
            "mymemory_email": self.mymemory_email,
        }
