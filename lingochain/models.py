"""
Request and result types.

TranslationRequest is validated on construction, so holding one means both
fields are non-empty after trimming. TranslationResult carries the
translation plus an optional Latin-letter pronunciation and some provenance
(answering provider, detected source language).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lingochain.errors import ValidationError


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation call.

    Attributes:
        text: Source text (kept as given, only checked for content)
        target_lang: Target language code, trimmed
    """
    text: str
    target_lang: str

    def __post_init__(self):
        if not self.text or not self.text.strip():
            raise ValidationError(ValidationError.EMPTY_TEXT)
        if not self.target_lang or not self.target_lang.strip():
            raise ValidationError(ValidationError.EMPTY_TARGET)
        object.__setattr__(self, "target_lang", self.target_lang.strip())


@dataclass(frozen=True)
class TranslationResult:
    """Result of a successful translation.

    Attributes:
        text: The translated text (never blank)
        pronunciation: Latin-letter rendering for romanizable targets, else None
        provider: Name of the provider that answered
        source_lang: Source language reported by the provider, if any
    """
    text: str
    pronunciation: Optional[str] = None
    provider: Optional[str] = None
    source_lang: Optional[str] = None

    @property
    def has_pronunciation(self) -> bool:
        return self.pronunciation is not None

    def to_dict(self) -> dict:
        """JSON payload in the shape the web front end reads."""
        return {
            "translatedText": self.text,
            "detectedSourceLang": self.source_lang,
            "pronunciation": self.pronunciation,
            "provider": self.provider,
        }
