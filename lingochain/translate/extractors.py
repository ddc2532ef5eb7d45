"""
Response extractors for the provider wire formats.

Each extractor takes a raw response body (text, bytes, or an already decoded
JSON value) and returns the string it was looking for, or None. They never
raise: malformed JSON, unexpected shapes and blank strings all come back as
None so the chain can move on to the next provider.

Wire formats:
- Nested array (Google web endpoint):
    [[["<translated>", "<original>", null, null, 10],
      [null, null, "<target romanization>", "<source romanization>"]],
     null, "<detected source lang>", ...]
- Flat object (LibreTranslate):
    {"translatedText": "..."}  or  [{"translatedText": "..."}]
- Envelope (MyMemory):
    {"responseData": {"translatedText": "...", "match": 0.9},
     "responseStatus": 200,
     "matches": [{"translation": "...", "quality": "74"}, ...]}
"""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, Optional

FLAT_KEYS = ("translatedText", "translation", "result")

# Bodies a LibreTranslate instance sends when it wants an API key
KEY_REQUIRED_MARKERS = (
    "portal.libretranslate.com",
    "get an api key",
    "invalid api key",
    "api key is required",
)

QUOTA_MARKERS = ("MYMEMORY WARNING",)


def _load(body: Any) -> Any:
    """Decode a JSON body; anything undecodable becomes None."""
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(body, str):
        try:
            return json.loads(body)
        except ValueError:
            return None
    return body


def _text(value: Any) -> Optional[str]:
    """value if it is a string with content, else None."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _at(row: Any, index: int) -> Any:
    if isinstance(row, list) and len(row) > index:
        return row[index]
    return None


def _segments(data: Any) -> list:
    first = _at(data, 0)
    if not isinstance(first, list):
        return []
    return [seg for seg in first if isinstance(seg, list)]


# ============================================================================
# Nested array (primary)
# ============================================================================

def extract_nested_array(body: Any) -> Optional[str]:
    """Join the translated segments of a nested-array response.

    Element 0 of every segment in the first outer entry is a translated
    sentence; romanization rows have null there and are skipped.
    """
    data = _load(body)
    pieces = [seg[0] for seg in _segments(data) if isinstance(_at(seg, 0), str)]
    return _text("".join(pieces).strip())


def _pronunciation_candidates(data: Any) -> Iterable[Any]:
    segments = _segments(data)
    # 1. offset 2 of every segment
    for seg in segments:
        yield _at(seg, 2)
    # 2. offset 3 of romanization-only rows
    for seg in segments:
        if not _text(_at(seg, 0)):
            yield _at(seg, 3)
    # 3. romanization-only rows in later outer positions
    if isinstance(data, list):
        for entry in data[1:]:
            if not isinstance(entry, list):
                continue
            for row in entry:
                if isinstance(row, list) and not _text(_at(row, 0)):
                    yield _at(row, 2)


def extract_nested_pronunciation(body: Any) -> Optional[str]:
    """Find an embedded romanization in a nested-array response.

    The response format is unofficial, so several offsets are tried in a
    fixed order and the first non-empty string wins.
    """
    data = _load(body)
    for candidate in _pronunciation_candidates(data):
        if text := _text(candidate):
            return text.strip()
    return None


def extract_detected_language(body: Any) -> Optional[str]:
    """Source language the primary provider detected (outer offset 2)."""
    value = _text(_at(_load(body), 2))
    return value.strip() if value else None


# ============================================================================
# Flat object (secondary)
# ============================================================================

def extract_flat_object(body: Any) -> Optional[str]:
    """Read translatedText / translation / result from a flat JSON object."""
    data = _load(body)
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        return None
    for key in FLAT_KEYS:
        value = data.get(key)
        if isinstance(value, list):
            value = value[0] if value else None
        if text := _text(value):
            return text.strip()
    return None


def _without_translation(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if k not in FLAT_KEYS}
    if isinstance(data, list):
        return [_without_translation(item) for item in data]
    return data


def has_key_required_marker(body: Any) -> bool:
    """Whether a body is an 'API key required' notice.

    JSON bodies are scanned without their translation fields, so a real
    translation that happens to mention an API key is not mistaken for a
    notice. Anything else (HTML portal pages, plain text) is scanned whole.
    """
    data = _load(body)
    if isinstance(data, (dict, list)):
        text = json.dumps(_without_translation(data), ensure_ascii=False)
    elif isinstance(body, (bytes, bytearray)):
        text = body.decode("utf-8", errors="replace")
    else:
        text = body if isinstance(body, str) else json.dumps(body)
    lowered = text.lower()
    return any(marker in lowered for marker in KEY_REQUIRED_MARKERS)


# ============================================================================
# Envelope (tertiary)
# ============================================================================

def _quality(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        score = float(value)
    elif isinstance(value, str):
        try:
            score = float(value)
        except ValueError:
            return None
    else:
        return None
    # only finite scores can be ranked
    return score if math.isfinite(score) else None


def select_best_match(matches: Any) -> Optional[str]:
    """Pick the translation with the strictly highest quality score.

    Candidates without a translation or without a numeric quality are
    ignored; on ties the earliest candidate wins.

    Example:
        >>> select_best_match([
        ...     {"translation": "a", "quality": 0.5},
        ...     {"translation": "b", "quality": 0.9},
        ...     {"translation": "c", "quality": 0.9},
        ... ])
        'b'
    """
    if not isinstance(matches, list):
        return None
    best: Optional[str] = None
    best_quality: Optional[float] = None
    for match in matches:
        if not isinstance(match, dict):
            continue
        text = _text(match.get("translation"))
        quality = _quality(match.get("quality"))
        if text is None or quality is None:
            continue
        if best_quality is None or quality > best_quality:
            best, best_quality = text.strip(), quality
    return best


def _is_quota_notice(text: str) -> bool:
    return any(text.lstrip().upper().startswith(marker) for marker in QUOTA_MARKERS)


def extract_envelope(body: Any) -> Optional[str]:
    """Read responseData.translatedText, falling back to the best match."""
    data = _load(body)
    if not isinstance(data, dict):
        return None

    status = data.get("responseStatus")
    status_ok = status is None or str(status) == "200"
    response_data = data.get("responseData")
    if status_ok and isinstance(response_data, dict):
        text = _text(response_data.get("translatedText"))
        if text and not _is_quota_notice(text):
            return text.strip()

    return select_best_match(data.get("matches"))
