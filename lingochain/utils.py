"""
Small text helpers shared by the CLI and the facade.

Functions:
    clean_text: Normalize pasted input before translation

Example:
    >>> from lingochain.utils import clean_text
    >>> clean_text("  “Hello”   world!!!  ")
    '"Hello" world!'
"""

import re

_WHITESPACE = re.compile(r"\s+")
_REPEATED_PUNCT = re.compile(r"([!?.,;:\-]){2,}")
_SMART_DOUBLE = re.compile(r"[“”]")
_SMART_SINGLE = re.compile(r"[‘’]")


def clean_text(text: str) -> str:
    """
    Basic clean-up for user input.

    - Collapses runs of whitespace (including newlines) into one space
    - Replaces curly quotes with straight ones
    - Squashes punctuation runs to their last mark ("!!!" -> "!", "?!" -> "!")
    - Trims the result

    Args:
        text: Raw input text (None is treated as empty)

    Returns:
        Cleaned text, possibly empty
    """
    if not text:
        return ""
    t = _WHITESPACE.sub(" ", str(text))
    t = _SMART_DOUBLE.sub('"', t)
    t = _SMART_SINGLE.sub("'", t)
    t = _REPEATED_PUNCT.sub(r"\1", t)
    return t.strip()
