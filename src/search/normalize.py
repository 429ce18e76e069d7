"""Text normalization for search comparison."""

import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize(text: str) -> str:
    """Reduce text to a canonical key for comparison.

    Algorithm:
    1. Lowercase
    2. Decompose (NFD) and drop combining marks, so "é" becomes "e"
    3. Drop everything that is not an ASCII letter or digit

    The key is only used for matching, never for display. It may be empty
    when the input has no alphanumeric content.

    Examples:
        >>> normalize("Café")
        'cafe'
        >>> normalize("Mac & Cheese!")
        'maccheese'
        >>> normalize("🍣")
        ''
    """
    if not text:
        return ""

    result = unicodedata.normalize("NFD", text.lower())
    result = "".join(c for c in result if not unicodedata.combining(c))
    return _NON_ALNUM_RE.sub("", result)
