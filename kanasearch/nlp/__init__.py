"""Natural Language Processing module for kanasearch

This module provides the language-specific transliterators used to turn
Latin-alphabet search input into native script, plus the quote-aware
splitting that decides which parts of the input get converted.
"""

from .base import BaseTransliterator
from .quotes import Span, split_quoted, render_spans

def get_transliterator(language: str) -> BaseTransliterator:
    """Get a transliterator for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific transliterator instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.transliterator import RomajiTransliterator
        return RomajiTransliterator()
    else:
        raise ValueError(f"Unsupported language for transliteration: {language}")

__all__ = [
    'BaseTransliterator',
    'Span',
    'split_quoted',
    'render_spans',
    'get_transliterator',
]
