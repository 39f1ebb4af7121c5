"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

@pytest.fixture
def transliterator():
    """Fresh Japanese romaji transliterator."""
    from kanasearch.nlp.japanese.transliterator import RomajiTransliterator
    return RomajiTransliterator()

@pytest.fixture
def upper_transliterator():
    """Stub transliterator that upper-cases whatever it is given."""
    from kanasearch.nlp.base import BaseTransliterator

    class UpperTransliterator(BaseTransliterator):
        def iter_morae(self, segment):
            for ch in segment:
                yield ch, ch.upper()

    return UpperTransliterator()

@pytest.fixture
def mixed_queries():
    """Search inputs covering quoted, unquoted and mixed-script text."""
    return [
        "",
        "   ",
        "arigatou",
        "gakkou",
        "mizu \"water\"",
        "\"water\" mizu \"drink\"",
        "mizu \"water",
        "\"",
        "\"\"",
        "こんにchiwa",
        "漢字 kanji",
        "Tokyo 2024!",
    ]
