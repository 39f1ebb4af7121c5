"""Search-input conversion: romaji to kana outside double quotes.

Text between double quotes is kept literally, kana and kanji already in the
input are left alone, and everything else is read as romaji. The preview form
keeps the quote characters so the user still sees them while typing; the
submit form drops them before the query is sent to the dictionary search.
"""

from typing import Optional

import jaconv

from kanasearch.logger import logger
from kanasearch.nlp import get_transliterator
from kanasearch.nlp.base import BaseTransliterator
from kanasearch.nlp.quotes import render_spans, split_quoted
from kanasearch.schema import ConvertedQuery, SearchRequest

_default_transliterator = get_transliterator("ja")


def _convert(
    text: str,
    strip_quotes: bool,
    katakana: bool,
    transliterator: Optional[BaseTransliterator],
) -> str:
    if not text.strip():
        return text

    transliterator = transliterator or _default_transliterator

    def convert_unquoted(segment: str) -> str:
        kana = transliterator.convert_segment(segment)
        return jaconv.hira2kata(kana) if katakana else kana

    result = render_spans(split_quoted(text), convert_unquoted, strip_quotes=strip_quotes)
    logger.debug(f"Converted search input {text!r} -> {result!r}")
    return result


def convert_search_input(
    text: str,
    katakana: bool = False,
    transliterator: Optional[BaseTransliterator] = None,
) -> str:
    """Convert *text* for live display, keeping quoted spans with their quotes.

    >>> convert_search_input('mizu "water"')
    'みず "water"'
    """
    return _convert(text, False, katakana, transliterator)


def convert_search_input_for_submit(
    text: str,
    katakana: bool = False,
    transliterator: Optional[BaseTransliterator] = None,
) -> str:
    """Convert *text* for submission, dropping the quote characters.

    An unterminated quote loses only its opening ``"``.

    >>> convert_search_input_for_submit('mizu "water')
    'みず water'
    """
    return _convert(text, True, katakana, transliterator)


def convert_query(text: str, katakana: bool = False) -> ConvertedQuery:
    """Return both conversions of *text* alongside the raw input."""
    return ConvertedQuery(
        raw=text,
        preview=convert_search_input(text, katakana=katakana),
        submit=convert_search_input_for_submit(text, katakana=katakana),
    )


def build_suggestion_query(text: str) -> Optional[str]:
    """Query used to fetch live suggestions, or None when there is nothing typed."""
    if not text.strip():
        return None
    return convert_search_input(text)


def build_search_request(
    text: str,
    limit: Optional[int] = None,
    katakana: bool = False,
) -> Optional[SearchRequest]:
    """Build the dictionary search request for a submitted query.

    Blank input produces no request. Raises ``pydantic.ValidationError`` for a
    ``limit`` below 1.
    """
    if not text.strip():
        return None
    query = convert_search_input_for_submit(text, katakana=katakana)
    if not query:
        # e.g. a lone '""' strips down to nothing
        logger.info(f"Search input {text!r} is empty after conversion")
        return None
    return SearchRequest(q=query, limit=limit)
