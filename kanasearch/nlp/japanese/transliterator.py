"""Romaji to hiragana transliteration for search input."""

from typing import Iterator, Tuple

from kanasearch import SOKUON
from kanasearch.nlp.base import BaseTransliterator
from .tables import DIGRAPHS, MONOGRAPHS, is_kana

_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz" + "BCDFGHJKLMNPQRSTVWXYZ")


class RomajiTransliterator(BaseTransliterator):
    """Greedy left-to-right romaji reader.

    At every position the first matching rule wins:

    1. kana already in the input is copied through;
    2. a doubled consonant other than ``n`` becomes っ, consuming only the
       first letter so the second one starts the next mora (``kko`` → っこ);
    3. a three-letter digraph (``kya`` → きゃ);
    4. a three, two or one letter monograph, longest first;
    5. anything else (spaces, punctuation, digits, kanji, stray letters) is
       copied through unchanged.

    ``n``/``nn`` never geminate; both spell ん through the monograph table.
    """

    def __init__(self):
        self.digraphs = DIGRAPHS
        self.monographs = MONOGRAPHS

    def _is_geminate(self, segment: str, i: int) -> bool:
        if i + 1 >= len(segment):
            return False
        ch = segment[i]
        return (ch in _CONSONANTS
                and ch.lower() == segment[i + 1].lower()
                and ch.lower() != "n")

    def iter_morae(self, segment: str) -> Iterator[Tuple[str, str]]:
        i = 0
        while i < len(segment):
            ch = segment[i]

            if is_kana(ch):
                yield ch, ch
                i += 1
                continue

            if self._is_geminate(segment, i):
                yield ch, SOKUON
                i += 1
                continue

            tri = segment[i:i + 3]
            if tri.lower() in self.digraphs:
                yield tri, self.digraphs[tri.lower()]
                i += len(tri)
                continue

            for width in (3, 2, 1):
                chunk = segment[i:i + width]
                if chunk.lower() in self.monographs:
                    yield chunk, self.monographs[chunk.lower()]
                    i += len(chunk)
                    break
            else:
                yield ch, ch
                i += 1

