"""Japanese language processing module."""

from .tables import DIGRAPHS, MONOGRAPHS, is_kana
from .transliterator import RomajiTransliterator

__all__ = [
    'DIGRAPHS',
    'MONOGRAPHS',
    'is_kana',
    'RomajiTransliterator',
]
