"""Splitting search input into quoted (literal) and unquoted spans."""

from dataclasses import dataclass
from typing import Callable, Iterable, List

from kanasearch import QUOTE_CHAR


@dataclass(frozen=True)
class Span:
    """A contiguous piece of the input.

    Quoted spans keep their delimiters in ``text``; ``closed`` is False only
    for a quoted span whose opening quote was never matched.
    """
    text: str
    quoted: bool = False
    closed: bool = True

    @property
    def literal(self) -> str:
        """Text of a quoted span without its delimiters."""
        if not self.quoted:
            return self.text
        inner = self.text[len(QUOTE_CHAR):]
        if self.closed:
            inner = inner[:-len(QUOTE_CHAR)]
        return inner


def split_quoted(text: str) -> List[Span]:
    """Partition *text* into spans on double quotes.

    An opening quote without a partner turns the rest of the string into one
    unclosed quoted span. Joining the ``text`` of all spans gives back *text*.
    """
    spans: List[Span] = []
    i = 0
    while i < len(text):
        if text[i] == QUOTE_CHAR:
            end = text.find(QUOTE_CHAR, i + 1)
            if end == -1:
                spans.append(Span(text[i:], quoted=True, closed=False))
                break
            spans.append(Span(text[i:end + 1], quoted=True))
            i = end + 1
        else:
            next_quote = text.find(QUOTE_CHAR, i)
            if next_quote == -1:
                next_quote = len(text)
            spans.append(Span(text[i:next_quote]))
            i = next_quote
    return spans


def render_spans(
    spans: Iterable[Span],
    convert: Callable[[str], str],
    strip_quotes: bool = False,
) -> str:
    """Rebuild a string from *spans*, running only unquoted spans through *convert*."""
    parts = []
    for span in spans:
        if not span.quoted:
            parts.append(convert(span.text))
        elif strip_quotes:
            parts.append(span.literal)
        else:
            parts.append(span.text)
    return "".join(parts)
