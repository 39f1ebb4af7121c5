from abc import ABC, abstractmethod
from typing import Iterator, Tuple


class BaseTransliterator(ABC):
    """Abstract base class for converting a Latin-script run into a native script."""

    @abstractmethod
    def iter_morae(self, segment: str) -> Iterator[Tuple[str, str]]:
        """Yield ``(consumed, emitted)`` pairs covering *segment* left to right."""
        pass

    def convert_segment(self, segment: str) -> str:
        """
        Convert one unquoted run of text.

        The emitted parts of :meth:`iter_morae` are concatenated in order, so
        the consumed parts always add up to the original *segment*.
        """
        return "".join(emitted for _, emitted in self.iter_morae(segment))
