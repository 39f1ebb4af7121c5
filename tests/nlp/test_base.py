"""Tests for NLP base classes and the transliterator factory."""
import pytest
from kanasearch.nlp import get_transliterator
from kanasearch.nlp.base import BaseTransliterator
from kanasearch.nlp.japanese.transliterator import RomajiTransliterator


class TestBaseTransliterator:
    """Test BaseTransliterator abstract class."""
    
    def test_iter_morae_not_implemented(self):
        """Test that BaseTransliterator cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseTransliterator()
    
    def test_iter_morae_is_abstract(self):
        """Test that iter_morae is declared abstract."""
        assert getattr(BaseTransliterator.iter_morae, '__isabstractmethod__', False)
    
    def test_concrete_implementation(self, upper_transliterator):
        """Test that convert_segment joins the emitted parts."""
        assert upper_transliterator.convert_segment("abc") == "ABC"
        assert upper_transliterator.convert_segment("") == ""


class TestGetTransliterator:
    """Test the language factory."""
    
    @pytest.mark.parametrize("language", ["ja", "jp", "JA", "Jp"])
    def test_japanese_codes(self, language):
        """Test that Japanese language codes return the romaji transliterator."""
        assert isinstance(get_transliterator(language), RomajiTransliterator)
    
    def test_unsupported_language(self):
        """Test that unsupported languages raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported language"):
            get_transliterator("de")
