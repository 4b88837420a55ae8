"""Test cases for script-aware text normalization."""

import pytest

from docindex.text_processing import preprocess, remove_diacritics, restrict_to_script, tokenize

FATHA = "\u064E"
KASRA = "\u0650"
SUKUN = "\u0652"
SHADDA = "\u0651"
TATWEEL = "\u0640"


class TestRemoveDiacritics:
    """Test harakat removal."""

    def test_strips_harakat_from_arabic(self):
        text = "ب" + FATHA + "س" + SUKUN + "م" + KASRA
        assert remove_diacritics(text) == "بسم"

    def test_strips_shadda(self):
        assert remove_diacritics("الل" + SHADDA + FATHA + "ه") == "الله"

    def test_leaves_other_characters_untouched(self):
        text = "Hello, World! 123 بسم"
        assert remove_diacritics(text) == text

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        assert remove_diacritics(text) == ""


class TestRestrictToScript:
    """Test removal of everything outside the Arabic letters."""

    def test_strips_english_keeps_space(self):
        result = restrict_to_script("Hello World")
        assert result == " "

    def test_keeps_arabic_and_spaces(self):
        text = "مرحبا بالعالم"
        assert restrict_to_script(text) == text

    def test_mixed_text_keeps_only_arabic(self):
        result = restrict_to_script("Hello مرحبا World بالعالم")
        assert "مرحبا" in result
        assert "بالعالم" in result
        assert not any("a" <= c.lower() <= "z" for c in result)

    def test_deletion_preserves_separating_whitespace(self):
        assert restrict_to_script("Hello مرحبا World بالعالم") == " مرحبا  بالعالم"

    def test_deletion_inserts_no_separator(self):
        assert restrict_to_script("كتاب123قلم") == "كتابقلم"

    def test_removes_digits(self):
        result = restrict_to_script("123 456")
        assert result == " "

    def test_removes_arabic_indic_digits_and_punctuation(self):
        assert restrict_to_script("سؤال؟ ٣، جواب") == "سؤال  جواب"

    def test_removes_special_characters(self):
        assert restrict_to_script("!@#$%^&*()") == ""

    def test_removes_tatweel(self):
        assert restrict_to_script("كت" + TATWEEL + "اب") == "كتاب"

    def test_single_arabic_character(self):
        assert restrict_to_script("م") == "م"

    def test_single_space(self):
        assert restrict_to_script(" ") == " "

    def test_keeps_other_whitespace(self):
        assert restrict_to_script("بسم\tالله\nالرحمن") == "بسم\tالله\nالرحمن"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        assert restrict_to_script(text) == ""


class TestPreprocess:
    """Test the full normalization pipeline."""

    def test_output_is_lowercase(self):
        result = preprocess("HELLO")
        assert result == result.lower()

    def test_keeps_arabic(self):
        assert preprocess("بسم الله الرحمن الرحيم") == "بسم الله الرحمن الرحيم"

    def test_strips_diacritics_and_latin(self):
        text = "Bismillah ب" + FATHA + "س" + SUKUN + "م" + KASRA + " الله"
        assert preprocess(text) == " بسم الله"

    @pytest.mark.parametrize("text", ["", None, "   "])
    def test_blank_input(self, text):
        assert preprocess(text).strip() == ""

    def test_tokenize_splits_on_whitespace(self):
        assert tokenize("Hello بسم, الله! 42") == ["بسم", "الله"]

    def test_tokenize_empty(self):
        assert tokenize("!@#$ 123") == []
