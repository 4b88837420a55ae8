"""Test cases for content fingerprinting."""

import re

import pytest

from docindex.hashing import content_changed, fingerprint

HEX_32 = re.compile(r"^[0-9A-F]{32}$")


class TestFingerprint:
    """Test the MD5 content fingerprint."""

    def test_same_input_same_hash(self):
        assert fingerprint("Hello World") == fingerprint("Hello World")

    def test_known_md5_value(self):
        assert fingerprint("Hello World") == "B10A8DB164E0754105B7A99BE72E3FE5"

    def test_hash_is_32_hex_characters(self):
        assert HEX_32.match(fingerprint("Test content for hashing"))

    def test_different_inputs_differ(self):
        assert fingerprint("Hello World") != fingerprint("Hello World!")

    def test_whitespace_changes_hash(self):
        assert fingerprint("Hello World") != fingerprint("Hello  World")
        assert fingerprint("text") != fingerprint("text\n")

    def test_editing_content_changes_hash(self):
        original = "Original document content"
        assert fingerprint(original) != fingerprint(original + " - edited")

    @pytest.mark.parametrize("text", [
        "",
        "A",
        "بسم الله الرحمن الرحيم",
        "LongText " * 10000,
        "emoji 🤖 and symbols ∑∞",
    ])
    def test_valid_digest_for_any_text(self, text):
        assert HEX_32.match(fingerprint(text))

    def test_none_hashes_like_empty_string(self):
        assert fingerprint(None) == fingerprint("")
        assert fingerprint("") == "D41D8CD98F00B204E9800998ECF8427E"

    def test_no_collisions_across_sample(self):
        samples = [f"document {i}" for i in range(200)] + ["", " ", "  "]
        assert len({fingerprint(s) for s in samples}) == len(samples)


class TestContentChanged:
    """Test change detection against a stored fingerprint."""

    def test_unchanged_content(self):
        stored = fingerprint("الحمد لله رب العالمين")
        assert content_changed(stored, "الحمد لله رب العالمين") is False

    def test_changed_content(self):
        stored = fingerprint("الحمد لله رب العالمين")
        assert content_changed(stored, "الحمد لله رب العالمين تعديل جديد") is True

    def test_lower_case_stored_hash_is_accepted(self):
        stored = fingerprint("Hello World").lower()
        assert content_changed(stored, "Hello World") is False

    def test_missing_stored_hash_counts_as_changed(self):
        assert content_changed(None, "anything") is True
        assert content_changed("", "") is True
