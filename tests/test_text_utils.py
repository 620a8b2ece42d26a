# tests/test_text_utils.py
"""Unit tests for arrow clean-up in notes."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from autopark.utils.text import sanitize_arrows


class TestSanitizeArrows:
    def test_control_char_followed_by_two(self):
        assert sanitize_arrows("Base\x192Field") == "Base → Field"

    def test_ascii_arrow(self):
        assert sanitize_arrows("Base -> Field") == "Base → Field"

    def test_arrow_without_spaces_untouched(self):
        assert sanitize_arrows("a->b") == "a->b"

    def test_plain_text_untouched(self):
        assert sanitize_arrows("заправка 2 рази") == "заправка 2 рази"

    def test_none(self):
        assert sanitize_arrows(None) == ""
