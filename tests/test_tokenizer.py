# =============================================================================
# Tokenizer Tests
# =============================================================================

import pytest

from spam_detector.spam import tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_symbols_are_separators(self):
        assert tokenize("Win FREE $$$ now!!!") == ["win", "free", "now"]

    def test_lowercases(self):
        assert tokenize("HELLO World") == ["hello", "world"]

    def test_punctuation_splits_words(self):
        assert tokenize("fake-link.com") == ["fake", "link", "com"]

    def test_keeps_digits_and_underscores(self):
        assert tokenize("call 87121 now_please") == ["call", "87121", "now_please"]

    def test_repeated_tokens_are_kept(self):
        assert tokenize("free free FREE") == ["free", "free", "free"]

    def test_order_is_preserved(self):
        assert tokenize("c b a") == ["c", "b", "a"]

    def test_mixed_whitespace(self):
        assert tokenize("  lunch\t\ttomorrow\n\nok  ") == ["lunch", "tomorrow", "ok"]

    @pytest.mark.parametrize("text", ["", "   ", "!!! ??? ...", "$$$", "\n\t"])
    def test_no_tokens(self, text):
        assert tokenize(text) == []

    def test_money_amount(self):
        assert tokenize("You have won $1000.") == ["you", "have", "won", "1000"]

    @pytest.mark.parametrize("text", [
        "Win FREE $$$ now!!!",
        "URGENT: Your account will be closed. Verify now: http://fake-link.com",
        "Hey, are we still meeting for lunch tomorrow?",
        "Ok lar... Joking wif u oni...",
        "",
    ])
    def test_idempotent_on_joined_output(self, text):
        tokens = tokenize(text)
        assert tokenize(" ".join(tokens)) == tokens
