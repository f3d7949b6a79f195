# =============================================================================
# Message Tokenizer
# =============================================================================
# Converts raw message text into tokens (features) for the spam classifier.
#
# Tokenization is deliberately plain:
#   1. Lowercase everything
#   2. Punctuation and symbols become separators
#   3. Split on whitespace, drop empty pieces
#
# No stop words, no n-grams, no special pattern tokens. Every word the
# message contains is a feature, and repeated words count every time.
# =============================================================================

import re

# Any run of characters that is neither a word character nor whitespace.
# "Word character" is a letter, digit or underscore.
SEPARATOR_PATTERN = re.compile(r"[^\w\s]+")


def tokenize(text: str) -> list[str]:
    """
    Split message text into normalized word tokens.

    Args:
        text: Raw message text. May be empty.

    Returns:
        Tokens in the order they appear. Tokens may repeat.

    Example:
        >>> tokenize("Win FREE $$$ now!!!")
        ['win', 'free', 'now']
    """
    text = SEPARATOR_PATTERN.sub(" ", text.lower())
    return [word for word in text.split() if word]
