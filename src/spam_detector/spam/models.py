# =============================================================================
# Spam Classifier Data Models
# =============================================================================
# Plain value types shared by the classifier and the rest of the application:
#   - Label: The two classes a message can belong to
#   - ClassStatistics: Token and message counts for one class
#   - Prediction: The result of classifying a message
#   - ClassifierStats: Summary numbers for display and logging
#
# Everything here is immutable. A trained model is built once and then only
# read, so nothing downstream can change counts behind the classifier's back.
# =============================================================================

import numbers
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Label(Enum):
    """
    Message class.

    Values are the lowercase names used in datasets and in output.
    """
    SPAM = "spam"
    HAM = "ham"

    @classmethod
    def from_raw(cls, value: Any) -> "Label":
        """
        Convert a dataset label into a Label.

        Datasets encode the class in different ways. Exactly one value per
        encoding means spam:
            - Strings: "spam" (case and surrounding whitespace ignored)
            - Numbers and booleans: 1 / True

        Everything else is treated as ham.

        Args:
            value: Raw label as found in the training data.

        Returns:
            The matching Label.
        """
        if isinstance(value, Label):
            return value
        if isinstance(value, str):
            return cls.SPAM if value.strip().lower() == cls.SPAM.value else cls.HAM
        if isinstance(value, numbers.Number):
            return cls.SPAM if value == 1 else cls.HAM
        return cls.HAM


@dataclass(frozen=True)
class ClassStatistics:
    """
    Token frequencies for a single class.

    Attributes:
        token_counts: How often each token appeared in this class's messages.
                      Repeats inside one message are all counted.
        total_tokens: Sum of all token occurrences in this class.
        message_count: Number of training messages with this label.
    """
    token_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    total_tokens: int = 0
    message_count: int = 0

    def count(self, token: str) -> int:
        """Occurrences of token in this class (0 if never seen)."""
        return self.token_counts.get(token, 0)


@dataclass(frozen=True)
class Prediction:
    """
    Result of classifying a message.

    Attributes:
        label: The predicted class.
        confidence: Probability of the predicted class, in (0, 1].
        spam_probability: Normalized probability that the message is spam.
        ham_probability: Normalized probability that the message is ham.
    """
    label: Label
    confidence: float
    spam_probability: float = 0.5
    ham_probability: float = 0.5

    @property
    def is_spam(self) -> bool:
        """True if the message was classified as spam."""
        return self.label is Label.SPAM

    @property
    def percent(self) -> int:
        """Confidence as a rounded percentage, for display."""
        return round(self.confidence * 100)


@dataclass(frozen=True)
class ClassifierStats:
    """
    Statistics about a trained classifier.

    Attributes:
        spam_count: Number of spam messages trained on.
        ham_count: Number of ham messages trained on.
        token_count: Number of unique tokens in the vocabulary.
    """
    spam_count: int = 0
    ham_count: int = 0
    token_count: int = 0

    @property
    def total_messages(self) -> int:
        """Total number of training messages."""
        return self.spam_count + self.ham_count
