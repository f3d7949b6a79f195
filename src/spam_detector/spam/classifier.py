# =============================================================================
# Naive Bayes Spam Classifier
# =============================================================================
# A multinomial Naive Bayes classifier for short messages (SMS / email).
#
# How it works:
#   1. During training, we count how often each token appears in spam vs ham
#      (every occurrence counts, not just presence)
#   2. For classification, we calculate:
#      log P(spam|tokens) ∝ log P(spam) + Σ log P(token|spam)
#      log P(ham|tokens)  ∝ log P(ham)  + Σ log P(token|ham)
#   3. The two log scores are normalized with the log-sum-exp trick and the
#      class with the strictly higher score wins (ties go to ham)
#
# Laplace (add-one) smoothing keeps every token probability above zero, so a
# word never seen during training can't zero out a whole message.
#
# Training builds a brand new NaiveBayesModel and then swaps it in with a
# single assignment. A predict() running at the same time sees either the
# old model or the new one, never something in between.
# =============================================================================

import logging
import math
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable

from spam_detector.spam.models import ClassifierStats, ClassStatistics, Label, Prediction
from spam_detector.spam.tokenizer import tokenize


logger = logging.getLogger(__name__)

# Add-one smoothing
ALPHA = 1

# Returned for messages with no usable tokens, whatever the training data
NEUTRAL_CONFIDENCE = 0.5


@dataclass(frozen=True)
class NaiveBayesModel:
    """
    A trained model: per-class statistics plus the shared vocabulary.

    Instances are immutable snapshots. Build one with fit().

    Attributes:
        spam: Statistics for spam messages.
        ham: Statistics for ham messages.
        vocabulary: Every distinct token seen in training, in either class.
    """
    spam: ClassStatistics
    ham: ClassStatistics
    vocabulary: frozenset[str]

    @classmethod
    def fit(cls, examples: Iterable[tuple[str, Any]]) -> "NaiveBayesModel":
        """
        Build a model from labeled examples.

        Args:
            examples: (text, label) pairs. Labels may be strings ("spam" /
                      "ham") or spam indicators (1 / 0, True / False).

        Returns:
            The trained model.

        Raises:
            DegenerateTrainingDataError: If either class has no messages, or
                                         no example produced a single token.
        """
        counts: dict[Label, Counter[str]] = {Label.SPAM: Counter(), Label.HAM: Counter()}
        messages = {Label.SPAM: 0, Label.HAM: 0}

        for text, raw_label in examples:
            label = Label.from_raw(raw_label)
            # Empty messages still count toward the prior
            messages[label] += 1
            counts[label].update(tokenize(text))

        for label, message_count in messages.items():
            if message_count == 0:
                raise DegenerateTrainingDataError(
                    f"Training data has no {label.value} messages"
                )

        vocabulary = frozenset(counts[Label.SPAM]) | frozenset(counts[Label.HAM])
        if not vocabulary:
            raise DegenerateTrainingDataError("Training data contains no tokens")

        def build(label: Label) -> ClassStatistics:
            return ClassStatistics(
                token_counts=MappingProxyType(dict(counts[label])),
                total_tokens=sum(counts[label].values()),
                message_count=messages[label],
            )

        return cls(spam=build(Label.SPAM), ham=build(Label.HAM), vocabulary=vocabulary)

    @property
    def stats(self) -> ClassifierStats:
        """Summary counts for this model."""
        return ClassifierStats(
            spam_count=self.spam.message_count,
            ham_count=self.ham.message_count,
            token_count=len(self.vocabulary),
        )

    def statistics(self, label: Label) -> ClassStatistics:
        """Statistics for the given class."""
        return self.spam if label is Label.SPAM else self.ham

    def log_prior(self, label: Label) -> float:
        """log P(class), from the share of training messages in that class."""
        total = self.spam.message_count + self.ham.message_count
        return math.log(self.statistics(label).message_count / total)

    def word_log_probability(self, token: str, label: Label) -> float:
        """
        Laplace-smoothed log P(token|class).

        Tokens outside the vocabulary get the same smoothing as any other
        unseen token, so the result is always finite.
        """
        stats = self.statistics(label)
        numerator = stats.count(token) + ALPHA
        denominator = stats.total_tokens + ALPHA * len(self.vocabulary)
        return math.log(numerator / denominator)

    def log_score(self, tokens: list[str], label: Label) -> float:
        """Unnormalized log posterior of a token sequence for one class."""
        score = self.log_prior(label)
        for token in tokens:
            score += self.word_log_probability(token, label)
        return score

    def predict(self, text: str) -> Prediction:
        """
        Classify a message.

        Args:
            text: Raw message text.

        Returns:
            Prediction with the winning label and its probability. Messages
            without any tokens (empty, punctuation only) are ham at 0.5.
        """
        tokens = tokenize(text)
        if not tokens:
            return Prediction(label=Label.HAM, confidence=NEUTRAL_CONFIDENCE)

        log_spam = self.log_score(tokens, Label.SPAM)
        log_ham = self.log_score(tokens, Label.HAM)

        # Log-sum-exp: shift by the max so the larger term becomes exp(0) = 1
        max_log = max(log_spam, log_ham)
        exp_spam = math.exp(log_spam - max_log)
        exp_ham = math.exp(log_ham - max_log)
        total = exp_spam + exp_ham

        prob_spam = exp_spam / total
        prob_ham = exp_ham / total

        label = Label.SPAM if log_spam > log_ham else Label.HAM
        confidence = prob_spam if label is Label.SPAM else prob_ham

        logger.debug(
            f"Classified {len(tokens)} tokens: log_spam={log_spam:.3f}, "
            f"log_ham={log_ham:.3f} -> {label.value} ({confidence:.3f})"
        )

        return Prediction(
            label=label,
            confidence=confidence,
            spam_probability=prob_spam,
            ham_probability=prob_ham,
        )


class SpamClassifier:
    """
    Naive Bayes spam classifier.

    Trained in bulk from a labeled corpus, then used to classify new
    messages. Retraining always starts from scratch.

    Usage:
        >>> classifier = SpamClassifier()
        >>> classifier.train([("free money now", "spam"), ("lunch tomorrow", "ham")])
        >>> result = classifier.predict("free money")
        >>> result.label, round(result.confidence, 2)
        (<Label.SPAM: 'spam'>, 0.75)
    """

    def __init__(self) -> None:
        """Initialize an untrained classifier."""
        self._model: NaiveBayesModel | None = None

    @property
    def model(self) -> NaiveBayesModel | None:
        """The current trained model, or None if untrained."""
        return self._model

    @property
    def is_trained(self) -> bool:
        """Returns True if the classifier has been trained."""
        return self._model is not None

    @property
    def stats(self) -> ClassifierStats:
        """Get classifier statistics (all zeros when untrained)."""
        model = self._model
        return model.stats if model is not None else ClassifierStats()

    def train(self, examples: Iterable[tuple[str, Any]]) -> None:
        """
        Train the classifier, replacing everything learned before.

        The new model is only published once it is complete. If training
        fails, the previous model (if any) stays in place.

        Args:
            examples: (text, label) pairs.

        Raises:
            DegenerateTrainingDataError: If a class has no examples or the
                                         examples contain no tokens.
        """
        model = NaiveBayesModel.fit(examples)
        self._model = model

        stats = model.stats
        logger.info(
            f"Trained on {stats.spam_count} spam, {stats.ham_count} ham messages "
            f"({stats.token_count} distinct tokens)"
        )

    def predict(self, text: str) -> Prediction:
        """
        Classify a message.

        Args:
            text: Raw message text.

        Returns:
            Prediction with label and confidence.

        Raises:
            NotTrainedError: If train() has never succeeded.
        """
        return self._require_model().predict(text)

    def word_log_probability(self, token: str, label: Label) -> float:
        """
        Smoothed log P(token|label) under the current model.

        Raises:
            NotTrainedError: If train() has never succeeded.
        """
        return self._require_model().word_log_probability(token, label)

    def reset(self) -> None:
        """Reset the classifier to untrained state."""
        self._model = None

    def _require_model(self) -> NaiveBayesModel:
        model = self._model
        if model is None:
            raise NotTrainedError("Model not trained yet")
        return model


# =============================================================================
# Exceptions
# =============================================================================

class ClassifierError(Exception):
    """Base class for classifier errors."""
    pass


class NotTrainedError(ClassifierError):
    """Raised when classifying before the classifier has been trained."""
    pass


class DegenerateTrainingDataError(ClassifierError):
    """Raised when training data can't produce a usable model."""
    pass
