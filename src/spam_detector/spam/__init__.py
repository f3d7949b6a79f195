# =============================================================================
# Spam Module
# =============================================================================
# Multinomial Naive Bayes spam filtering for short messages.
#
# The classifier is trained in bulk from a labeled corpus and then used to
# classify new messages:
#   - tokenize(): Lowercased word tokens, punctuation as separators
#   - SpamClassifier: Holds the current trained model, swaps it on retrain
#   - NaiveBayesModel: An immutable trained snapshot
#
# There is no saved model format. Retraining from the dataset is the only
# way to get a trained classifier.
# =============================================================================

from spam_detector.spam.classifier import (
    ClassifierError,
    DegenerateTrainingDataError,
    NaiveBayesModel,
    NotTrainedError,
    SpamClassifier,
)
from spam_detector.spam.models import ClassifierStats, ClassStatistics, Label, Prediction
from spam_detector.spam.tokenizer import tokenize

__all__ = [
    "SpamClassifier",
    "NaiveBayesModel",
    "ClassifierError",
    "NotTrainedError",
    "DegenerateTrainingDataError",
    "Label",
    "Prediction",
    "ClassStatistics",
    "ClassifierStats",
    "tokenize",
]
