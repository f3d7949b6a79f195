# =============================================================================
# Spam Detector Service
# =============================================================================
# Glues the dataset loader and the classifier together for the application.
#
# Training pipeline:
#   1. Fetch the dataset (HTTP or local file)     ->  10%
#   2. Parse it into (message, label) pairs       ->  30%
#   3. Train a fresh classifier model             ->  80%
#   4. Publish the model                          -> 100%
#
# Progress is reported through a callback so the UI can draw a progress bar.
# Training itself is CPU-bound, so it runs in a worker thread to keep the
# event loop (and the UI) responsive. The classifier swaps in the new model
# only after it is fully built, so checks keep working against the previous
# model while a retrain is running, and after a retrain fails.
# =============================================================================

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from spam_detector.config import Config
from spam_detector.dataset import DatasetError, load_raw, parse_dataset
from spam_detector.spam import (
    ClassifierStats,
    DegenerateTrainingDataError,
    Prediction,
    SpamClassifier,
)


logger = logging.getLogger(__name__)


class TrainingStatus(Enum):
    """Current stage of a training run."""
    IDLE = auto()           # Never trained
    FETCHING = auto()       # Downloading / reading the dataset
    PARSING = auto()        # Parsing the CSV
    TRAINING = auto()       # Counting tokens
    READY = auto()          # Model trained and published
    ERROR = auto()          # Last training run failed


@dataclass
class TrainingProgress:
    """
    Progress information for a training run.

    Attributes:
        status: Current stage.
        percent: Overall completion, 0-100.
        examples: Number of labeled messages found in the dataset.
        error: Error message if status is ERROR.
    """
    status: TrainingStatus = TrainingStatus.IDLE
    percent: float = 0.0
    examples: int = 0
    error: str | None = None


ProgressCallback = Callable[[TrainingProgress], None]


class SpamDetector:
    """
    Trains the spam classifier from the configured dataset and checks
    messages against it.

    Usage:
        >>> detector = SpamDetector(Config.load())
        >>> await detector.retrain()
        >>> detector.check("Win a free iPhone! Click here now!").label
        <Label.SPAM: 'spam'>

    Attributes:
        config: Application configuration (dataset source).
        classifier: The classifier being trained.
    """

    def __init__(
        self,
        config: Config | None = None,
        classifier: SpamClassifier | None = None,
    ) -> None:
        """
        Initialize the detector.

        Args:
            config: Configuration. Uses defaults if None.
            classifier: Classifier instance. Creates an untrained one if None.
        """
        self.config = config or Config()
        self.classifier = classifier or SpamClassifier()
        self._progress = TrainingProgress()

    @property
    def progress(self) -> TrainingProgress:
        """Progress of the current (or last) training run."""
        return self._progress

    @property
    def is_training(self) -> bool:
        """True while a training run is in progress."""
        return self._progress.status in (
            TrainingStatus.FETCHING,
            TrainingStatus.PARSING,
            TrainingStatus.TRAINING,
        )

    @property
    def is_ready(self) -> bool:
        """True once a model is available for checking messages."""
        return self.classifier.is_trained

    @property
    def stats(self) -> ClassifierStats:
        """Statistics of the current model."""
        return self.classifier.stats

    async def retrain(self, on_progress: ProgressCallback | None = None) -> ClassifierStats:
        """
        Load the dataset and train a new model from scratch.

        Args:
            on_progress: Called with a TrainingProgress at every stage.

        Returns:
            Statistics of the newly trained model.

        Raises:
            DatasetError: If the dataset can't be fetched or parsed.
            DegenerateTrainingDataError: If the dataset lacks spam or ham.
        """
        dataset = self.config.dataset
        logger.info(f"Training from {dataset.source}")

        try:
            self._update(on_progress, TrainingStatus.FETCHING, 10)
            csv_text = await load_raw(dataset)

            self._update(on_progress, TrainingStatus.PARSING, 30)
            examples = parse_dataset(
                csv_text,
                label_column=dataset.label_column,
                message_column=dataset.message_column,
            )

            self._update(on_progress, TrainingStatus.TRAINING, 80, examples=len(examples))
            await asyncio.to_thread(self.classifier.train, examples)
        except (DatasetError, DegenerateTrainingDataError) as e:
            logger.error(f"Training error: {e}")
            self._update(
                on_progress,
                TrainingStatus.ERROR,
                self._progress.percent,
                examples=self._progress.examples,
                error=str(e),
            )
            raise

        self._update(on_progress, TrainingStatus.READY, 100, examples=len(examples))
        return self.classifier.stats

    def check(self, text: str) -> Prediction:
        """
        Classify a message entered by the user.

        Args:
            text: Message text.

        Returns:
            Prediction with label and confidence.

        Raises:
            EmptyInputError: If the text is empty or whitespace only.
            NotTrainedError: If no model has been trained yet.
        """
        if not text or not text.strip():
            raise EmptyInputError("Please enter a message to check")
        return self.classifier.predict(text)

    def _update(
        self,
        on_progress: ProgressCallback | None,
        status: TrainingStatus,
        percent: float,
        *,
        examples: int = 0,
        error: str | None = None,
    ) -> None:
        """Record progress and notify the callback."""
        self._progress = TrainingProgress(
            status=status,
            percent=percent,
            examples=examples,
            error=error,
        )
        logger.debug(f"Training progress: {status.name} {percent:.0f}%")
        if on_progress:
            on_progress(self._progress)


# =============================================================================
# Exceptions
# =============================================================================

class EmptyInputError(ValueError):
    """Raised when asked to check an empty message."""
    pass
