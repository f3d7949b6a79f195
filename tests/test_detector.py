# =============================================================================
# Spam Detector Service Tests
# =============================================================================

import pytest

from spam_detector.config import Config, DatasetConfig
from spam_detector.dataset import DatasetError
from spam_detector.detector import EmptyInputError, SpamDetector, TrainingStatus
from spam_detector.spam import DegenerateTrainingDataError, Label, NotTrainedError


class TestRetrain:
    """Tests for SpamDetector.retrain()."""

    @pytest.mark.asyncio
    async def test_reports_progress(self, file_config):
        detector = SpamDetector(file_config)
        reports = []

        stats = await detector.retrain(on_progress=reports.append)

        assert [r.status for r in reports] == [
            TrainingStatus.FETCHING,
            TrainingStatus.PARSING,
            TrainingStatus.TRAINING,
            TrainingStatus.READY,
        ]
        assert [r.percent for r in reports] == [10, 30, 80, 100]
        assert reports[-1].examples == 6
        assert stats.spam_count == 3
        assert stats.ham_count == 3
        assert detector.is_ready
        assert not detector.is_training
        assert detector.progress.status is TrainingStatus.READY

    @pytest.mark.asyncio
    async def test_initial_state(self):
        detector = SpamDetector()
        assert detector.progress.status is TrainingStatus.IDLE
        assert not detector.is_ready
        assert not detector.is_training
        assert detector.stats.total_messages == 0

    @pytest.mark.asyncio
    async def test_missing_dataset(self, tmp_path):
        config = Config(dataset=DatasetConfig(path=str(tmp_path / "missing.csv")))
        detector = SpamDetector(config)
        reports = []

        with pytest.raises(DatasetError):
            await detector.retrain(on_progress=reports.append)

        assert reports[-1].status is TrainingStatus.ERROR
        assert "missing.csv" in reports[-1].error
        assert not detector.is_ready
        assert not detector.is_training

    @pytest.mark.asyncio
    async def test_single_class_dataset(self, tmp_path):
        path = tmp_path / "ham_only.csv"
        path.write_text("v1,v2\nham,hello there\nham,see you soon\n", encoding="latin-1")
        detector = SpamDetector(Config(dataset=DatasetConfig(path=str(path))))

        with pytest.raises(DegenerateTrainingDataError):
            await detector.retrain()

        assert detector.progress.status is TrainingStatus.ERROR
        assert detector.progress.examples == 2

    @pytest.mark.asyncio
    async def test_failed_retrain_keeps_model(self, file_config, tmp_path):
        detector = SpamDetector(file_config)
        await detector.retrain()
        before = detector.check("Free entry to win a prize")

        detector.config.dataset.path = str(tmp_path / "gone.csv")
        with pytest.raises(DatasetError):
            await detector.retrain()

        assert detector.is_ready
        assert detector.check("Free entry to win a prize") == before


class TestCheck:
    """Tests for SpamDetector.check()."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input(self, trained_classifier, text):
        detector = SpamDetector(classifier=trained_classifier)
        with pytest.raises(EmptyInputError):
            detector.check(text)

    def test_not_trained(self):
        with pytest.raises(NotTrainedError):
            SpamDetector().check("free prize")

    def test_punctuation_only_is_not_an_error(self, trained_classifier):
        detector = SpamDetector(classifier=trained_classifier)
        result = detector.check("!!! ???")
        assert result.label is Label.HAM
        assert result.confidence == 0.5

    @pytest.mark.asyncio
    async def test_classifies_after_training(self, file_config):
        detector = SpamDetector(file_config)
        await detector.retrain()

        assert detector.check("WINNER! Claim your free prize now").is_spam
        assert not detector.check("Ok lar, say so early").is_spam
