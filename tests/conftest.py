# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the Spam Detector test suite.
# =============================================================================

import logging

import pytest

from spam_detector.config import Config, DatasetConfig
from spam_detector.logging_setup import HANDLER_NAME
from spam_detector.spam import SpamClassifier


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def tiny_examples():
    """The smallest useful training set."""
    return [
        ("free money now", "spam"),
        ("lunch tomorrow", "ham"),
    ]


@pytest.fixture
def sample_examples():
    """A small but realistic SMS training set."""
    return [
        ("WINNER!! You have been selected to receive a $900 prize reward!", "spam"),
        ("Free entry in 2 a wkly comp to win FA Cup final tkts. Text FA to 87121", "spam"),
        ("URGENT! Your mobile number has won a free prize. Call now to claim", "spam"),
        ("Congratulations! Claim your free holiday voucher now, reply WIN", "spam"),
        ("Hey, are we still meeting for lunch tomorrow?", "ham"),
        ("I'll be home late tonight, don't wait up for dinner", "ham"),
        ("Can you send me the report by end of day?", "ham"),
        ("Ok lar... Joking wif u oni...", "ham"),
        ("The meeting has been rescheduled to 3 PM.", "ham"),
        ("Sorry I missed your call, let's talk later", "ham"),
    ]


@pytest.fixture
def trained_classifier(sample_examples):
    """A classifier trained on sample_examples."""
    classifier = SpamClassifier()
    classifier.train(sample_examples)
    return classifier


@pytest.fixture
def sample_csv():
    """CSV text in the layout of the SMS Spam Collection file."""
    return (
        "v1,v2,,,\n"
        "ham,\"Go until jurong point, crazy.. Available only in bugis n great world\",,,\n"
        "ham,Ok lar... Joking wif u oni...,,,\n"
        "spam,Free entry in 2 a wkly comp to win FA Cup final tkts 21st May 2005,,,\n"
        "ham,U dun say so early hor... U c already then say...,,,\n"
        "spam,WINNER!! As a valued network customer you have been selected to receive a prize reward!,,,\n"
        "SPAM ,Urgent! Call now to claim your free prize,,,\n"
        "unknown,This row has a label nobody understands,,,\n"
        ",This row has no label,,,\n"
        "ham,,,,\n"
    )


@pytest.fixture
def dataset_file(tmp_path, sample_csv):
    """sample_csv written to disk in latin-1."""
    path = tmp_path / "spam.csv"
    path.write_text(sample_csv, encoding="latin-1")
    return path


@pytest.fixture
def file_config(dataset_file):
    """Config that trains from dataset_file."""
    return Config(dataset=DatasetConfig(path=str(dataset_file)))
