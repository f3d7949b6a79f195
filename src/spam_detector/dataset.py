# =============================================================================
# Training Dataset Loading
# =============================================================================
# Fetches and parses the labeled message corpus the classifier is trained on.
#
# The default source is the public SMS Spam Collection CSV, which has a
# header row and two interesting columns:
#   - v1: "spam" or "ham"
#   - v2: the message text
# (plus some empty trailing columns we ignore).
#
# Rows missing either field, or with a label other than spam/ham, are
# skipped. The classifier only ever sees clean (text, label) pairs.
# =============================================================================

import io
import logging
from pathlib import Path

import httpx
import pandas as pd

from spam_detector.config import DatasetConfig


logger = logging.getLogger(__name__)

VALID_LABELS = ("spam", "ham")


async def fetch_dataset(url: str, *, timeout: float = 30.0, encoding: str = "latin-1") -> str:
    """
    Download a CSV dataset.

    Args:
        url: Location of the CSV file.
        timeout: Request timeout in seconds.
        encoding: Text encoding of the file.

    Returns:
        The CSV file contents.

    Raises:
        DatasetError: If the download fails or the server doesn't return 200.
    """
    logger.info(f"Downloading dataset from {url}")

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url)
    except httpx.HTTPError as e:
        raise DatasetError(f"Failed to fetch data: {e}") from e

    if response.status_code != 200:
        raise DatasetError(f"Failed to fetch dataset (HTTP {response.status_code})")

    try:
        text = response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise DatasetError(f"Failed to decode dataset as {encoding}: {e}") from e

    logger.debug(f"Downloaded {len(text)} characters")
    return text


def read_dataset_file(path: Path, *, encoding: str = "latin-1") -> str:
    """
    Read a CSV dataset from disk.

    Raises:
        DatasetError: If the file can't be read or decoded.
    """
    logger.info(f"Reading dataset from {path}")
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise DatasetError(f"Failed to read dataset {path}: {e}") from e


def parse_dataset(
    csv_text: str,
    *,
    label_column: str = "v1",
    message_column: str = "v2",
) -> list[tuple[str, str]]:
    """
    Parse CSV text into (message, label) training pairs.

    Labels are normalized to lowercase "spam" / "ham". Rows where either
    field is empty, or the label is something else, are dropped.

    Args:
        csv_text: CSV contents with a header row.
        label_column: Header of the label column.
        message_column: Header of the message column.

    Returns:
        List of (message, label) tuples in file order.

    Raises:
        DatasetError: If the CSV is malformed, lacks the columns, or has no
                      usable rows.
    """
    try:
        frame = pd.read_csv(
            io.StringIO(csv_text),
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetError(f"Failed to parse CSV: {e}") from e

    missing = [column for column in (label_column, message_column) if column not in frame.columns]
    if missing:
        raise DatasetError(f"Dataset is missing column(s): {', '.join(missing)}")

    frame = frame[[label_column, message_column]].dropna()
    labels = frame[label_column].str.strip().str.lower()
    valid = labels.isin(VALID_LABELS)

    examples = list(zip(frame.loc[valid, message_column], labels[valid]))

    skipped = len(valid) - len(examples)
    if skipped:
        logger.debug(f"Skipped {skipped} rows with unrecognized labels")

    if not examples:
        raise DatasetError("No valid data found in CSV")

    logger.info(f"Parsed {len(examples)} labeled messages")
    return examples


async def load_raw(dataset: DatasetConfig) -> str:
    """Fetch the configured dataset's text, from disk or over HTTP."""
    if dataset.path:
        return read_dataset_file(Path(dataset.path).expanduser(), encoding=dataset.encoding)
    return await fetch_dataset(dataset.url, timeout=dataset.timeout, encoding=dataset.encoding)


async def load_examples(dataset: DatasetConfig) -> list[tuple[str, str]]:
    """
    Fetch and parse the configured dataset.

    Returns:
        List of (message, label) tuples.

    Raises:
        DatasetError: If the data can't be fetched or parsed.
    """
    csv_text = await load_raw(dataset)
    return parse_dataset(
        csv_text,
        label_column=dataset.label_column,
        message_column=dataset.message_column,
    )


# =============================================================================
# Exceptions
# =============================================================================

class DatasetError(Exception):
    """Raised when the training dataset can't be fetched or parsed."""
    pass
