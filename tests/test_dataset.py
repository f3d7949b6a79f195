# =============================================================================
# Dataset Loading Tests
# =============================================================================

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from spam_detector.config import DatasetConfig
from spam_detector.dataset import (
    DatasetError,
    fetch_dataset,
    load_examples,
    parse_dataset,
    read_dataset_file,
)


def mock_get(mock_client, *, response=None, error=None):
    """Make httpx.AsyncClient().get() return response or raise error."""
    client = mock_client.return_value.__aenter__.return_value
    client.get = AsyncMock(return_value=response, side_effect=error)
    return client


def make_response(status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = text.encode("latin-1")
    return response


class TestParseDataset:
    """Tests for parse_dataset()."""

    def test_parses_sms_collection_layout(self, sample_csv):
        examples = parse_dataset(sample_csv)
        assert examples[0] == (
            "Go until jurong point, crazy.. Available only in bugis n great world",
            "ham",
        )
        assert [label for _, label in examples] == ["ham", "ham", "spam", "ham", "spam", "spam"]

    def test_labels_are_normalized(self, sample_csv):
        examples = parse_dataset(sample_csv)
        assert ("Urgent! Call now to claim your free prize", "spam") in examples

    def test_drops_unknown_and_missing_rows(self, sample_csv):
        texts = [text for text, _ in parse_dataset(sample_csv)]
        assert "This row has a label nobody understands" not in texts
        assert "This row has no label" not in texts
        assert len(texts) == 6

    def test_custom_columns(self):
        csv_text = "category,text,extra\nspam,win big,1\nham,call me,2\n"
        examples = parse_dataset(csv_text, label_column="category", message_column="text")
        assert examples == [("win big", "spam"), ("call me", "ham")]

    def test_missing_column(self, sample_csv):
        with pytest.raises(DatasetError, match="missing column"):
            parse_dataset(sample_csv, message_column="text")

    def test_no_valid_rows(self):
        with pytest.raises(DatasetError, match="No valid data found in CSV"):
            parse_dataset("v1,v2\nmaybe,hello\n,orphan\n")

    def test_header_only(self):
        with pytest.raises(DatasetError, match="No valid data"):
            parse_dataset("v1,v2\n")

    def test_empty_text(self):
        with pytest.raises(DatasetError, match="Failed to parse CSV"):
            parse_dataset("")

    def test_malformed_rows(self):
        with pytest.raises(DatasetError, match="Failed to parse CSV"):
            parse_dataset("v1,v2\nham,hi\nspam,a,b,c,d\n")

    def test_na_like_text_is_kept(self):
        examples = parse_dataset("v1,v2\nham,NA\nspam,free prize\n")
        assert ("NA", "ham") in examples


class TestFetchDataset:
    """Tests for fetch_dataset()."""

    @pytest.mark.asyncio
    async def test_success(self, sample_csv):
        with patch("httpx.AsyncClient") as mock_client:
            client = mock_get(mock_client, response=make_response(200, sample_csv))

            text = await fetch_dataset("https://example.com/spam.csv", timeout=5.0)

            assert text == sample_csv
            client.get.assert_awaited_once_with("https://example.com/spam.csv")
            mock_client.assert_called_once_with(timeout=5.0, follow_redirects=True)

    @pytest.mark.asyncio
    async def test_decodes_latin1(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_get(mock_client, response=make_response(200, "v1,v2\nspam,Win £100\n"))

            text = await fetch_dataset("https://example.com/spam.csv")

            assert "£100" in text

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_get(mock_client, response=make_response(404))

            with pytest.raises(DatasetError, match="HTTP 404"):
                await fetch_dataset("https://example.com/missing.csv")

    @pytest.mark.asyncio
    async def test_transport_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_get(mock_client, error=httpx.ConnectError("connection refused"))

            with pytest.raises(DatasetError, match="Failed to fetch data"):
                await fetch_dataset("https://example.com/spam.csv")

    @pytest.mark.asyncio
    async def test_bad_encoding_name(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_get(mock_client, response=make_response(200, "v1,v2\n"))

            with pytest.raises(DatasetError, match="decode"):
                await fetch_dataset("https://example.com/spam.csv", encoding="no-such-codec")


class TestLoadExamples:
    """Tests for reading the configured source."""

    def test_read_file(self, dataset_file, sample_csv):
        assert read_dataset_file(dataset_file) == sample_csv

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="Failed to read dataset"):
            read_dataset_file(tmp_path / "nope.csv")

    @pytest.mark.asyncio
    async def test_local_path_wins_over_url(self, dataset_file):
        config = DatasetConfig(url="https://example.com/spam.csv", path=str(dataset_file))
        with patch("httpx.AsyncClient") as mock_client:
            examples = await load_examples(config)
            mock_client.assert_not_called()
        assert len(examples) == 6

    @pytest.mark.asyncio
    async def test_downloads_url(self, sample_csv):
        config = DatasetConfig(url="https://example.com/spam.csv", timeout=3.0)
        with patch("httpx.AsyncClient") as mock_client:
            mock_get(mock_client, response=make_response(200, sample_csv))
            examples = await load_examples(config)
        assert len(examples) == 6
        assert {label for _, label in examples} == {"spam", "ham"}
