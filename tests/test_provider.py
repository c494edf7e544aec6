"""Tests for the cached dataset provider."""

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from reappearance.errors import DatasetFetchError
from reappearance.provider import DATA_SOURCE, Fetcher, load_dataset


class TestLoadDataset(unittest.TestCase):
    """캐시 우선 로드 / 원격 fallback 동작."""

    def setUp(self):
        self._tmp = TemporaryDirectory()
        self.cache_path = Path(self._tmp.name) / "hot-100-current.csv"
        self.fetcher = mock.Mock(spec=Fetcher)
        self.fetcher.fetch_text.return_value = "chart_week\n2000-01-01\n"

    def tearDown(self):
        self._tmp.cleanup()

    def test_cache_hit_skips_network(self):
        self.cache_path.write_text("cached,body\n", encoding="utf-8")

        text = load_dataset(self.cache_path, fetcher=self.fetcher)

        self.assertEqual(text, "cached,body\n")
        self.fetcher.fetch_text.assert_not_called()

    def test_cache_hit_preserves_crlf(self):
        self.cache_path.write_bytes(b"a,b\r\n1,2\r\n")

        text = load_dataset(self.cache_path, fetcher=self.fetcher)

        self.assertEqual(text, "a,b\r\n1,2\r\n")

    def test_cache_miss_fetches_and_writes_through(self):
        text = load_dataset(self.cache_path, fetcher=self.fetcher)

        self.assertEqual(text, "chart_week\n2000-01-01\n")
        self.fetcher.fetch_text.assert_called_once_with(DATA_SOURCE)
        self.assertEqual(self.cache_path.read_text(encoding="utf-8"), text)

    def test_second_load_uses_written_cache(self):
        load_dataset(self.cache_path, fetcher=self.fetcher)
        load_dataset(self.cache_path, fetcher=self.fetcher)
        self.assertEqual(self.fetcher.fetch_text.call_count, 1)

    def test_empty_cache_is_refetched(self):
        self.cache_path.write_text("", encoding="utf-8")

        load_dataset(self.cache_path, fetcher=self.fetcher)

        self.fetcher.fetch_text.assert_called_once()

    def test_cache_read_error_other_than_missing_propagates(self):
        self.cache_path.mkdir()

        with self.assertRaises(OSError):
            load_dataset(self.cache_path, fetcher=self.fetcher)
        self.fetcher.fetch_text.assert_not_called()

    def test_fetch_error_leaves_no_cache(self):
        self.fetcher.fetch_text.side_effect = DatasetFetchError("Not Found", 404)

        with self.assertRaises(DatasetFetchError):
            load_dataset(self.cache_path, fetcher=self.fetcher)
        self.assertFalse(self.cache_path.exists())


class TestFetcher(unittest.TestCase):
    """requests 세션 위의 단일 GET."""

    @mock.patch("reappearance.provider.requests.Session")
    def test_non_success_raises_with_reason(self, session_cls):
        response = mock.Mock(ok=False, status_code=404, reason="Not Found")
        session_cls.return_value.get.return_value = response

        with Fetcher() as fetcher:
            with self.assertRaises(DatasetFetchError) as ctx:
                fetcher.fetch_text("https://example.invalid/data.csv")

        self.assertEqual(str(ctx.exception), "Failed to fetch data: Not Found")
        self.assertEqual(ctx.exception.status_code, 404)
        session_cls.return_value.close.assert_called_once()

    @mock.patch("reappearance.provider.requests.Session")
    def test_success_returns_body(self, session_cls):
        response = mock.Mock(ok=True, status_code=200, reason="OK", text="a,b\n")
        session_cls.return_value.get.return_value = response

        with Fetcher() as fetcher:
            body = fetcher.fetch_text("https://example.invalid/data.csv")

        self.assertEqual(body, "a,b\n")
        session_cls.return_value.get.assert_called_once_with(
            "https://example.invalid/data.csv", timeout=None
        )


if __name__ == '__main__':
    unittest.main()
