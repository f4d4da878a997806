"""
End-to-end tests for a scraper run with a fake fetcher.
"""

import csv
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import scraper
import scraper_config
from errors import FetchError, ListingLayoutError
from fetcher import parse_html
from models import FIELD_NAMES

FIXTURES = Path(__file__).parent / "fixtures"
LISTING_URL = scraper_config.HOST + scraper_config.SHOPPING_PAGE


def read_fixture(name):
    with open(FIXTURES / name, 'r', encoding='utf-8') as f:
        return f.read()


class FakeFetcher:
    """Serves pages from a dict; unknown URLs fail like a 404."""

    def __init__(self, pages):
        self.pages = pages

    def fetch(self, url):
        if url not in self.pages:
            raise FetchError(url, "HTTP 404")
        return parse_html(self.pages[url])


class TestRun(unittest.TestCase):
    """Test a full discovery, harvest and export run."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.output = Path(self.tmp.name) / "balls.csv"

    def tearDown(self):
        self.tmp.cleanup()

    def test_full_run(self):
        """Failed items are skipped, the rest are exported."""
        pages = {
            LISTING_URL: read_fixture("listing_page.html"),
            scraper_config.HOST + "/storm-phaze-ii-bowling-ball": read_fixture("item_page.html"),
            # Hustle Ink page is missing and fails with a FetchError
        }

        results = scraper.run(fetcher=FakeFetcher(pages), output_path=self.output)

        # The Phaze II link appears twice on the listing page
        self.assertEqual(len(results), 2)

        with open(self.output, 'r', encoding='utf-8', newline='') as f:
            rows = list(csv.reader(f))
        self.assertEqual(tuple(rows[0]), FIELD_NAMES)
        self.assertEqual(len(rows), 3)
        self.assertEqual({row[0] for row in rows[1:]}, {"Storm Phaze II"})

    def test_empty_listing_aborts_before_harvest(self):
        """A listing without product entries stops the run and writes nothing."""
        pages = {LISTING_URL: "<html><body><p>Maintenance</p></body></html>"}

        with mock.patch("scraper.Harvester") as harvester_cls:
            with self.assertRaises(ListingLayoutError):
                scraper.run(fetcher=FakeFetcher(pages), output_path=self.output)

        harvester_cls.assert_not_called()
        self.assertFalse(self.output.exists())

    def test_existing_output_kept_when_listing_fails(self):
        """A broken listing does not overwrite the previous CSV."""
        self.output.write_text("previous run\n", encoding='utf-8')

        with self.assertRaises(FetchError):
            scraper.run(fetcher=FakeFetcher({}), output_path=self.output)

        self.assertEqual(self.output.read_text(encoding='utf-8'), "previous run\n")


class TestMain(unittest.TestCase):
    """Test the entry point's exit behavior."""

    def test_listing_failure_exits_nonzero(self):
        with mock.patch("scraper.run", side_effect=ListingLayoutError("no entries")):
            with self.assertRaises(SystemExit) as ctx:
                scraper.main()
        self.assertEqual(ctx.exception.code, 1)

    def test_export_failure_exits_nonzero(self):
        with mock.patch("scraper.run", side_effect=PermissionError("read-only")):
            with self.assertRaises(SystemExit) as ctx:
                scraper.main()
        self.assertEqual(ctx.exception.code, 1)

    def test_success(self):
        with mock.patch("scraper.run") as run:
            scraper.main()
        run.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
