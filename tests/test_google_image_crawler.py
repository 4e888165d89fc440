import contextlib
import io
import json
import os
import tempfile
import unittest
from unittest import mock

from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from fakes import FakeHttpClient
from image_scraper.core.errors import FetchFailedError
from image_scraper.crawlers.google_image_crawler import GoogleImageCrawler
from image_scraper.utils.settings import Settings

SEARCH_URL = 'https://www.google.com/search?tbm=isch&q=spider%20man'

RESULTS_PAGE = b"""
<div class="yWs4tf"><img src="https://img.example.com/a.jpg"></div>
<div class="yWs4tf"><img src="https://img.example.com/b.jpg"></div>
<div class="yWs4tf"><img src="not a url"></div>
"""


class TestSettings(unittest.TestCase):

    def test_defaults_without_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            settings = Settings(os.path.join(temp_dir, 'settings.json'))
            self.assertEqual(settings.get('search_word'), 'spider man')
            self.assertEqual(settings.get('marker_class'), 'yWs4tf')
            self.assertIsNone(settings.get('completion_timeout'))
            self.assertFalse(os.path.exists(os.path.join(temp_dir, 'settings.json')))

    def test_file_overrides_defaults(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, 'settings.json')
            with open(path, 'w') as file:
                json.dump({'search_word': 'iron man', 'max_workers': 2}, file)

            settings = Settings(path)
            self.assertEqual(settings.get('search_word'), 'iron man')
            self.assertEqual(settings.get('max_workers'), 2)
            self.assertEqual(settings.get('request_timeout'), 10.0)

    def test_unreadable_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, 'settings.json')
            with open(path, 'w') as file:
                file.write('{not json')

            self.assertEqual(Settings(path).settings, Settings.DEFAULT_SETTINGS)

    def test_display_settings(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            settings = Settings(os.path.join(temp_dir, 'settings.json'))
            output = io.StringIO()
            with contextlib.redirect_stdout(output):
                settings.display_settings()

        self.assertIn('Search Word: spider man', output.getvalue())
        self.assertIn('Marker Class: yWs4tf', output.getvalue())


class TestGoogleImageCrawler(unittest.TestCase):

    def setUp(self):
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        self.output_dir = temp_dir.name
        self.settings = Settings(os.path.join(self.output_dir, 'missing-settings.json'))

    def test_run_downloads_every_valid_url(self):
        client = FakeHttpClient({
            SEARCH_URL: RESULTS_PAGE,
            'https://img.example.com/a.jpg': b'a',
            'https://img.example.com/b.jpg': b'b',
        })
        crawler = GoogleImageCrawler(self.settings, http_client=client, output_dir=self.output_dir)

        result = crawler.run('spider man')

        self.assertTrue(result.ok)
        self.assertEqual(len(result.urls), 3)
        self.assertTrue(crawler.wait_for_downloads(timeout=10))
        self.assertEqual(sorted(os.listdir(self.output_dir)), ['1.jpeg', '2.jpeg'])

    def test_failed_search_launches_no_downloads(self):
        client = FakeHttpClient({SEARCH_URL: Urllib3TimeoutError('timed out')})
        crawler = GoogleImageCrawler(self.settings, http_client=client, output_dir=self.output_dir)

        with mock.patch.object(crawler.download_manager, 'download_all') as download_all:
            result = crawler.run('spider man')

        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, FetchFailedError)
        download_all.assert_not_called()
        self.assertEqual(client.requested, [SEARCH_URL])
        self.assertTrue(crawler.wait_for_downloads(timeout=1))
        self.assertEqual(os.listdir(self.output_dir), [])

    def test_connection_error_is_reported_not_raised(self):
        client = FakeHttpClient({SEARCH_URL: ConnectionResetError('reset by peer')})
        crawler = GoogleImageCrawler(self.settings, http_client=client, output_dir=self.output_dir)

        with mock.patch.object(crawler.download_manager, 'download_all') as download_all:
            result = crawler.run('spider man')

        self.assertIsInstance(result.error, FetchFailedError)
        download_all.assert_not_called()
        self.assertTrue(crawler.wait_for_downloads(timeout=1))


if __name__ == '__main__':
    unittest.main()
