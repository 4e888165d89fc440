from typing import Callable
from ..core.http_client import HttpClientInterface, Urllib3HttpClient
from ..downloaders.download_manager import DownloadManager
from ..parsers.search_page_parser import SearchPageParser
from ..utils.settings import Settings
from .image_url_extractor import ExtractionResult, ImageURLExtractor


class GoogleImageCrawler:
    def __init__(self, settings: Settings = None, http_client: HttpClientInterface = None,
                 output_dir: str = None, on_saved: Callable[[str, str], None] = None):
        self.settings = settings or Settings()
        self.http_client = http_client or Urllib3HttpClient(
            timeout=self.settings.get('request_timeout'),
            maxsize=self.settings.get('max_workers'),
        )
        self.url_extractor = ImageURLExtractor(
            self.http_client,
            base_url=self.settings.get('search_base_url'),
            parser=SearchPageParser(self.settings.get('marker_class')),
        )
        self.download_manager = DownloadManager(
            self.http_client,
            output_dir=output_dir,
            max_workers=self.settings.get('max_workers'),
            on_saved=on_saved,
        )

    def run(self, query: str) -> ExtractionResult:
        results = []
        self.url_extractor.extract(query, results.append)
        result = results[0]

        if not result.ok:
            print(f'❌ {result.error}')
            return result

        print(f'Found {len(result.urls)} image URLs for "{query}"')
        self.download_manager.download_all(result.urls)
        return result

    def wait_for_downloads(self, timeout: float = None) -> bool:
        finished = self.download_manager.wait(timeout)
        self.download_manager.shutdown(wait=finished)
        return finished
