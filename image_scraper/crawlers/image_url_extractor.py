from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.errors import FetchFailedError, ImageScraperError
from ..core.http_client import HttpClientInterface
from ..parsers.search_page_parser import SearchPageParser
from ..utils.url_tools import build_search_url


DEFAULT_SEARCH_BASE_URL = 'https://www.google.com/search?tbm=isch&q='


@dataclass
class ExtractionResult:
    urls: List[str] = field(default_factory=list)
    error: Optional[ImageScraperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ImageURLExtractor:
    """Collects image URLs from a search engine's image results page.

    Each element carrying the marker class contributes the ``src`` of its
    first nested image, in document order. Sources are passed through as
    found, so empty or relative values are kept.
    """

    def __init__(self, http_client: HttpClientInterface,
                 base_url: str = DEFAULT_SEARCH_BASE_URL,
                 parser: SearchPageParser = None):
        self.http_client = http_client
        self.base_url = base_url
        self.parser = parser or SearchPageParser()

    def fetch_image_urls(self, query: str) -> List[str]:
        """Blocking fetch and parse.

        Raises InvalidURLError when the query cannot form a URL and
        FetchFailedError for any transport or parse failure. The original
        cause of a FetchFailedError is dropped.
        """
        url = build_search_url(self.base_url, query)
        try:
            html_content = self.http_client.get(url)
            return self.parser.parse_image_sources(html_content)
        except Exception:
            raise FetchFailedError(url) from None

    def extract(self, query: str, on_complete: Callable[[ExtractionResult], None]) -> None:
        try:
            urls = self.fetch_image_urls(query)
        except ImageScraperError as e:
            result = ExtractionResult(error=e)
        else:
            result = ExtractionResult(urls=urls)
        on_complete(result)
