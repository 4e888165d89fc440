class ImageScraperError(Exception):
    """Base class for errors reported to the caller of an extraction"""


class InvalidURLError(ImageScraperError):
    def __init__(self, value: str = ''):
        super().__init__(f'Invalid URL: {value!r}')
        self.value = value


class FetchFailedError(ImageScraperError):
    """The search page could not be fetched or parsed.

    The underlying cause is intentionally not kept.
    """

    def __init__(self, url: str = ''):
        super().__init__(f'Failed to fetch search results from {url}')
        self.url = url
