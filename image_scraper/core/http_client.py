from abc import ABC, abstractmethod
from typing import Any, BinaryIO


class HttpClientInterface(ABC):
    @abstractmethod
    def get(self, url: str) -> Any:
        pass

    @abstractmethod
    def download_to(self, url: str, file: BinaryIO) -> None:
        pass


class Urllib3HttpClient(HttpClientInterface):
    CHUNK_SIZE = 8192

    def __init__(self, timeout: float = 10.0, maxsize: int = 8):
        import urllib3
        # No retries, redirects still followed
        retries = urllib3.Retry(connect=0, read=0, status=0, other=0, redirect=10)
        self.http = urllib3.PoolManager(
            timeout=urllib3.Timeout(total=timeout),
            retries=retries,
            maxsize=maxsize,
        )

    def get(self, url: str) -> Any:
        response = self.http.request('GET', url)
        return response.data

    def download_to(self, url: str, file: BinaryIO) -> None:
        response = self.http.request('GET', url, preload_content=False)
        try:
            for chunk in response.stream(self.CHUNK_SIZE):
                file.write(chunk)
        finally:
            response.release_conn()
