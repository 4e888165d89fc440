import os
import tempfile
import threading
import concurrent.futures as cf
from typing import Callable, Iterable, List, Optional

from ..core.file_id import FileIDGenerator
from ..core.http_client import HttpClientInterface
from ..utils.file_manager import FileManager
from ..utils.url_tools import decode_data_url, is_data_url, is_downloadable_url


class DownloadManager:
    """Downloads images concurrently and stores them as ``<id>.jpeg``.

    Ids come from a counter owned by the manager and are taken when a
    transfer completes, so they follow completion order rather than the
    order URLs were submitted in. Completion order across tasks is not
    defined.

    Every failure after a task starts (transfer, removing the old file,
    moving the new one into place) is absorbed: the caller only sees that no
    file appeared.
    """

    FILE_EXTENSION = 'jpeg'

    def __init__(self, http_client: HttpClientInterface, output_dir: str = None,
                 max_workers: int = 8,
                 on_saved: Callable[[str, str], None] = None):
        self.http_client = http_client
        self.output_dir = output_dir or FileManager.desktop_directory()
        FileManager.ensure_directory(self.output_dir)
        self.on_saved = on_saved
        self._file_ids = FileIDGenerator()
        self._executor = cf.ThreadPoolExecutor(max_workers=max_workers,
                                               thread_name_prefix='image-download')
        self._futures: List[cf.Future] = []
        self._futures_lock = threading.Lock()

    def download_all(self, urls: Iterable[str]) -> None:
        for url in urls:
            self.download(url)

    def download(self, url: str) -> Optional[cf.Future]:
        """Start one download.

        Returns None without doing anything when ``url`` is neither a valid
        http(s) URL nor a data URL. Otherwise the future resolves to the saved
        path, or to None if the download failed.
        """
        if not is_downloadable_url(url):
            return None

        future = self._executor.submit(self._download_one, url)
        with self._futures_lock:
            self._futures.append(future)
        return future

    def wait(self, timeout: float = None) -> bool:
        """Block until every launched download finished or timeout passed."""
        with self._futures_lock:
            futures = list(self._futures)
        _, not_done = cf.wait(futures, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait, cancel_futures=not wait)

    def destination_path(self, file_id: int) -> str:
        return os.path.join(self.output_dir, f'{file_id}.{self.FILE_EXTENSION}')

    def _download_one(self, url: str) -> Optional[str]:
        temp_path = self._fetch_to_temp(url)
        if temp_path is None:
            return None

        destination = self.destination_path(self._file_ids.next_id())
        if not FileManager.replace_file(temp_path, destination):
            FileManager.remove_quietly(temp_path)
            return None

        if self.on_saved is not None:
            self.on_saved(url, destination)
        return destination

    def _fetch_to_temp(self, url: str) -> Optional[str]:
        try:
            fd, temp_path = tempfile.mkstemp(suffix='.download')
        except OSError:
            return None

        try:
            with os.fdopen(fd, 'wb') as file:
                if is_data_url(url):
                    file.write(decode_data_url(url))
                else:
                    self.http_client.download_to(url, file)
        except Exception:
            # Any transfer failure ends the task without a file
            FileManager.remove_quietly(temp_path)
            return None
        return temp_path
