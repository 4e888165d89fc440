#!/usr/bin/env python3
"""
Google Image Scraper
Fetches the image results page for a search word and saves every image
to the desktop as 1.jpeg, 2.jpeg, ...
"""

import threading

from image_scraper.crawlers.google_image_crawler import GoogleImageCrawler
from image_scraper.utils.settings import Settings


class ImageScraperApp:
    def __init__(self):
        self.settings = Settings()
        self.saved_files = []
        self._saved_lock = threading.Lock()
        self.crawler = None

    def _on_saved(self, url: str, path: str) -> None:
        with self._saved_lock:
            self.saved_files.append(path)

    def run(self):
        """Search, download and wait for the downloads to finish"""
        self.settings.display_settings()

        search_word = self.settings.get('search_word')
        print(f"🔍 Searching images for '{search_word}'...")

        self.crawler = GoogleImageCrawler(self.settings, on_saved=self._on_saved)
        result = self.crawler.run(search_word)
        if not result.ok:
            return

        finished = self.crawler.wait_for_downloads(self.settings.get('completion_timeout'))

        print(f"\n✅ Saved {len(self.saved_files)} images to {self.crawler.download_manager.output_dir}")
        if not finished:
            print("⚠️  Some downloads were still running and have been abandoned")


def main():
    app = ImageScraperApp()
    app.run()


if __name__ == "__main__":
    main()
