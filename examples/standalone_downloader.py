from image_scraper.core.http_client import Urllib3HttpClient
from image_scraper.downloaders.download_manager import DownloadManager


def download_images_from_links():
    # Example image links; the last one is not a URL and is skipped
    image_links = [
        "https://example.com/image1.jpg",
        "https://example.com/image2.jpg",
        "not a url",
    ]

    # Initialize components
    http_client = Urllib3HttpClient()
    downloader = DownloadManager(http_client, output_dir="data/images")

    # Download files
    downloader.download_all(image_links)
    downloader.wait()
    downloader.shutdown()

    print(f"Downloaded files are in {downloader.output_dir}")


if __name__ == "__main__":
    download_images_from_links()
