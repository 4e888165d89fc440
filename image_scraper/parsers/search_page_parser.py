from typing import Any, List
from bs4 import BeautifulSoup


class SearchPageParser:
    def __init__(self, marker_class: str = 'yWs4tf'):
        self.marker_class = marker_class

    def parse_image_sources(self, html_content: Any) -> List[str]:
        soup = BeautifulSoup(html_content, 'html.parser')

        image_sources = []
        for container in soup.find_all(class_=self.marker_class):
            image_sources.append(self._first_image_source(container))

        return image_sources

    @staticmethod
    def _first_image_source(container) -> str:
        # The container itself may be the image
        if container.name == 'img' and container.has_attr('src'):
            return container['src']

        image = container.find('img', src=True)
        if image is None:
            return ''
        return image['src']
