"""
Thin query layer over BeautifulSoup for the structural lookups the scraper needs.
"""
from typing import List, Optional

from bs4 import BeautifulSoup, Tag


class PageDocument:
    """Parsed HTML page with class/tag selection, nth access, descendant search and text reads."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def parse(cls, content: str) -> "PageDocument":
        return cls(BeautifulSoup(content, 'html5lib'))

    def by_class(self, class_name: str) -> List[Tag]:
        """All elements carrying class_name, in document order."""
        return self.soup.find_all(class_=class_name)

    def by_tag(self, tag_name: str) -> List[Tag]:
        """All elements with tag_name, in document order."""
        return self.soup.find_all(tag_name)

    @staticmethod
    def nth(elements: List[Tag], index: int) -> Optional[Tag]:
        """Element at 0-based index, or None when there are not enough matches."""
        if 0 <= index < len(elements):
            return elements[index]
        return None

    @staticmethod
    def descendants(element: Tag, tag_name: str) -> List[Tag]:
        return element.find_all(tag_name)

    @staticmethod
    def attribute(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def text(element: Optional[Tag]) -> str:
        """Raw text content including whitespace; empty string for a missing element."""
        if element is None:
            return ""
        return element.get_text()
