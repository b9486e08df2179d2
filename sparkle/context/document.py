"""Read-only document views consumed by the content extractor.

The extractor only needs four enumerable inputs: headings, code regions,
main-content paragraphs and the active selection. Any host that can supply
those can drive it; HtmlDocument supplies them from parsed HTML.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator

from bs4 import BeautifulSoup

HEADING_SELECTOR = "h1, h2, h3"
CODE_SELECTOR = "pre code, .highlight, .code-block"
MAIN_CONTENT_SELECTOR = 'article, main, [role="main"], .content, #content'


class DocumentView(ABC):
    """Read-only view over a structured document."""

    @abstractmethod
    def headings(self) -> Iterator[str]:
        """Heading texts in document order."""

    @abstractmethod
    def code_blocks(self) -> Iterator[str]:
        """Code region texts in document order."""

    @abstractmethod
    def main_paragraphs(self) -> Iterator[str]:
        """Paragraph texts inside the main content region."""

    @abstractmethod
    def selection(self) -> str:
        """The active text selection, '' when there is none."""


class HtmlDocument(DocumentView):
    """DocumentView over an HTML page parsed with BeautifulSoup."""

    def __init__(self, html: str, selection: str = ""):
        self.soup = BeautifulSoup(html, "html.parser")
        self._selection = selection

    def headings(self) -> Iterator[str]:
        for node in self.soup.select(HEADING_SELECTOR):
            yield node.get_text()

    def code_blocks(self) -> Iterator[str]:
        for node in self.soup.select(CODE_SELECTOR):
            yield node.get_text()

    def main_paragraphs(self) -> Iterator[str]:
        main = self.soup.select_one(MAIN_CONTENT_SELECTOR)
        if main is None:
            return
        for p in main.find_all("p"):
            yield p.get_text()

    def selection(self) -> str:
        return self._selection

    def title(self) -> str:
        """Page title with whitespace collapsed, '' when the page has none."""
        if self.soup.title is None:
            return ""
        return " ".join(self.soup.title.get_text().split())

    def meta_tags(self) -> Iterator[tuple[str, str]]:
        """(name or property, content) for every meta tag carrying both."""
        for tag in self.soup.select("meta[name], meta[property]"):
            name = tag.get("name") or tag.get("property")
            content = tag.get("content")
            if name and content:
                yield name, content

    def meta_content(self, prop: str) -> str:
        """Content of the first meta[property=...] tag, '' if absent."""
        tag = self.soup.find("meta", property=prop)
        if tag and tag.get("content"):
            return tag["content"]
        return ""


@dataclass
class StaticDocument(DocumentView):
    """DocumentView over pre-collected text, for hosts that do their own parsing."""

    heading_texts: list[str] = field(default_factory=list)
    code_texts: list[str] = field(default_factory=list)
    paragraph_texts: list[str] = field(default_factory=list)
    selected_text: str = ""

    def headings(self) -> Iterator[str]:
        return iter(self.heading_texts)

    def code_blocks(self) -> Iterator[str]:
        return iter(self.code_texts)

    def main_paragraphs(self) -> Iterator[str]:
        return iter(self.paragraph_texts)

    def selection(self) -> str:
        return self.selected_text
