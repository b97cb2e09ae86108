"""Field extractor for the local news article corpus.

The corpus is generated from a single HTML template, so every field lives
behind a known marker. Rather than heuristically hunting for the "main
content" of arbitrary pages, each field is read from an explicit list of
locators, tried in order:

    title      <title>
    content    "articleBody": "..." (JSON-LD), else every <p> inside <body>
    data_type  <datatype>, else <meta name="datatype" content="...">
    label      <label>, else <meta name="label" content="...">

A field whose markers are all absent raises FieldNotFoundError; a marker that
is present but empty yields "". The same policy holds for all four fields.

Swap in another NewsTemplate to read a differently structured corpus.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from schemas.article_record import ArticleRecord
from scrapers.utils import collapse_whitespace, normalize_whitespace, parse_html, strip_markup

logger = logging.getLogger(__name__)

ARTICLE_BODY_PATTERN = re.compile(r'"articleBody"\s*:\s*"((?:[^"\\]|\\.)*)"', re.DOTALL)


class FieldNotFoundError(LookupError):
    """None of a field's markers are present in the document."""

    def __init__(self, field_name: str, source: str = ""):
        self.field_name = field_name
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Field '{field_name}' not found{where}")


@dataclass(frozen=True)
class FieldLocator:
    """Locates one field by tag name and attribute filter.

    ``attribute`` reads that attribute instead of the element text.
    ``within`` restricts the search to the first element of that tag.
    ``collect_all`` joins every match with a blank line instead of taking the first.
    """

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    attribute: Optional[str] = None
    within: Optional[str] = None
    collect_all: bool = False

    def find(self, soup: BeautifulSoup) -> Optional[str]:
        scope = soup
        if self.within:
            scope = soup.find(self.within)
            if scope is None:
                return None

        attrs = dict(self.attrs)
        if self.collect_all:
            elements = scope.find_all(self.tag, attrs=attrs)
            if not elements:
                return None
            return "\n\n".join(collapse_whitespace(self._value(el) or "") for el in elements)

        element = scope.find(self.tag, attrs=attrs)
        if element is None:
            return None
        return self._value(element)

    def _value(self, element) -> Optional[str]:
        if self.attribute:
            value = element.get(self.attribute)
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, list):
                return " ".join(value)
            return value
        return element.get_text()


@dataclass(frozen=True)
class NewsTemplate:
    """Locators for each ArticleRecord field of one document template."""

    name: str
    title: tuple[FieldLocator, ...]
    content: tuple[FieldLocator, ...]
    data_type: tuple[FieldLocator, ...]
    label: tuple[FieldLocator, ...]
    # Raw-text pattern tried before the content locators
    content_pattern: Optional[re.Pattern] = None


DEFAULT_TEMPLATE = NewsTemplate(
    name="news-corpus",
    title=(FieldLocator("title"),),
    content=(FieldLocator("p", within="body", collect_all=True),),
    data_type=(
        FieldLocator("datatype"),
        FieldLocator("meta", attrs=(("name", "datatype"),), attribute="content"),
    ),
    label=(
        FieldLocator("label"),
        FieldLocator("meta", attrs=(("name", "label"),), attribute="content"),
    ),
    content_pattern=ARTICLE_BODY_PATTERN,
)


def _decode_json_string(raw: str) -> str:
    try:
        return json.loads(f'"{raw}"', strict=False)
    except json.JSONDecodeError:
        # Not strictly valid JSON escaping; use the text as written
        return raw


class ArticleExtractor:
    """Extracts ArticleRecord fields from the raw text of one HTML document.

    Every method is a pure function of its input: no I/O and no state shared
    between calls.
    """

    def __init__(self, template: NewsTemplate = DEFAULT_TEMPLATE):
        self.template = template

    def get_news_title(self, text: str) -> str:
        return self._title(parse_html(text))

    def get_news_content(self, text: str) -> str:
        return self._content(text, parse_html(text))

    def get_data_type(self, text: str) -> str:
        return self._data_type(parse_html(text))

    def get_label(self, text: str) -> str:
        return self._label(parse_html(text))

    def extract(self, text: str, source: str = "") -> ArticleRecord:
        """Build an ArticleRecord from one document, parsing the markup once.

        Raises:
            FieldNotFoundError: if any of the four fields is missing.
        """
        soup = parse_html(text)
        try:
            return ArticleRecord(
                title=self._title(soup),
                content=self._content(text, soup),
                data_type=self._data_type(soup),
                label=self._label(soup),
                source=source,
            )
        except FieldNotFoundError as e:
            raise FieldNotFoundError(e.field_name, source) from e

    def _title(self, soup: BeautifulSoup) -> str:
        return self._locate("title", self.template.title, soup)

    def _content(self, text: str, soup: BeautifulSoup) -> str:
        pattern = self.template.content_pattern
        if pattern is not None:
            match = pattern.search(text)
            if match:
                body = _decode_json_string(match.group(1))
                return normalize_whitespace(strip_markup(body))
        return self._locate("content", self.template.content, soup, normalize_whitespace)

    def _data_type(self, soup: BeautifulSoup) -> str:
        return self._locate("data_type", self.template.data_type, soup)

    def _label(self, soup: BeautifulSoup) -> str:
        return self._locate("label", self.template.label, soup)

    def _locate(
        self,
        field_name: str,
        locators: tuple[FieldLocator, ...],
        soup: BeautifulSoup,
        clean=collapse_whitespace,
    ) -> str:
        for locator in locators:
            value = locator.find(soup)
            if value is not None:
                return clean(value)
        logger.debug("No marker for field '%s' (template %s)", field_name, self.template.name)
        raise FieldNotFoundError(field_name)


_default_extractor = ArticleExtractor()


def get_news_title(text: str) -> str:
    """Title of the document, from its <title> element."""
    return _default_extractor.get_news_title(text)


def get_news_content(text: str) -> str:
    """Article body with markup stripped."""
    return _default_extractor.get_news_content(text)


def get_data_type(text: str) -> str:
    """Dataset split marker (e.g. "Training" or "Testing")."""
    return _default_extractor.get_data_type(text)


def get_label(text: str) -> str:
    """Ground-truth classification label."""
    return _default_extractor.get_label(text)


def extract_article(text: str, source: str = "") -> ArticleRecord:
    return _default_extractor.extract(text, source)
