"""Shared utilities for the news scrapers: markup stripping, text normalization, persistence."""

import html
import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_BREAK_TAG_RE = re.compile(r"<\s*(?:br|/p|/div|/li|/h[1-6])\b[^>]*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


def parse_html(markup: str) -> BeautifulSoup:
    """Parse a full document or fragment with the lxml backend."""
    return BeautifulSoup(markup, "lxml")


def strip_markup(text: str) -> str:
    """Remove tags and unescape entities from a text fragment.

    Used on values lifted out of the raw markup (e.g. a JSON-LD articleBody)
    that may still carry inline tags such as <b> or <br/>.
    """
    if "<" in text:
        text = _BREAK_TAG_RE.sub("\n", text)
        text = _TAG_RE.sub("", text)
    return html.unescape(text)


def collapse_whitespace(text: str) -> str:
    """Collapse all whitespace, newlines included, to single spaces."""
    return " ".join(text.split())


def normalize_whitespace(text: str) -> str:
    """Collapse runs of spaces/tabs, keep paragraph breaks, trim the ends."""
    lines = [re.sub(r"\s+", " ", line).strip() for line in text.split("\n")]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def save_records(records: list, output_dir: str, filename: str) -> Path:
    """Save a list of Pydantic model instances to a JSON file."""
    import orjson

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    filepath = output_path / filename
    data = [r.model_dump(mode="json") for r in records]
    filepath.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
    logger.info("Saved %d records to %s", len(records), filepath)
    return filepath


def load_records(filepath: str) -> list[dict]:
    """Load records from a JSON file."""
    import orjson

    path = Path(filepath)
    if not path.exists():
        return []
    return orjson.loads(path.read_bytes())
