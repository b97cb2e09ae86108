"""Builds the news article corpus from a directory of HTML files.

Documents are processed in lexicographic file name order so that the
resulting record list is identical from run to run. A document that cannot be
read, or that is missing one of the template's fields, is logged and skipped;
the rest of the corpus is still built and the failures are reported back
alongside the records.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from schemas.article_record import ArticleRecord
from scrapers.article_extractor import ArticleExtractor, FieldNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".htm"


class DocumentReadError(OSError):
    """A news document could not be opened or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


@dataclass(frozen=True)
class SkippedDocument:
    path: Path
    reason: str


@dataclass
class CorpusBuildResult:
    records: list[ArticleRecord] = field(default_factory=list)
    skipped: list[SkippedDocument] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records) + len(self.skipped)

    @property
    def ok(self) -> bool:
        return not self.skipped


def discover_documents(
    root: Union[str, Path],
    extension: str = DEFAULT_EXTENSION,
) -> list[Path]:
    """Find every regular file under ``root`` with the given extension.

    Sorted by file name, then by full path for files that share a name in
    different subdirectories.
    """
    root = Path(root)
    if not root.is_dir():
        logger.warning("News directory does not exist: %s", root)
        return []

    paths = [p for p in root.rglob(f"*{extension}") if p.is_file()]
    return sorted(paths, key=lambda p: (p.name, str(p)))


def read_document(path: Union[str, Path]) -> str:
    """Read a document as UTF-8 text, every line newline-terminated.

    Raises:
        DocumentReadError: on any I/O or decoding failure.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return "".join(line.rstrip("\r\n") + "\n" for line in f)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e


class NewsCorpusBuilder:
    """Runs the ArticleExtractor over a sorted sequence of documents."""

    def __init__(self, extractor: Optional[ArticleExtractor] = None):
        self.extractor = extractor or ArticleExtractor()

    def build(self, paths: Iterable[Union[str, Path]]) -> CorpusBuildResult:
        """Extract one ArticleRecord per document, in the order given.

        Never raises for a single bad document; see ``CorpusBuildResult.skipped``.
        """
        t0 = time.perf_counter()
        result = CorpusBuildResult()

        for path in paths:
            path = Path(path)
            try:
                text = read_document(path)
                record = self.extractor.extract(text, source=path.name)
            except (DocumentReadError, FieldNotFoundError) as e:
                logger.warning("Skipping %s: %s", path.name, e)
                result.skipped.append(SkippedDocument(path, str(e)))
                continue

            result.records.append(record)
            logger.debug("  [news] %s -> %r (%s)", path.name, record.title, record.label)

        logger.info(
            "Built %d article records from %d documents (skipped %d) in %.2fs",
            len(result.records), result.total, len(result.skipped),
            time.perf_counter() - t0,
        )
        return result


def load_news(
    root: Union[str, Path],
    extension: str = DEFAULT_EXTENSION,
    extractor: Optional[ArticleExtractor] = None,
) -> CorpusBuildResult:
    """Top-level function to discover and extract every article under ``root``."""
    paths = discover_documents(root, extension)
    logger.info("Discovered %d %s documents under %s", len(paths), extension, root)
    return NewsCorpusBuilder(extractor).build(paths)
