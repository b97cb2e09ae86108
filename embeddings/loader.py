"""GloVe-style embedding table loader.

Reads a plain-text table with one row per vocabulary entry:

    token,c1,c2,...,cd

Field 0 is the token, fields 1..d are its coordinates in fixed-point or
scientific notation. There is no header row and the dimension d is taken from
the first accepted row.

Each call to ``load()`` builds a fresh EmbeddingIndex and swaps it in once the
whole table has been read, so a reload never merges with or partially
overwrites the previous index.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from embeddings.resources import ResourceNotFoundError, resolve_resource
from schemas.embedding_index import EmbeddingIndex, Vector

logger = logging.getLogger(__name__)

DELIMITER = ","
DEFAULT_RESOURCE = "glove.6B.50d_Reduced.csv"
MALFORMED_POLICIES = ("skip", "abort")


class MalformedRowError(ValueError):
    """A table row could not be parsed into a token plus coordinates."""

    def __init__(self, line_number: int, reason: str, line: str = ""):
        self.line_number = line_number
        self.reason = reason
        self.line = line
        super().__init__(f"Malformed row at line {line_number}: {reason}")


@dataclass(frozen=True)
class MalformedRow:
    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Outcome of one load: the new index plus the rows that were dropped."""

    index: EmbeddingIndex
    path: Optional[Path] = None
    lines_read: int = 0
    skipped: list[MalformedRow] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


def parse_row(line: str, line_number: int, dimension: Optional[int] = None) -> tuple[str, Vector]:
    """Split one table row into its token and coordinate vector.

    Raises:
        MalformedRowError: on a missing token, no coordinates, a non-numeric
            coordinate, or a coordinate count that differs from ``dimension``.
    """
    fields = line.split(DELIMITER)
    # Trailing empty fields (a row ending in a comma) carry no coordinate
    while len(fields) > 1 and fields[-1] == "":
        fields.pop()
    token = fields[0]
    if not token:
        raise MalformedRowError(line_number, "empty token", line)
    if len(fields) < 2:
        raise MalformedRowError(line_number, "no coordinates", line)

    try:
        vector = tuple(float(value) for value in fields[1:])
    except ValueError as e:
        raise MalformedRowError(line_number, f"non-numeric coordinate ({e})", line) from e

    if dimension is not None and len(vector) != dimension:
        raise MalformedRowError(
            line_number,
            f"expected {dimension} coordinates, got {len(vector)}",
            line,
        )
    return token, vector


def _check_utf8(line: str, line_number: int):
    try:
        line.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedRowError(line_number, "invalid UTF-8", line) from e


class EmbeddingLoader:
    """Loads an embedding table into an EmbeddingIndex."""

    def __init__(
        self,
        resource_name: Union[str, Path] = DEFAULT_RESOURCE,
        search_dirs: Optional[Iterable[Union[str, Path]]] = None,
        on_malformed: str = "skip",
    ):
        """Initialize the loader.

        Args:
            resource_name: File name (or path) of the embedding table.
            search_dirs: Directories searched in order when ``resource_name``
                is not itself an existing path.
            on_malformed: "skip" to log and drop bad rows, "abort" to raise
                MalformedRowError on the first one.
        """
        if on_malformed not in MALFORMED_POLICIES:
            raise ValueError(
                f"on_malformed must be one of {MALFORMED_POLICIES}, got {on_malformed!r}"
            )
        self.resource_name = resource_name
        self.search_dirs = list(search_dirs or [])
        self.on_malformed = on_malformed
        self._index = EmbeddingIndex()

    @property
    def index(self) -> EmbeddingIndex:
        """The index from the most recent completed load (empty before any load)."""
        return self._index

    def get_vocabulary(self) -> list[str]:
        return self._index.get_vocabulary()

    def get_vectors(self) -> list[list[float]]:
        return self._index.get_vectors()

    def load(self) -> LoadResult:
        """Read the table and replace the current index.

        Raises:
            ResourceNotFoundError: if the table cannot be located.
            MalformedRowError: on a bad row when the policy is "abort".
        """
        path = resolve_resource(self.resource_name, self.search_dirs)
        logger.info("Loading embeddings from %s", path)
        t0 = time.perf_counter()

        vocabulary: list[str] = []
        vectors: list[Vector] = []
        skipped: list[MalformedRow] = []
        dimension: Optional[int] = None
        line_number = 0

        # Undecodable bytes survive as surrogates and are rejected per row
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            for line_number, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    _check_utf8(line, line_number)
                    token, vector = parse_row(line, line_number, dimension)
                except MalformedRowError as e:
                    if self.on_malformed == "abort":
                        logger.error("Aborting embedding load: %s", e)
                        raise
                    logger.warning("Skipping %s", e)
                    skipped.append(MalformedRow(line_number, line, e.reason))
                    continue

                if dimension is None:
                    dimension = len(vector)
                vocabulary.append(token)
                vectors.append(vector)

        index = EmbeddingIndex(tuple(vocabulary), tuple(vectors))
        self._index = index

        logger.info(
            "Loaded %d vectors (%d dimensions) from %d lines in %.2fs, skipped %d malformed rows",
            len(index), index.dimension, line_number,
            time.perf_counter() - t0, len(skipped),
        )
        return LoadResult(index=index, path=path, lines_read=line_number, skipped=skipped)


def load_glove(
    resource_name: Union[str, Path],
    search_dirs: Optional[Iterable[Union[str, Path]]] = None,
    on_malformed: str = "skip",
) -> EmbeddingIndex:
    """Top-level function to load an embedding table and return its index."""
    loader = EmbeddingLoader(resource_name, search_dirs=search_dirs, on_malformed=on_malformed)
    return loader.load().index


__all__ = [
    "EmbeddingLoader",
    "LoadResult",
    "MalformedRow",
    "MalformedRowError",
    "ResourceNotFoundError",
    "load_glove",
    "parse_row",
]
