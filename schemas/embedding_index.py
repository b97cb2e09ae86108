"""In-memory vocabulary/vector index built from a word embedding table."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

Vector = tuple[float, ...]


@dataclass(frozen=True)
class EmbeddingIndex:
    """Parallel vocabulary and vector sequences.

    ``vocabulary[i]`` and ``vectors[i]`` always come from the same source row.
    Instances are immutable; a reload produces a new index instead of
    mutating an existing one.
    """

    vocabulary: tuple[str, ...] = ()
    vectors: tuple[Vector, ...] = ()
    _positions: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.vocabulary) != len(self.vectors):
            raise ValueError(
                f"vocabulary/vector length mismatch: {len(self.vocabulary)} != {len(self.vectors)}"
            )
        positions = self._positions
        for i, word in enumerate(self.vocabulary):
            # First occurrence wins when a token is repeated in the table
            positions.setdefault(word, i)

    def __len__(self) -> int:
        return len(self.vocabulary)

    def __contains__(self, word: object) -> bool:
        return word in self._positions

    @property
    def dimension(self) -> int:
        return len(self.vectors[0]) if self.vectors else 0

    def get_vocabulary(self) -> list[str]:
        """Snapshot of the vocabulary in table order."""
        return list(self.vocabulary)

    def get_vectors(self) -> list[list[float]]:
        """Snapshot of the vectors in table order."""
        return [list(v) for v in self.vectors]

    def index_of(self, word: str) -> Optional[int]:
        return self._positions.get(word)

    def vector_for(self, word: str) -> Optional[Vector]:
        i = self._positions.get(word)
        return None if i is None else self.vectors[i]

    def as_matrix(self) -> np.ndarray:
        """Return the vectors as a read-only ``(len, dimension)`` float64 array."""
        if not self.vectors:
            return np.empty((0, 0), dtype="float64")
        matrix = np.asarray(self.vectors, dtype="float64")
        matrix.setflags(write=False)
        return matrix
