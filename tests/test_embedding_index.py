"""Tests for schemas.embedding_index module."""

import numpy as np
import pytest

from schemas.embedding_index import EmbeddingIndex


@pytest.fixture
def index():
    return EmbeddingIndex(("apple", "banana"), ((0.1, 0.2), (0.3, -0.4)))


class TestEmbeddingIndex:
    def test_length_and_dimension(self, index) -> None:
        assert len(index) == 2
        assert index.dimension == 2

    def test_empty_index(self) -> None:
        empty = EmbeddingIndex()
        assert len(empty) == 0
        assert empty.dimension == 0
        assert empty.as_matrix().shape == (0, 0)

    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValueError):
            EmbeddingIndex(("a", "b"), ((1.0,),))

    def test_lookup(self, index) -> None:
        assert "apple" in index
        assert "cherry" not in index
        assert index.index_of("banana") == 1
        assert index.vector_for("banana") == (0.3, -0.4)
        assert index.vector_for("cherry") is None

    def test_accessors_return_snapshots(self, index) -> None:
        vocab = index.get_vocabulary()
        vocab.append("cherry")
        vectors = index.get_vectors()
        vectors[0][0] = 9.9
        assert index.get_vocabulary() == ["apple", "banana"]
        assert index.get_vectors() == [[0.1, 0.2], [0.3, -0.4]]

    def test_matrix_is_read_only(self, index) -> None:
        matrix = index.as_matrix()
        assert matrix.shape == (2, 2)
        np.testing.assert_allclose(matrix[1], [0.3, -0.4])
        with pytest.raises(ValueError):
            matrix[0, 0] = 1.0

    def test_repeated_token_resolves_to_first_row(self) -> None:
        index = EmbeddingIndex(("a", "a"), ((1.0,), (2.0,)))
        assert index.vector_for("a") == (1.0,)
