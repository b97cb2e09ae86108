"""Tests for embeddings.resources and embeddings.stopwords modules."""

import pytest

from embeddings.resources import ResourceNotFoundError, resolve_resource
from embeddings.stopwords import STOPWORDS, is_stopword


class TestResolveResource:
    def test_existing_path_returned_as_is(self, glove_file) -> None:
        assert resolve_resource(glove_file) == glove_file

    def test_first_matching_directory_wins(self, tmp_path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        for d in (first, second):
            d.mkdir()
            (d / "table.csv").write_text("a,1\n")
        assert resolve_resource("table.csv", [first, second]) == first / "table.csv"

    def test_missing_lists_searched_dirs(self, tmp_path) -> None:
        with pytest.raises(ResourceNotFoundError) as exc:
            resolve_resource("nope.csv", [tmp_path])
        assert exc.value.name == "nope.csv"
        assert exc.value.searched == [tmp_path]
        assert isinstance(exc.value, FileNotFoundError)


class TestStopwords:
    def test_contains_common_words(self) -> None:
        assert {"the", "and", "of", "twas"} <= STOPWORDS

    def test_all_lowercase(self) -> None:
        assert all(w == w.lower() for w in STOPWORDS)
        assert len(STOPWORDS) == 119

    def test_is_stopword_case_insensitive(self) -> None:
        assert is_stopword("The")
        assert not is_stopword("market")

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            STOPWORDS.add("market")
