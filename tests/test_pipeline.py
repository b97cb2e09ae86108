"""Tests for the pipeline CLI and scrapers.utils persistence helpers."""

import pipeline
from scrapers.utils import load_records


class TestGloveCommand:
    def test_loads_table(self, glove_file, caplog) -> None:
        caplog.set_level("INFO")
        assert pipeline.main(["glove", "--file", str(glove_file)]) == 0
        assert "Vocabulary: 2 words, 2 dimensions" in caplog.text

    def test_missing_table_exits_nonzero(self, tmp_path) -> None:
        assert pipeline.main(["glove", "--file", str(tmp_path / "missing.csv")]) == 1

    def test_strict_fails_on_bad_row(self, tmp_path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,1,2\nb,oops,3\n")
        assert pipeline.main(["glove", "--file", str(path)]) == 0
        assert pipeline.main(["glove", "--file", str(path), "--strict"]) == 1


class TestNewsCommand:
    def test_writes_articles(self, news_dir, tmp_path) -> None:
        out = tmp_path / "out"
        assert pipeline.main(["news", "--root", str(news_dir), "--output", str(out)]) == 0

        data = load_records(str(out / "articles.json"))
        assert [d["source"] for d in data] == ["a.htm", "b.htm", "c.htm"]
        assert data[0]["label"] == "business"


class TestMisc:
    def test_no_command_prints_help(self) -> None:
        assert pipeline.main([]) == 1

    def test_status(self, capsys) -> None:
        assert pipeline.main(["status"]) == 0
        assert "NEWS TOOLKIT STATUS" in capsys.readouterr().out

    def test_load_records_missing_file(self, tmp_path) -> None:
        assert load_records(str(tmp_path / "none.json")) == []
