"""Shared fixtures: synthetic embedding tables and news documents."""

import pytest


NEWS_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>{title}</title>
<meta charset="utf-8">
<datatype>{data_type}</datatype>
<label>{label}</label>
</head>
<body>
<h1>{title}</h1>
<p>{body}</p>
</body>
</html>
"""


def make_news_html(
    title: str = "Breaking News",
    body: str = "Markets rose today.",
    data_type: str = "Training",
    label: str = "business",
) -> str:
    return NEWS_TEMPLATE.format(title=title, body=body, data_type=data_type, label=label)


@pytest.fixture
def news_html():
    return make_news_html


@pytest.fixture
def glove_file(tmp_path):
    path = tmp_path / "glove.csv"
    path.write_text("apple,0.1,0.2\nbanana,0.3,-0.4\n", encoding="utf-8")
    return path


@pytest.fixture
def news_dir(tmp_path):
    root = tmp_path / "News"
    root.mkdir()
    for name, title, label in [
        ("c.htm", "Third story", "sport"),
        ("a.htm", "First story", "business"),
        ("b.htm", "Second story", "politics"),
    ]:
        (root / name).write_text(make_news_html(title=title, label=label), encoding="utf-8")
    return root
