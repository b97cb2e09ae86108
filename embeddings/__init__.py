"""Word embedding module for the news toolkit.

Loads GloVe-style comma-separated embedding tables into an immutable
EmbeddingIndex and carries the stopword list used by downstream NLP code.
"""
