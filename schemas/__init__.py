from schemas.article_record import ArticleRecord
from schemas.embedding_index import EmbeddingIndex, Vector
