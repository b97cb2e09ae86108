"""Pydantic model for news articles scraped from local HTML files."""

from pydantic import BaseModel, ConfigDict, Field


class ArticleRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str = Field(description="Article body with markup stripped")
    data_type: str = Field(
        description="Dataset split the document belongs to, e.g. 'Training' | 'Testing'"
    )
    label: str = Field(description="Ground-truth tag used for downstream training")
    source: str = Field(default="", description="File name the record was built from")
