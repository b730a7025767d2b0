import datetime
from typing import List

from pydantic import BaseModel, field_validator


class PostSummary(BaseModel):
    id: str
    title: str
    date: datetime.date
    tags: List[str]

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, value):
        # "title: 1984" loads as an int
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float, datetime.date)):
            return str(value)
        return value

    @field_validator("title")
    @classmethod
    def require_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def drop_time(cls, value):
        # YAML loads "2024-01-01 10:00" as a datetime; only the day is kept.
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str):
            try:
                return datetime.datetime.fromisoformat(value.strip()).date()
            except ValueError:
                return value
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, value):
        """Accept a YAML list or the comma-joined form, e.g. ``"python, web"``."""
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            tags = (str(tag).strip() for tag in value if tag is not None)
            return [tag for tag in tags if tag]
        return value

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


class PostDetail(PostSummary):
    content: str
