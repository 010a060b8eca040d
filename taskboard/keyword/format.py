"""Keyword formatting for API responses and CLI display."""

from datetime import datetime

from taskboard.core.models import Keyword

DATE_FORMAT = "%d-%m-%Y"


def format_date(value: str | None) -> str | None:
    """ISO timestamp -> DD-MM-YYYY."""
    if not value:
        return None
    return datetime.fromisoformat(value).strftime(DATE_FORMAT)


def keyword_resource(keyword: Keyword) -> dict:
    return {
        "id": keyword.id,
        "name": keyword.name,
        "created_at": format_date(keyword.created_at),
        "updated_at": format_date(keyword.updated_at),
    }


def format_keyword_list(keywords: list[Keyword]) -> str:
    if not keywords:
        return "No keywords"
    return "\n".join(f"[{k.id}] {k.name}" for k in keywords)
