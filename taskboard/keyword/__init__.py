"""Keyword primitive: named tags for tasks."""

from .operations import create_keyword, get_keyword, list_keywords

__all__ = [
    "create_keyword",
    "get_keyword",
    "list_keywords",
]
