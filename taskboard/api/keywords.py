"""Keyword API endpoints."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from taskboard import keyword
from taskboard.api import responses
from taskboard.errors import TaskboardError
from taskboard.keyword.format import keyword_resource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/keywords", tags=["keywords"])


class StoreKeyword(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)


@router.get("/index")
def index() -> dict:
    try:
        keywords = keyword.list_keywords()
    except Exception as e:
        logger.exception("Listing keywords failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return responses.ok([keyword_resource(k) for k in keywords])


@router.post("/store")
def store(body: StoreKeyword) -> dict:
    try:
        created = keyword.create_keyword(body.name)
    except TaskboardError:
        raise
    except Exception as e:
        logger.exception("Creating keyword failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return responses.ok(keyword_resource(created), message="Keyword created successfully.")
