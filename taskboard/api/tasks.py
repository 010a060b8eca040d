"""Task API endpoints."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from taskboard import task
from taskboard.api import responses
from taskboard.errors import TaskboardError
from taskboard.task.format import task_resource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


class StoreTask(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    keyword_ids: list[int] | None = None


@router.get("/index")
def index() -> dict:
    try:
        tasks = task.list_tasks()
    except Exception as e:
        logger.exception("Listing tasks failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return responses.ok([task_resource(t) for t in tasks])


@router.post("/store")
def store(body: StoreTask) -> dict:
    try:
        created = task.create_task(body.title, body.keyword_ids)
    except TaskboardError:
        raise
    except Exception as e:
        logger.exception("Creating task failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return responses.ok(task_resource(created), message="Task created successfully.")


@router.put("/toggle/{task_id}")
def toggle(task_id: int) -> dict:
    try:
        task.toggle_task(task_id)
    except TaskboardError:
        raise
    except Exception as e:
        logger.exception(f"Toggling task {task_id} failed")
        raise HTTPException(status_code=500, detail=str(e)) from e
    return responses.ok(message="Task status changed successfully.")
