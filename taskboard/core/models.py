from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"


@dataclass
class Keyword:
    id: int
    name: str
    created_at: str
    updated_at: str


@dataclass
class Task:
    id: int
    title: str
    is_done: bool = False
    created_at: str | None = None
    updated_at: str | None = None
    keywords: list[Keyword] = field(default_factory=list)

    def __post_init__(self):
        # sqlite hands booleans back as 0/1
        self.is_done = bool(self.is_done)

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.DONE if self.is_done else TaskStatus.PENDING
