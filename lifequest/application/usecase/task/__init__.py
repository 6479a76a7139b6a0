"""Task use cases."""

from .create_task import CreateTaskRequest, CreateTaskResponse, CreateTaskUseCase
from .delete_task import DeleteTaskRequest, DeleteTaskUseCase
from .list_tasks import ListTasksRequest, ListTasksResponse, ListTasksUseCase
from .set_task_completion import (
    BossHitView,
    SetTaskCompletionRequest,
    SetTaskCompletionResponse,
    SetTaskCompletionUseCase,
)

__all__ = [
    "CreateTaskRequest",
    "CreateTaskResponse",
    "CreateTaskUseCase",
    "DeleteTaskRequest",
    "DeleteTaskUseCase",
    "ListTasksRequest",
    "ListTasksResponse",
    "ListTasksUseCase",
    "BossHitView",
    "SetTaskCompletionRequest",
    "SetTaskCompletionResponse",
    "SetTaskCompletionUseCase",
]
