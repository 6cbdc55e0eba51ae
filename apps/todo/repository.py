"""
TaskRepository - Persistence handle for the todo services.

Services never reach for the Task model directly; they receive a
repository and make exactly one call on it. The GraphQL view builds the
repository per request and passes it through the execution context.

Usage:
    from apps.todo.repository import get_task_repository
    from apps.todo import services

    tasks = get_task_repository()
    services.create_task(tasks, "Buy milk")

Configuration:
    TASK_REPOSITORY=apps.todo.repository.DjangoTaskRepository  (default)
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from django.conf import settings
from django.utils.module_loading import import_string

from .dtos import TaskDTO
from .models import Task

logger = logging.getLogger(__name__)


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task persistence.

    Implementations:
    - DjangoTaskRepository: Django ORM over the Task model

    Lookups by id raise the implementation's not-found error unchanged.
    """

    @abstractmethod
    def list_pending(self) -> List[TaskDTO]:
        """All tasks not yet done, in storage order."""
        pass

    @abstractmethod
    def list_completed_between(self, start: datetime, end: datetime) -> List[TaskDTO]:
        """Done tasks with start <= completed_at < end."""
        pass

    @abstractmethod
    def create(self, title: str) -> TaskDTO:
        pass

    @abstractmethod
    def mark_done(self, task_id: int, completed_at: datetime) -> TaskDTO:
        pass

    @abstractmethod
    def delete(self, task_id: int) -> TaskDTO:
        """Remove the task and return its state from before deletion."""
        pass


def _to_dto(task: Task) -> TaskDTO:
    return TaskDTO(
        id=task.id,
        title=task.title,
        created_at=task.created_at,
        completed_at=task.completed_at,
        done=task.done,
    )


class DjangoTaskRepository(TaskRepositoryInterface):
    """Task persistence through the Django ORM. Raises Task.DoesNotExist on unknown ids."""

    def list_pending(self) -> List[TaskDTO]:
        return [_to_dto(t) for t in Task.objects.filter(done=False)]

    def list_completed_between(self, start: datetime, end: datetime) -> List[TaskDTO]:
        qs = Task.objects.filter(
            done=True,
            completed_at__gte=start,
            completed_at__lt=end,
        )
        return [_to_dto(t) for t in qs]

    def create(self, title: str) -> TaskDTO:
        task = Task.objects.create(title=title, done=False, completed_at=None)
        return _to_dto(task)

    def mark_done(self, task_id: int, completed_at: datetime) -> TaskDTO:
        task = Task.objects.get(id=task_id)
        task.done = True
        task.completed_at = completed_at
        task.save(update_fields=['done', 'completed_at'])
        return _to_dto(task)

    def delete(self, task_id: int) -> TaskDTO:
        task = Task.objects.get(id=task_id)
        # delete() clears the instance pk, so snapshot first
        snapshot = _to_dto(task)
        task.delete()
        return snapshot


def get_task_repository() -> TaskRepositoryInterface:
    """Instantiate the repository class named by settings.TASK_REPOSITORY."""
    path = getattr(settings, 'TASK_REPOSITORY', 'apps.todo.repository.DjangoTaskRepository')
    repository_class = import_string(path)
    logger.debug(f"Using task repository {path}")
    if not issubclass(repository_class, TaskRepositoryInterface):
        raise ValueError(f"Unknown TASK_REPOSITORY: {path}")
    return repository_class()
