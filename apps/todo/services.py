"""
Services for Todo app.

Every function takes the persistence handle as its first argument and
performs a single repository call.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from django.utils import timezone

from .dtos import TaskDTO
from .repository import TaskRepositoryInterface

logger = logging.getLogger(__name__)

# Completed tasks are bucketed into days starting at this local hour.
DAY_START_HOUR = 7


def completion_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Return the [start, end) local-time day window containing `now`.

    Days run from 07:00 to 07:00 in the current time zone, so at 06:59
    the window is still yesterday's.
    """
    local_now = timezone.localtime(now or timezone.now())
    anchor = local_now.replace(hour=DAY_START_HOUR, minute=0, second=0, microsecond=0)
    if local_now.hour < DAY_START_HOUR:
        return anchor - timedelta(days=1), anchor
    return anchor, anchor + timedelta(days=1)


def list_pending(tasks: TaskRepositoryInterface) -> List[TaskDTO]:
    """Get all tasks that are not done yet."""
    pending = tasks.list_pending()
    logger.debug(f"Listed {len(pending)} pending tasks")
    return pending


def list_completed_today(tasks: TaskRepositoryInterface, now: Optional[datetime] = None) -> List[TaskDTO]:
    """Get the tasks completed within the current day window."""
    start, end = completion_window(now)
    completed = tasks.list_completed_between(start, end)
    logger.debug(f"Listed {len(completed)} tasks completed between {start} and {end}")
    return completed


def create_task(tasks: TaskRepositoryInterface, title: str) -> TaskDTO:
    task = tasks.create(title)
    logger.info(f"Created task {task.id}")
    return task


def mark_done(tasks: TaskRepositoryInterface, task_id: int) -> TaskDTO:
    """
    Mark a task done, stamping completed_at with the current time.

    Calling this on a task that is already done moves completed_at
    forward to now.
    """
    task = tasks.mark_done(task_id, timezone.now())
    logger.info(f"Marked task {task.id} done")
    return task


def delete_task(tasks: TaskRepositoryInterface, task_id: int) -> TaskDTO:
    """Permanently delete a task and return what it looked like before."""
    task = tasks.delete(task_id)
    logger.info(f"Deleted task {task.id}")
    return task
