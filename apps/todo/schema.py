"""
GraphQL schema for the task list.

Resolvers stay thin: pull the repository out of the request context and
hand it to the matching service function.
"""
from typing import List, Optional

import strawberry
from strawberry.types import Info

from . import services
from .dtos import TaskDTO
from .repository import TaskRepositoryInterface
from .scalars import Date


@strawberry.type(name="Task")
class TaskType:
    id: strawberry.ID
    title: str
    created_at: Date
    completed_at: Optional[Date]
    done: bool

    @classmethod
    def from_dto(cls, task: TaskDTO) -> "TaskType":
        return cls(
            id=strawberry.ID(str(task.id)),
            title=task.title,
            created_at=task.created_at,
            completed_at=task.completed_at,
            done=task.done,
        )


def _tasks(info: Info) -> TaskRepositoryInterface:
    return info.context["tasks"]


@strawberry.type
class Query:
    @strawberry.field(description="Tasks that are not done yet.")
    def todo(self, info: Info) -> List[TaskType]:
        return [TaskType.from_dto(t) for t in services.list_pending(_tasks(info))]

    @strawberry.field(description="Tasks completed in the current 07:00-to-07:00 day.")
    def completed(self, info: Info) -> List[TaskType]:
        return [TaskType.from_dto(t) for t in services.list_completed_today(_tasks(info))]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_task(self, info: Info, title: str) -> TaskType:
        return TaskType.from_dto(services.create_task(_tasks(info), title))

    @strawberry.mutation
    def delete_task(self, info: Info, id: strawberry.ID) -> TaskType:
        return TaskType.from_dto(services.delete_task(_tasks(info), int(id)))

    @strawberry.mutation
    def mark_done(self, info: Info, id: strawberry.ID) -> TaskType:
        return TaskType.from_dto(services.mark_done(_tasks(info), int(id)))


schema = strawberry.Schema(query=Query, mutation=Mutation)
