"""
HTTP entry points for the todo app.

- TodoGraphQLView: the GraphQL endpoint, one repository per request
- router: plain JSON endpoints (health probe)
"""
from django.conf import settings
from django.http import HttpRequest
from ninja import Router
from strawberry.django.views import GraphQLView

from .dtos import HealthOut
from .repository import get_task_repository
from .schema import schema

router = Router(tags=["Health"])


class TodoGraphQLView(GraphQLView):
    """GraphQL view that injects the task repository into the execution context."""

    graphql_ide = "graphiql"

    def get_context(self, request, response):
        return {
            "request": request,
            "response": response,
            "tasks": get_task_repository(),
        }


def graphql_view():
    return TodoGraphQLView.as_view(
        schema=schema,
        graphql_ide="graphiql" if settings.DEBUG else None,
    )


@router.get("/", response=HealthOut, auth=None)
def health(request: HttpRequest):
    """Liveness probe."""
    return {"status": "ok"}
