"""
URL configuration for the Tasklist project.
"""
from django.contrib import admin
from django.urls import path
from django.views.decorators.csrf import csrf_exempt
from ninja import NinjaAPI

from apps.todo.api import graphql_view, router as health_router

api = NinjaAPI(
    title="Tasklist API",
    version="1.0.0",
    description="Health and service endpoints for the Tasklist GraphQL service",
    docs_url="/docs",
)

api.add_router("/health/", health_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('graphql/', csrf_exempt(graphql_view())),
    path('api/', api.urls),
]
