"""
ASGI config for the Tasklist project.

Serve with any ASGI server, e.g. `uvicorn config.asgi:application --port 4000`.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

application = get_asgi_application()
