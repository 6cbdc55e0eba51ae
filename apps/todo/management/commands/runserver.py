"""`runserver` bound to the service's fixed port (settings.SERVER_PORT)."""
from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    default_port = str(settings.SERVER_PORT)
