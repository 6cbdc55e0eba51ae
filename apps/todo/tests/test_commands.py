from io import StringIO

from django.conf import settings
from django.core.management import call_command
from django.test import TestCase

from apps.todo.management.commands.runserver import Command as RunserverCommand
from apps.todo.models import Task


class SeedTasksCommandTest(TestCase):

    def test_seed_creates_pending_and_done_tasks(self):
        out = StringIO()
        call_command('seed_tasks', count=4, done=1, stdout=out)
        self.assertEqual(Task.objects.count(), 4)
        self.assertEqual(Task.objects.filter(done=True).count(), 1)
        self.assertFalse(Task.objects.filter(done=True, completed_at__isnull=True).exists())
        self.assertIn('Seeded 4 tasks (1 done)', out.getvalue())

    def test_done_is_capped_at_count(self):
        call_command('seed_tasks', count=2, done=5, stdout=StringIO())
        self.assertEqual(Task.objects.filter(done=True).count(), 2)

    def test_clean_removes_existing_tasks(self):
        Task.objects.create(title="old")
        call_command('seed_tasks', '--clean', count=1, done=0, stdout=StringIO())
        self.assertEqual(list(Task.objects.values_list('title', flat=True)), ["Buy milk"])


class RunserverCommandTest(TestCase):

    def test_default_port_comes_from_settings(self):
        self.assertEqual(RunserverCommand.default_port, str(settings.SERVER_PORT))
