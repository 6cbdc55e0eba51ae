from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.todo import services
from apps.todo.models import Task
from apps.todo.repository import get_task_repository

SAMPLE_TITLES = [
    "Buy milk",
    "Water the plants",
    "Pay the electricity bill",
    "Call the dentist",
    "Take out the recycling",
    "Book train tickets",
    "Reply to Sam's email",
    "Renew library books",
]


class Command(BaseCommand):
    help = 'Seeds the database with sample tasks for local development.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clean',
            action='store_true',
            help='Delete existing tasks before seeding',
        )
        parser.add_argument(
            '--count',
            type=int,
            default=5,
            help='Number of tasks to create',
        )
        parser.add_argument(
            '--done',
            type=int,
            default=2,
            help='How many of the created tasks to mark done',
        )

    def handle(self, *args, **options):
        if options['clean']:
            self.stdout.write(self.style.WARNING('Deleting existing tasks...'))
            deleted, _ = Task.objects.all().delete()
            self.stdout.write(self.style.SUCCESS(f'Deleted {deleted} tasks.'))

        tasks = get_task_repository()
        count = max(0, options['count'])
        done = min(max(0, options['done']), count)

        created = []
        for i in range(count):
            title = SAMPLE_TITLES[i % len(SAMPLE_TITLES)]
            created.append(services.create_task(tasks, title))

        for task in created[:done]:
            services.mark_done(tasks, task.id)

        self.stdout.write(self.style.SUCCESS(
            f'Seeded {count} tasks ({done} done) at {timezone.localtime():%Y-%m-%d %H:%M}.'
        ))
