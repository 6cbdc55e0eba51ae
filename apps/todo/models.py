from django.db import models


class Task(models.Model):
    """
    A single to-do item.

    `done` and `completed_at` are only ever written together by the
    mark-done service, so done is True exactly when completed_at is set.
    """
    title = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    done = models.BooleanField(default=False, db_index=True)

    class Meta:
        ordering = ['id']
        verbose_name = "Task"
        verbose_name_plural = "Tasks"

    def __str__(self):
        status = "done" if self.done else "pending"
        return f"{self.title} ({status})"
