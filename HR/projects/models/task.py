from django.db import models

from core.base.managers import BaseQuerySet
from core.base.models import AuditMixin


class TaskStatus(models.TextChoices):
    TODO = 'TODO', 'To Do'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    REVIEW = 'REVIEW', 'Review'
    DONE = 'DONE', 'Done'


class TaskPriority(models.TextChoices):
    LOW = 'LOW', 'Low'
    MEDIUM = 'MEDIUM', 'Medium'
    HIGH = 'HIGH', 'High'
    CRITICAL = 'CRITICAL', 'Critical'


class TaskQuerySet(BaseQuerySet):
    search_fields = ('title', 'description')
    sort_fields = {
        'created_at': 'created_at',
        'title': 'title',
        'status': 'status',
        'priority': 'priority',
        'updated_at': 'updated_at',
    }
    default_sort = 'created_at'


class Task(AuditMixin):
    """
    A unit of work within a project.

    assigned_to is the owning employee; an unassigned task has no owner.
    """
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='tasks'
    )
    assigned_to = models.ForeignKey(
        'employees.Employee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tasks'
    )
    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.TODO,
        db_index=True
    )
    priority = models.CharField(
        max_length=10,
        choices=TaskPriority.choices,
        default=TaskPriority.MEDIUM,
        db_index=True
    )

    objects = TaskQuerySet.as_manager()

    class Meta:
        db_table = 'tasks'
        verbose_name = 'Task'
        verbose_name_plural = 'Tasks'
        ordering = ['-created_at']

    def __str__(self):
        return self.title
