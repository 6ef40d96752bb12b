from decimal import Decimal, ROUND_HALF_UP

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Count, Q

from core.base.managers import BaseQuerySet
from core.base.models import AuditMixin


class ProjectStatus(models.TextChoices):
    PLANNING = 'PLANNING', 'Planning'
    IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
    ON_HOLD = 'ON_HOLD', 'On Hold'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class ProjectQuerySet(BaseQuerySet):
    search_fields = ('name', 'description')
    sort_fields = {
        'name': 'name',
        'status': 'status',
        'start_date': 'start_date',
        'end_date': 'end_date',
        'created_at': 'created_at',
    }
    default_sort = 'name'

    def with_progress(self):
        """Annotate total_tasks and completed_tasks."""
        from .task import TaskStatus
        return self.annotate(
            total_tasks=Count('tasks', distinct=True),
            completed_tasks=Count('tasks', filter=Q(tasks__status=TaskStatus.DONE), distinct=True),
        )


class Project(AuditMixin):
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    status = models.CharField(
        max_length=20,
        choices=ProjectStatus.choices,
        default=ProjectStatus.PLANNING,
        db_index=True
    )
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)

    objects = ProjectQuerySet.as_manager()

    class Meta:
        db_table = 'projects'
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['name']

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.end_date and self.start_date and self.end_date < self.start_date:
            raise ValidationError({'end_date': "End date cannot be before start date"})

    @staticmethod
    def compute_progress(total_tasks, completed_tasks) -> int:
        """Percentage of completed tasks, halves rounded up; 0 when there are no tasks."""
        if not total_tasks:
            return 0
        percentage = Decimal(completed_tasks) * 100 / Decimal(total_tasks)
        return int(percentage.quantize(Decimal('1'), rounding=ROUND_HALF_UP))

    def get_task_counts(self):
        """(total, completed) using annotations when present."""
        if hasattr(self, 'total_tasks') and hasattr(self, 'completed_tasks'):
            return self.total_tasks, self.completed_tasks
        from .task import TaskStatus
        total = self.tasks.count()
        completed = self.tasks.filter(status=TaskStatus.DONE).count()
        return total, completed

    @property
    def progress(self) -> int:
        return self.compute_progress(*self.get_task_counts())
