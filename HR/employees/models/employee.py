from django.conf import settings
from django.db import models

from core.base.managers import BaseQuerySet
from core.base.models import AuditMixin


class EmployeeQuerySet(BaseQuerySet):
    search_fields = ('user__name', 'position', 'department')
    sort_fields = {
        'name': 'user__name',
        'position': 'position',
        'department': 'department',
        'join_date': 'join_date',
    }
    default_sort = 'name'


class Employee(AuditMixin):
    """
    Employment record of a user.

    Each user has at most one employee record; the record is the owner
    of salary rows and the assignee of tasks.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='employee'
    )
    position = models.CharField(max_length=100)
    department = models.CharField(max_length=100, db_index=True)
    join_date = models.DateField()

    objects = EmployeeQuerySet.as_manager()

    class Meta:
        db_table = 'employees'
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'
        ordering = ['user__name']

    def __str__(self):
        return f"{self.user.name} - {self.position}"

    @property
    def name(self):
        return self.user.name
