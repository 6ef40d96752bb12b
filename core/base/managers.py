"""
Core Base Managers Module

Provides the shared queryset used by list endpoints for free-text search
and whitelisted sorting.

Usage:
    class ProjectQuerySet(BaseQuerySet):
        search_fields = ('name', 'description')
        sort_fields = {'name': 'name', 'start_date': 'start_date'}
        default_sort = 'name'

    class Project(models.Model):
        objects = ProjectQuerySet.as_manager()

    Project.objects.search('onboarding').sorted_by('start_date', 'desc')
"""
from functools import reduce
import operator

from django.db import models
from django.db.models import Q


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with common filtering methods.

    Methods:
        - search: Case-insensitive contains match across search_fields
        - sorted_by: Order by a whitelisted sort key and direction
    """
    search_fields = ()
    sort_fields = {}
    default_sort = None

    def search(self, term):
        if not term or not self.search_fields:
            return self
        conditions = [Q(**{f'{field}__icontains': term}) for field in self.search_fields]
        return self.filter(reduce(operator.or_, conditions))

    def sorted_by(self, sort_by=None, direction='asc'):
        """
        Args:
            sort_by: Public sort key; unknown keys fall back to default_sort
            direction: 'asc' or 'desc'
        """
        key = sort_by if sort_by in self.sort_fields else self.default_sort
        if key is None:
            return self
        field = self.sort_fields[key]
        prefix = '-' if str(direction).lower() == 'desc' else ''
        return self.order_by(f'{prefix}{field}', 'pk')
