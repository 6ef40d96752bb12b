from .project import Project, ProjectQuerySet, ProjectStatus
from .task import Task, TaskQuerySet, TaskStatus, TaskPriority

__all__ = [
    'Project',
    'ProjectQuerySet',
    'ProjectStatus',
    'Task',
    'TaskQuerySet',
    'TaskStatus',
    'TaskPriority',
]
