from .project_views import project_list, project_detail
from .task_views import task_list, task_detail, task_status_update

__all__ = [
    'project_list',
    'project_detail',
    'task_list',
    'task_detail',
    'task_status_update',
]
