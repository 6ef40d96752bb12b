from .project_serializers import (
    ProjectSerializer,
    ProjectDetailSerializer,
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
)
from .task_serializers import (
    TaskSerializer,
    TaskCreateSerializer,
    TaskUpdateSerializer,
    TaskStatusSerializer,
)

__all__ = [
    'ProjectSerializer',
    'ProjectDetailSerializer',
    'ProjectCreateSerializer',
    'ProjectUpdateSerializer',
    'TaskSerializer',
    'TaskCreateSerializer',
    'TaskUpdateSerializer',
    'TaskStatusSerializer',
]
