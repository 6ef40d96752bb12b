"""
Task Service - Business Logic Layer

Any role that may read tasks sees all of them. Updates are narrowed for
the EMPLOYEE role twice: the task must be assigned to the caller, and
only the status field of the requested changes is applied.
"""
import logging

from django.db import models, transaction

from core.permissions.exceptions import NotFound
from core.permissions.roles import Action, ResourceKind
from core.permissions.scope import filter_task_changes
from core.permissions.services import authorize, authorize_record, resolve_identity
from HR.employees.models import Employee
from HR.projects.dtos import TaskCreateDTO, TaskUpdateDTO
from HR.projects.models import Project, Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def _get_project(pk) -> Project:
    try:
        return Project.objects.get(pk=pk)
    except Project.DoesNotExist:
        raise NotFound("Project not found")


def _get_assignee(pk):
    if pk is None:
        return None
    try:
        return Employee.objects.get(pk=pk)
    except Employee.DoesNotExist:
        raise NotFound("Employee not found")


class TaskService:
    """Service layer for tasks"""

    @staticmethod
    def _get(pk) -> Task:
        try:
            return Task.objects.select_related('project', 'assigned_to__user').get(pk=pk)
        except Task.DoesNotExist:
            raise NotFound("Task not found")

    @staticmethod
    def list_tasks(user, filters: dict = None) -> models.QuerySet:
        """
        List tasks.

        Args:
            user: User performing the request
            filters: Dictionary of filters
                - search: Matches title or description
                - status: One of TaskStatus
                - priority: One of TaskPriority
                - project: Project id
                - assigned_to: Employee id, or 'me' for the caller's own tasks
                - sort_by: 'created_at' (default), 'title', 'status', 'priority', 'updated_at'
                - sort_direction: 'desc' (default) or 'asc'
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.TASKS, Action.READ, "You don't have permission to view tasks")

        filters = filters or {}
        queryset = Task.objects.select_related('project', 'assigned_to__user').search(filters.get('search'))

        task_status = filters.get('status')
        if task_status in TaskStatus.values:
            queryset = queryset.filter(status=task_status)

        priority = filters.get('priority')
        if priority in TaskPriority.values:
            queryset = queryset.filter(priority=priority)

        if filters.get('project'):
            queryset = queryset.filter(project_id=filters['project'])

        assigned_to = filters.get('assigned_to')
        if assigned_to == 'me':
            queryset = queryset.filter(assigned_to__user_id=caller.id)
        elif assigned_to:
            queryset = queryset.filter(assigned_to_id=assigned_to)

        return queryset.sorted_by(filters.get('sort_by'), filters.get('sort_direction') or 'desc')

    @staticmethod
    def get_task(user, pk) -> Task:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.TASKS, Action.READ, "You don't have permission to view tasks")
        return TaskService._get(pk)

    @staticmethod
    @transaction.atomic
    def create_task(user, dto: TaskCreateDTO) -> Task:
        """
        Raises:
            Forbidden: If the role cannot create tasks
            NotFound: If the project or the assignee does not exist
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.TASKS, Action.CREATE, "You don't have permission to create tasks")

        task = Task(
            title=dto.title,
            description=dto.description or '',
            project=_get_project(dto.project_id),
            assigned_to=_get_assignee(dto.assigned_to_id),
            status=dto.status or TaskStatus.TODO,
            priority=dto.priority or TaskPriority.MEDIUM,
            created_by_id=caller.id,
            updated_by_id=caller.id,
        )
        task.full_clean()
        task.save()

        logger.info("Task %s created in project %s by user %s", task.pk, task.project_id, caller.id)
        return task

    @staticmethod
    @transaction.atomic
    def update_task(user, dto: TaskUpdateDTO) -> Task:
        """
        Apply the requested changes a caller's role allows.

        Raises:
            Forbidden: If the role cannot update tasks, or an EMPLOYEE
                updates a task not assigned to them
            NotFound: If the task (or a referenced project/assignee) does not exist
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.TASKS, Action.UPDATE, "You don't have permission to update tasks")

        task = TaskService._get(dto.task_id)
        authorize_record(
            caller, ResourceKind.TASKS, Action.UPDATE, task,
            "You can only update tasks assigned to you"
        )

        changes = filter_task_changes(caller.role, dto.changes)
        ignored = set(dto.changes) - set(changes)
        if ignored:
            logger.debug("Ignoring task fields %s for role %s", sorted(ignored), caller.role)

        for field_name, value in changes.items():
            if field_name == 'project':
                task.project = _get_project(value)
            elif field_name == 'assigned_to':
                task.assigned_to = _get_assignee(value)
            else:
                setattr(task, field_name, value)

        task.updated_by_id = caller.id
        task.full_clean()
        task.save()

        logger.info("Task %s updated by user %s", task.pk, caller.id)
        return task

    @staticmethod
    def update_status(user, pk, new_status) -> Task:
        """
        Move a task to another column of the board.
        An invalid status is rejected by model validation after the
        permission checks.
        """
        return TaskService.update_task(user, TaskUpdateDTO(task_id=pk, changes={'status': new_status}))

    @staticmethod
    @transaction.atomic
    def delete_task(user, pk) -> None:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.TASKS, Action.DELETE, "You don't have permission to delete tasks")

        task = TaskService._get(pk)
        task.delete()

        logger.info("Task %s deleted by user %s", pk, caller.id)
