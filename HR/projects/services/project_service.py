"""
Project Service - Business Logic Layer

Projects carry no ownership: every role that may read projects sees all
of them, and writes are decided by the permission matrix alone.
"""
import logging

from django.db import models, transaction

from core.permissions.exceptions import NotFound
from core.permissions.roles import Action, ResourceKind
from core.permissions.services import authorize, resolve_identity
from HR.projects.dtos import ProjectCreateDTO, ProjectUpdateDTO
from HR.projects.models import Project, ProjectStatus

logger = logging.getLogger(__name__)

PROJECT_UPDATABLE_FIELDS = ('name', 'description', 'status', 'start_date', 'end_date')


class ProjectService:
    """Service layer for projects"""

    @staticmethod
    def _get(pk) -> Project:
        try:
            return Project.objects.with_progress().get(pk=pk)
        except Project.DoesNotExist:
            raise NotFound("Project not found")

    @staticmethod
    def list_projects(user, filters: dict = None) -> models.QuerySet:
        """
        List projects annotated with task counts for progress.

        Args:
            user: User performing the request
            filters: Dictionary of filters
                - search: Matches name or description
                - status: One of ProjectStatus
                - sort_by: 'name' (default), 'status', 'start_date', 'end_date', 'created_at'
                - sort_direction: 'asc' (default) or 'desc'
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.PROJECTS, Action.READ, "You don't have permission to view projects")

        filters = filters or {}
        queryset = Project.objects.with_progress().search(filters.get('search'))

        project_status = filters.get('status')
        if project_status in ProjectStatus.values:
            queryset = queryset.filter(status=project_status)

        return queryset.sorted_by(filters.get('sort_by'), filters.get('sort_direction') or 'asc')

    @staticmethod
    def get_project(user, pk) -> Project:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.PROJECTS, Action.READ, "You don't have permission to view projects")
        return ProjectService._get(pk)

    @staticmethod
    @transaction.atomic
    def create_project(user, dto: ProjectCreateDTO) -> Project:
        """
        Raises:
            Forbidden: If the role cannot create projects
            ValidationError: If end_date is before start_date
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.PROJECTS, Action.CREATE, "You don't have permission to create projects")

        project = Project(
            name=dto.name,
            description=dto.description or '',
            status=dto.status or ProjectStatus.PLANNING,
            start_date=dto.start_date,
            end_date=dto.end_date,
            created_by_id=caller.id,
            updated_by_id=caller.id,
        )
        project.full_clean()
        project.save()

        logger.info("Project %s created by user %s", project.pk, caller.id)
        return ProjectService._get(project.pk)

    @staticmethod
    @transaction.atomic
    def update_project(user, dto: ProjectUpdateDTO) -> Project:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.PROJECTS, Action.UPDATE, "You don't have permission to update projects")

        project = ProjectService._get(dto.project_id)
        for field_name, value in dto.changes.items():
            if field_name in PROJECT_UPDATABLE_FIELDS:
                setattr(project, field_name, value)

        project.updated_by_id = caller.id
        project.full_clean()
        project.save()

        logger.info("Project %s updated by user %s", project.pk, caller.id)
        return ProjectService._get(project.pk)

    @staticmethod
    @transaction.atomic
    def delete_project(user, pk) -> None:
        """Delete a project and all of its tasks."""
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.PROJECTS, Action.DELETE, "You don't have permission to delete projects")

        project = ProjectService._get(pk)
        project.delete()

        logger.info("Project %s deleted by user %s", pk, caller.id)
