from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from hr_project.pagination import auto_paginate
from core.permissions.decorators import require_permission

from HR.projects.services import ProjectService
from HR.projects.serializers import (
    ProjectSerializer,
    ProjectDetailSerializer,
    ProjectCreateSerializer,
    ProjectUpdateSerializer,
)


@api_view(['GET', 'POST'])
@require_permission('projects')
@auto_paginate
def project_list(request):
    """
    List projects or create a new project.

    GET /hr/projects/
    - Filters: search, status, sort_by (name|status|start_date|end_date|created_at), sort_direction

    POST /hr/projects/
    - Body: name, description?, status?, start_date, end_date?
    """
    if request.method == 'GET':
        filters = {
            'search': request.query_params.get('search'),
            'status': request.query_params.get('status'),
            'sort_by': request.query_params.get('sort_by'),
            'sort_direction': request.query_params.get('sort_direction'),
        }
        projects = ProjectService.list_projects(request.user, filters)
        serializer = ProjectSerializer(projects, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = ProjectCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    project = ProjectService.create_project(request.user, serializer.to_dto())
    return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('projects')
def project_detail(request, pk):
    """
    Retrieve (with tasks), update or delete a project.
    Deleting a project deletes its tasks.
    """
    if request.method == 'GET':
        project = ProjectService.get_project(request.user, pk)
        return Response(ProjectDetailSerializer(project).data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        serializer = ProjectUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        project = ProjectService.update_project(request.user, serializer.to_dto(pk))
        return Response(ProjectSerializer(project).data, status=status.HTTP_200_OK)

    ProjectService.delete_project(request.user, pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
