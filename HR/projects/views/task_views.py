from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from hr_project.pagination import auto_paginate
from core.permissions.decorators import require_permission

from HR.projects.services import TaskService
from HR.projects.serializers import (
    TaskSerializer,
    TaskCreateSerializer,
    TaskUpdateSerializer,
    TaskStatusSerializer,
)


@api_view(['GET', 'POST'])
@require_permission('tasks')
@auto_paginate
def task_list(request):
    """
    List tasks or create a new task.

    GET /hr/tasks/
    - Filters: search, status, priority, project, assigned_to (employee id or 'me'),
      sort_by (created_at|title|status|priority|updated_at), sort_direction

    POST /hr/tasks/
    - Body: title, project_id, description?, assigned_to_id?, status?, priority?
    """
    if request.method == 'GET':
        filters = {
            'search': request.query_params.get('search'),
            'status': request.query_params.get('status'),
            'priority': request.query_params.get('priority'),
            'project': request.query_params.get('project'),
            'assigned_to': request.query_params.get('assigned_to'),
            'sort_by': request.query_params.get('sort_by'),
            'sort_direction': request.query_params.get('sort_direction'),
        }
        tasks = TaskService.list_tasks(request.user, filters)
        return Response(TaskSerializer(tasks, many=True).data, status=status.HTTP_200_OK)

    serializer = TaskCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    task = TaskService.create_task(request.user, serializer.to_dto())
    return Response(TaskSerializer(task).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('tasks')
def task_detail(request, pk):
    """
    Retrieve, update or delete a task.

    An EMPLOYEE may update only tasks assigned to them, and only the
    status of those; other submitted fields are ignored.
    """
    if request.method == 'GET':
        task = TaskService.get_task(request.user, pk)
        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        serializer = TaskUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        task = TaskService.update_task(request.user, serializer.to_dto(pk))
        return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)

    TaskService.delete_task(request.user, pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['PATCH'])
@require_permission('tasks', 'update')
def task_status_update(request, pk):
    """
    Move a task between board columns.

    PATCH /hr/tasks/<pk>/status/
    - Body: { "status": "TODO" | "IN_PROGRESS" | "REVIEW" | "DONE" }
    """
    serializer = TaskStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    task = TaskService.update_status(request.user, pk, serializer.validated_data['status'])
    return Response(TaskSerializer(task).data, status=status.HTTP_200_OK)
