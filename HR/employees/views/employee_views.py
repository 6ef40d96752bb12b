from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from hr_project.pagination import auto_paginate
from core.permissions.decorators import require_permission

from HR.employees.services import EmployeeService
from HR.employees.serializers import (
    EmployeeSerializer,
    EmployeeDetailSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer,
)


@api_view(['GET', 'POST'])
@require_permission('employees')
@auto_paginate
def employee_list(request):
    """
    List employees or create a new employee record.

    GET /hr/employees/
    - Filters: search, department, sort_by (name|position|department|join_date), sort_direction (asc|desc)

    POST /hr/employees/
    - Body: user_id, position, department, join_date, base_salary
    - Also creates the salary record of the current month
    """
    if request.method == 'GET':
        filters = {
            'search': request.query_params.get('search'),
            'department': request.query_params.get('department'),
            'sort_by': request.query_params.get('sort_by'),
            'sort_direction': request.query_params.get('sort_direction'),
        }
        employees = EmployeeService.list_employees(request.user, filters)
        serializer = EmployeeSerializer(employees, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    serializer = EmployeeCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    employee = EmployeeService.create_employee(request.user, serializer.to_dto())
    return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('employees')
def employee_detail(request, pk):
    """
    Retrieve, update or delete an employee record.

    An EMPLOYEE may only open their own record.
    """
    if request.method == 'GET':
        employee = EmployeeService.get_employee(request.user, pk)
        return Response(EmployeeDetailSerializer(employee).data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        serializer = EmployeeUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        employee = EmployeeService.update_employee(request.user, serializer.to_dto(pk))
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    EmployeeService.delete_employee(request.user, pk)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
@require_permission('employees', 'read')
def employee_assignable(request):
    """
    All employees for task assignment pickers (not paginated).

    GET /hr/employees/assignable/
    """
    employees = EmployeeService.list_for_assignment(request.user)
    return Response({
        'employees': EmployeeSerializer(employees, many=True).data
    }, status=status.HTTP_200_OK)
