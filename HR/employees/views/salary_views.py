from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from core.permissions.decorators import require_permission

from HR.employees.services import SalaryService
from HR.employees.services.salary_service import DEFAULT_HISTORY_LIMIT
from HR.employees.serializers import SalarySerializer, SalarySaveSerializer


def _positive_int(value, default=None):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@api_view(['GET'])
@require_permission('salaries', 'read')
def employee_salaries(request, employee_id):
    """
    Salary history of an employee.

    GET /hr/employees/<employee_id>/salaries/?year=2025&limit=12
    - Returns: { salaries: [...], years: [2025, 2024, ...] }
    """
    result = SalaryService.list_salaries(
        request.user,
        employee_id,
        year=_positive_int(request.query_params.get('year')),
        limit=_positive_int(request.query_params.get('limit'), DEFAULT_HISTORY_LIMIT),
    )
    return Response({
        'salaries': SalarySerializer(result['salaries'], many=True).data,
        'years': result['years'],
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@require_permission('salaries', 'update')
def salary_save(request):
    """
    Create or update the salary of one month.

    POST /hr/salaries/
    - Body: employee_id, month, year, base_salary, bonus?, deductions?
    """
    serializer = SalarySaveSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    salary, created = SalaryService.save_salary(request.user, serializer.to_dto())
    return Response(
        SalarySerializer(salary).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@api_view(['GET', 'DELETE'])
@require_permission('salaries')
def salary_detail(request, pk):
    """
    GET /hr/salaries/<pk>/
    DELETE /hr/salaries/<pk>/ (administrators only)
    """
    if request.method == 'GET':
        salary = SalaryService.get_salary(request.user, pk)
        return Response(SalarySerializer(salary).data, status=status.HTTP_200_OK)

    SalaryService.delete_salary(request.user, pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
