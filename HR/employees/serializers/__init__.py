from .employee_serializers import (
    EmployeeSerializer,
    EmployeeDetailSerializer,
    EmployeeCreateSerializer,
    EmployeeUpdateSerializer,
)
from .salary_serializers import SalarySerializer, SalarySaveSerializer

__all__ = [
    'EmployeeSerializer',
    'EmployeeDetailSerializer',
    'EmployeeCreateSerializer',
    'EmployeeUpdateSerializer',
    'SalarySerializer',
    'SalarySaveSerializer',
]
