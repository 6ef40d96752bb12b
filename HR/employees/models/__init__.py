from .employee import Employee, EmployeeQuerySet
from .salary import Salary, MIN_SALARY_YEAR, MAX_SALARY_YEAR

__all__ = [
    'Employee',
    'EmployeeQuerySet',
    'Salary',
    'MIN_SALARY_YEAR',
    'MAX_SALARY_YEAR',
]
