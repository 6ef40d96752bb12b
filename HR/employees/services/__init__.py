from .employee_service import EmployeeService
from .salary_service import SalaryService

__all__ = ['EmployeeService', 'SalaryService']
