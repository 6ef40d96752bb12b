from .employee_views import employee_list, employee_detail, employee_assignable
from .salary_views import employee_salaries, salary_save, salary_detail

__all__ = [
    'employee_list',
    'employee_detail',
    'employee_assignable',
    'employee_salaries',
    'salary_save',
    'salary_detail',
]
