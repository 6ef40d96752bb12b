"""
Employees App Configuration
"""

from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    """Configuration for the Employees app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.employees'
    label = 'employees'
    verbose_name = 'Employee Management'
