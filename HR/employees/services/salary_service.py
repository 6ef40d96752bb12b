"""
Salary Service - Business Logic Layer

Salary history is owned by the employee it belongs to: an EMPLOYEE can
read only their own salaries. Writing is limited by the permission matrix
(MANAGER may update, only ADMIN may delete).
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from core.permissions.exceptions import NotFound
from core.permissions.roles import Action, ResourceKind
from core.permissions.services import authorize, authorize_record, resolve_identity
from HR.employees.dtos import SalarySaveDTO
from HR.employees.models import Employee, Salary, MIN_SALARY_YEAR, MAX_SALARY_YEAR

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 12


class SalaryService:
    """Service layer for salary history"""

    @staticmethod
    def list_salaries(user, employee_id, year=None, limit=DEFAULT_HISTORY_LIMIT) -> dict:
        """
        Salary history of one employee, newest first.

        Args:
            user: User performing the request
            employee_id: Employee whose salaries are listed
            year: Optional year filter
            limit: Maximum number of records (default 12)

        Returns:
            dict with 'salaries' (list of Salary) and 'years' (years with
            at least one record, newest first)
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.SALARIES, Action.READ, "You don't have permission to view salary information")

        try:
            employee = Employee.objects.get(pk=employee_id)
        except Employee.DoesNotExist:
            raise NotFound("Employee not found")

        # The guard for an employee's salary history is ownership of the employee
        authorize_record(
            caller, ResourceKind.EMPLOYEES, Action.READ, employee,
            "You can only view your own salary information"
        )

        salaries = employee.salaries.order_by('-year', '-month')
        if year:
            salaries = salaries.filter(year=year)

        years = list(
            employee.salaries.order_by('-year').values_list('year', flat=True).distinct()
        )

        return {
            'salaries': list(salaries[:limit]),
            'years': years,
        }

    @staticmethod
    def get_salary(user, pk) -> Salary:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.SALARIES, Action.READ, "You don't have permission to view salary information")

        try:
            salary = Salary.objects.select_related('employee').get(pk=pk)
        except Salary.DoesNotExist:
            raise NotFound("Salary record not found")

        authorize_record(
            caller, ResourceKind.SALARIES, Action.READ, salary,
            "You can only view your own salary information"
        )
        return salary

    @staticmethod
    @transaction.atomic
    def save_salary(user, dto: SalarySaveDTO):
        """
        Create or update the salary record for (employee, month, year).

        Returns:
            Tuple of (Salary, created: bool)

        Raises:
            Forbidden: If the role cannot update salaries
            ValidationError: If month/year are out of range
            NotFound: If the employee does not exist
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.SALARIES, Action.UPDATE, "You don't have permission to update salary information")

        if not 1 <= dto.month <= 12:
            raise ValidationError("Month must be between 1 and 12")
        if not MIN_SALARY_YEAR <= dto.year <= MAX_SALARY_YEAR:
            raise ValidationError("Year is out of valid range")

        try:
            employee = Employee.objects.get(pk=dto.employee_id)
        except Employee.DoesNotExist:
            raise NotFound("Employee not found")

        salary = Salary.objects.select_for_update().filter(
            employee=employee, month=dto.month, year=dto.year
        ).first()
        created = salary is None

        if created:
            salary = Salary(employee=employee, month=dto.month, year=dto.year, created_by_id=caller.id)
        else:
            authorize_record(caller, ResourceKind.SALARIES, Action.UPDATE, salary)

        salary.base_salary = dto.base_salary
        salary.bonus = dto.bonus
        salary.deductions = dto.deductions
        salary.updated_by_id = caller.id
        salary.total_salary = salary.compute_total()
        salary.full_clean()
        salary.save()

        logger.info(
            "Salary %s-%02d for employee %s %s by user %s",
            dto.year, dto.month, employee.pk, 'created' if created else 'updated', caller.id
        )
        return salary, created

    @staticmethod
    @transaction.atomic
    def delete_salary(user, pk) -> None:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.SALARIES, Action.DELETE, "Only administrators can delete salary records")

        try:
            salary = Salary.objects.get(pk=pk)
        except Salary.DoesNotExist:
            raise NotFound("Salary record not found")

        salary.delete()
        logger.info("Salary %s deleted by user %s", pk, caller.id)
