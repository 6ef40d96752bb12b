"""
Employee Service - Business Logic Layer

Entry points for employee records. Every method takes the calling user
first and enforces the permission contract before touching storage:
identity, permission matrix, existence, then the self-scope guard.
"""
import logging
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils import timezone

from core.permissions.exceptions import NotFound
from core.permissions.roles import Action, ResourceKind
from core.permissions.services import authorize, authorize_record, resolve_identity
from HR.employees.dtos import EmployeeCreateDTO, EmployeeUpdateDTO
from HR.employees.models import Employee, Salary

logger = logging.getLogger(__name__)

User = get_user_model()


class EmployeeService:
    """Service layer for employee records"""

    @staticmethod
    def _get(pk) -> Employee:
        try:
            return Employee.objects.select_related('user').get(pk=pk)
        except Employee.DoesNotExist:
            raise NotFound("Employee not found")

    @staticmethod
    def list_employees(user, filters: dict = None) -> models.QuerySet:
        """
        List the employee directory.

        Every role that may read employees sees the whole directory;
        ownership only narrows access to a single record.

        Args:
            user: User performing the request
            filters: Dictionary of filters
                - search: Matches user name, position or department
                - department: Exact department
                - sort_by: 'name' (default), 'position', 'department', 'join_date'
                - sort_direction: 'asc' (default) or 'desc'

        Returns:
            QuerySet of Employee objects
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.READ, "You don't have permission to view employees")

        filters = filters or {}
        queryset = Employee.objects.select_related('user').search(filters.get('search'))

        department = filters.get('department')
        if department:
            queryset = queryset.filter(department__iexact=department)

        return queryset.sorted_by(filters.get('sort_by'), filters.get('sort_direction') or 'asc')

    @staticmethod
    def list_for_assignment(user) -> models.QuerySet:
        """All employees ordered by name, for task assignee pickers."""
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.READ, "You don't have permission to view employees")
        return Employee.objects.select_related('user').order_by('user__name')

    @staticmethod
    def get_employee(user, pk) -> Employee:
        """
        Retrieve one employee record.

        Raises:
            Forbidden: If the role cannot read employees, or an EMPLOYEE
                asks for someone else's record
            NotFound: If the record does not exist
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.READ, "You don't have permission to view employee details")

        employee = EmployeeService._get(pk)
        authorize_record(
            caller, ResourceKind.EMPLOYEES, Action.READ, employee,
            "You can only view your own employee details"
        )
        return employee

    @staticmethod
    @transaction.atomic
    def create_employee(user, dto: EmployeeCreateDTO) -> Employee:
        """
        Create the employee record of an existing user together with the
        salary record of the current month.

        Raises:
            Forbidden: If the role cannot create employees
            NotFound: If the user does not exist
            ValidationError: If the user already has an employee record
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.CREATE, "You don't have permission to create employees")

        try:
            target_user = User.objects.get(pk=dto.user_id)
        except User.DoesNotExist:
            raise NotFound("User not found")

        if Employee.objects.filter(user=target_user).exists():
            raise ValidationError("Employee record already exists for this user")

        employee = Employee(
            user=target_user,
            position=dto.position,
            department=dto.department,
            join_date=dto.join_date,
            created_by_id=caller.id,
            updated_by_id=caller.id,
        )
        employee.full_clean()
        employee.save()

        today = timezone.localdate()
        Salary.objects.create(
            employee=employee,
            month=today.month,
            year=today.year,
            base_salary=dto.base_salary,
            bonus=Decimal('0'),
            deductions=Decimal('0'),
            created_by_id=caller.id,
            updated_by_id=caller.id,
        )

        logger.info("Employee %s created for user %s by user %s", employee.pk, target_user.pk, caller.id)
        return employee

    @staticmethod
    @transaction.atomic
    def update_employee(user, dto: EmployeeUpdateDTO) -> Employee:
        """
        Update position and/or department.

        Raises:
            Forbidden: If the role cannot update employees, or the record
                is not the caller's own while the role is scoped
            NotFound: If the record does not exist
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.UPDATE, "You don't have permission to update employees")

        employee = EmployeeService._get(dto.employee_id)
        authorize_record(
            caller, ResourceKind.EMPLOYEES, Action.UPDATE, employee,
            "You can only update your own employee details"
        )

        if dto.position is not None:
            employee.position = dto.position
        if dto.department is not None:
            employee.department = dto.department

        employee.updated_by_id = caller.id
        employee.full_clean()
        employee.save()

        logger.info("Employee %s updated by user %s", employee.pk, caller.id)
        return employee

    @staticmethod
    @transaction.atomic
    def delete_employee(user, pk) -> None:
        """
        Delete an employee record together with its salary history.
        Tasks assigned to the employee become unassigned.
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.EMPLOYEES, Action.DELETE, "You don't have permission to delete employees")

        employee = EmployeeService._get(pk)
        employee.delete()

        logger.info("Employee %s deleted by user %s", pk, caller.id)
