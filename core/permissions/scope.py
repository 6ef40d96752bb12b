"""
Self-scope guards.

The permission matrix answers "may this role touch this kind of record".
For the EMPLOYEE role that answer is further narrowed to records the
caller owns. Ownership is resolved first (a plain lookup returning a
user id), then compared against the caller; the two steps are kept
separate so each can be tested on its own.

Ownership chains:
    Employee -> user
    Salary   -> employee -> user
    Task     -> assigned_to (employee) -> user, or None when unassigned
"""
from typing import Dict, FrozenSet, Optional

from .roles import Role


# ============================================================================
# Ownership resolution
# ============================================================================

def resolve_employee_owner(employee) -> int:
    """Return the id of the user owning an employee record."""
    return employee.user_id


def resolve_salary_owner(salary) -> int:
    """Return the id of the user owning a salary record (through its employee)."""
    return resolve_employee_owner(salary.employee)


def resolve_task_owner(task) -> Optional[int]:
    """Return the id of the user a task is assigned to, or None if unassigned."""
    if task.assigned_to_id is None:
        return None
    return resolve_employee_owner(task.assigned_to)


# ============================================================================
# Guards
# ============================================================================

def can_access_employee_record(caller, employee) -> bool:
    if not caller.is_employee:
        return True
    return resolve_employee_owner(employee) == caller.id


def can_access_salary_record(caller, salary) -> bool:
    if not caller.is_employee:
        return True
    return resolve_salary_owner(salary) == caller.id


def can_update_task(caller, task) -> bool:
    """
    ADMIN and MANAGER may update any task. An EMPLOYEE may only update a
    task assigned to their own employee record; unassigned tasks have no
    owner and are therefore not updatable by an EMPLOYEE.
    """
    if not caller.is_employee:
        return True
    owner_id = resolve_task_owner(task)
    return owner_id is not None and owner_id == caller.id


# ============================================================================
# Field-level policy for task updates
# ============================================================================

TASK_EDITABLE_FIELDS: FrozenSet[str] = frozenset({
    'title', 'description', 'project', 'priority', 'status', 'assigned_to',
})

_TASK_FIELDS_BY_ROLE = {
    Role.ADMIN: TASK_EDITABLE_FIELDS,
    Role.MANAGER: TASK_EDITABLE_FIELDS,
    Role.EMPLOYEE: frozenset({'status'}),
}


def allowed_task_fields(role: str) -> FrozenSet[str]:
    """Task fields a role is allowed to change."""
    return _TASK_FIELDS_BY_ROLE[Role(role)]


def filter_task_changes(role: str, changes: Dict) -> Dict:
    """
    Drop every change the role is not allowed to make.

    Disallowed fields are ignored rather than rejected, so a full task form
    submitted by an EMPLOYEE still moves the task's status.
    """
    allowed = allowed_task_fields(role)
    return {field: value for field, value in changes.items() if field in allowed}
