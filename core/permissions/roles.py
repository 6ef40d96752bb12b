"""
Role Registry and Permission Matrix
===================================

Defines the fixed set of roles, the resource kinds subject to permission
checks, the four standard actions, and the static matrix mapping
role -> resource -> allowed actions.

The matrix is built once at import time from the literal table below and
is exposed read-only. It is never mutated at runtime.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping

from django.db import models


class Role(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrator'
    MANAGER = 'MANAGER', 'Manager'
    EMPLOYEE = 'EMPLOYEE', 'Employee'


class ResourceKind(models.TextChoices):
    USERS = 'users', 'Users'
    EMPLOYEES = 'employees', 'Employees'
    PROJECTS = 'projects', 'Projects'
    TASKS = 'tasks', 'Tasks'
    SALARIES = 'salaries', 'Salaries'


class Action(models.TextChoices):
    CREATE = 'create', 'Create'
    READ = 'read', 'Read'
    UPDATE = 'update', 'Update'
    DELETE = 'delete', 'Delete'


CRUD = frozenset(Action)
NONE = frozenset()

# ============================================================================
# PERMISSION MATRIX
# ============================================================================

_MATRIX = {
    Role.ADMIN: {
        ResourceKind.USERS: CRUD,
        ResourceKind.EMPLOYEES: CRUD,
        ResourceKind.PROJECTS: CRUD,
        ResourceKind.TASKS: CRUD,
        ResourceKind.SALARIES: CRUD,
    },
    Role.MANAGER: {
        ResourceKind.USERS: frozenset({Action.READ}),
        ResourceKind.EMPLOYEES: frozenset({Action.READ}),
        ResourceKind.PROJECTS: CRUD,
        ResourceKind.TASKS: CRUD,
        ResourceKind.SALARIES: frozenset({Action.READ, Action.UPDATE}),
    },
    Role.EMPLOYEE: {
        ResourceKind.USERS: NONE,
        ResourceKind.EMPLOYEES: frozenset({Action.READ}),
        ResourceKind.PROJECTS: frozenset({Action.READ}),
        ResourceKind.TASKS: frozenset({Action.READ, Action.UPDATE}),
        ResourceKind.SALARIES: frozenset({Action.READ}),
    },
}

ROLE_PERMISSIONS: Mapping[Role, Mapping[ResourceKind, FrozenSet[Action]]] = MappingProxyType({
    role: MappingProxyType(resources) for role, resources in _MATRIX.items()
})


def has_permission(role: str, resource: str, action: str) -> bool:
    """
    Check if a role may perform an action on a resource kind.

    Args:
        role: One of Role ('ADMIN', 'MANAGER', 'EMPLOYEE')
        resource: One of ResourceKind ('users', 'employees', ...)
        action: One of Action ('create', 'read', 'update', 'delete')

    Returns:
        bool: True if the action is in the allowed set for (role, resource)

    Raises:
        ValueError: If role, resource or action is not a known value.
            Unknown values are a programming error, not a denial.
    """
    allowed = ROLE_PERMISSIONS[Role(role)][ResourceKind(resource)]
    return Action(action) in allowed


def get_role_permissions(role: str) -> Dict[str, List[str]]:
    """
    Return the matrix row for a role as plain data, e.g.
    {'projects': ['create', 'delete', 'read', 'update'], 'users': [], ...}
    """
    row = ROLE_PERMISSIONS[Role(role)]
    return {
        resource.value: sorted(action.value for action in actions)
        for resource, actions in row.items()
    }


@dataclass(frozen=True)
class Identity:
    """Caller identity for a single request."""
    id: int
    role: str

    @classmethod
    def from_user(cls, user) -> 'Identity':
        return cls(id=user.pk, role=Role(user.role))

    @property
    def is_employee(self) -> bool:
        return self.role == Role.EMPLOYEE
