"""
Service layer for permission checking.

Every entry point follows the same order before touching storage:
    1. resolve_identity()   -> Unauthenticated if there is no caller
    2. authorize()          -> Forbidden if the matrix denies
    3. (load the record)    -> NotFound if it does not exist
    4. authorize_record()   -> Forbidden if the self-scope guard denies
"""
import logging
from typing import Optional, Tuple

from .exceptions import Forbidden, Unauthenticated
from .roles import Action, Identity, ResourceKind, has_permission
from .scope import (
    can_access_employee_record,
    can_access_salary_record,
    can_update_task,
)

logger = logging.getLogger(__name__)

# (resource, action) pairs that need an ownership check on top of the matrix
RECORD_GUARDS = {
    (ResourceKind.EMPLOYEES, Action.READ): can_access_employee_record,
    (ResourceKind.EMPLOYEES, Action.UPDATE): can_access_employee_record,
    (ResourceKind.SALARIES, Action.READ): can_access_salary_record,
    (ResourceKind.SALARIES, Action.UPDATE): can_access_salary_record,
    (ResourceKind.TASKS, Action.UPDATE): can_update_task,
}


def resolve_identity(user) -> Identity:
    """
    Build the caller identity for a request.

    Raises:
        Unauthenticated: If there is no user or the user is anonymous
    """
    if isinstance(user, Identity):
        return user
    if user is None or not getattr(user, 'is_authenticated', False):
        raise Unauthenticated()
    return Identity.from_user(user)


def user_can_perform_action(user, resource: str, action: str) -> Tuple[bool, str]:
    """
    Check if a user can perform an action on a resource kind.

    Returns:
        Tuple of (allowed: bool, reason: str)
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return False, "Authentication required"

    if has_permission(user.role, resource, action):
        return True, "Permission granted"

    return False, f"Role '{user.role}' cannot {action} {resource}"


def authorize(caller: Identity, resource: str, action: str, message: Optional[str] = None) -> None:
    """
    Enforce the permission matrix.

    Raises:
        Forbidden: If the caller's role lacks the action on the resource
    """
    if not has_permission(caller.role, resource, action):
        logger.warning(
            "Permission denied: user=%s role=%s resource=%s action=%s",
            caller.id, caller.role, resource, action
        )
        raise Forbidden(message or f"You don't have permission to {action} {resource}")


def authorize_record(caller: Identity, resource: str, action: str, record,
                     message: Optional[str] = None) -> None:
    """
    Enforce the self-scope guard for a loaded record, if one applies.

    Raises:
        Forbidden: If the caller does not own the record and their role is scoped
    """
    guard = RECORD_GUARDS.get((ResourceKind(resource), Action(action)))
    if guard is None or guard(caller, record):
        return

    logger.warning(
        "Scope denied: user=%s role=%s resource=%s action=%s record=%s",
        caller.id, caller.role, resource, action, record.pk
    )
    raise Forbidden(message or f"You can only {action} your own {resource}")
