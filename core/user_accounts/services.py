"""
User Service - Business Logic Layer

User administration entry points. Role changes go through
UserService.update_role only; it is the single mutation path for the
role used by every permission check.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Q

from core.permissions.exceptions import NotFound
from core.permissions.roles import Action, ResourceKind, Role
from core.permissions.services import authorize, resolve_identity
from .models import CustomUser

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user administration"""

    @staticmethod
    def list_users(user, search=None) -> models.QuerySet:
        """
        List users, optionally filtered by name or email.

        Args:
            user: User performing the request
            search: Case-insensitive substring of name or email
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.USERS, Action.READ, "You don't have permission to view users")

        queryset = CustomUser.objects.select_related('employee').order_by('name')
        if search:
            queryset = queryset.filter(Q(name__icontains=search) | Q(email__icontains=search))
        return queryset

    @staticmethod
    def get_user(user, user_id) -> CustomUser:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.USERS, Action.READ, "You don't have permission to view users")

        try:
            return CustomUser.objects.get(pk=user_id)
        except CustomUser.DoesNotExist:
            raise NotFound("User not found")

    @staticmethod
    @transaction.atomic
    def update_role(user, user_id, role) -> CustomUser:
        """
        Change the role of a user.

        Args:
            user: Administrator performing the change
            user_id: Target user ID
            role: New role (one of Role)

        Returns:
            CustomUser: Updated user

        Raises:
            Forbidden: If the caller may not update users
            NotFound: If the target user does not exist
            ValidationError: If the role is invalid or the change would
                leave the system without an administrator
        """
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.USERS, Action.UPDATE, "You don't have permission to change user roles")

        if role not in Role.values:
            raise ValidationError("Invalid role. Must be ADMIN, MANAGER, or EMPLOYEE")

        try:
            target = CustomUser.objects.select_for_update().get(pk=user_id)
        except CustomUser.DoesNotExist:
            raise NotFound("User not found")

        if target.role == role:
            return target

        if role != Role.ADMIN and target.is_last_admin():
            raise ValidationError("Cannot change the role of the last administrator")

        previous = target.role
        target.role = role
        target.save(update_fields=['role', 'updated_at'])

        logger.info("User %s role changed from %s to %s by user %s", target.pk, previous, role, caller.id)
        return target

    @staticmethod
    @transaction.atomic
    def delete_user(user, user_id) -> None:
        caller = resolve_identity(user)
        authorize(caller, ResourceKind.USERS, Action.DELETE, "You don't have permission to delete users")

        try:
            target = CustomUser.objects.get(pk=user_id)
        except CustomUser.DoesNotExist:
            raise NotFound("User not found")

        if target.pk == caller.id:
            raise ValidationError("Cannot delete your own account")

        target.delete()
        logger.info("User %s deleted by user %s", user_id, caller.id)
