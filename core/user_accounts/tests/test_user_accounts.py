"""
Tests for the user model, its manager and the user administration service.
"""
from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.test import TestCase

from core.base.test_utils import create_user
from core.permissions.exceptions import Forbidden, NotFound, Unauthenticated
from core.permissions.roles import Role, has_permission
from core.user_accounts.services import UserService


User = get_user_model()


class CustomUserManagerTest(TestCase):
    """Test CustomUserManager functionality"""

    def test_create_user_defaults_to_employee(self):
        user = User.objects.create_user(
            email='test@EXAMPLE.com',
            name='Test User',
            phone_number='+1234567890',
            password='TestPass123'
        )
        self.assertEqual(user.email, 'test@example.com')
        self.assertEqual(user.role, Role.EMPLOYEE)
        self.assertTrue(user.check_password('TestPass123'))

    def test_create_superuser_is_admin(self):
        user = User.objects.create_superuser(email='root@example.com', name='Root', password='TestPass123')
        self.assertTrue(user.is_admin())

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', name='No Email', password='TestPass123')

    def test_create_user_rejects_unknown_role(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='x@example.com', name='X', password='TestPass123', role='USER')


class LastAdminProtectionTest(TestCase):

    def test_cannot_delete_last_admin(self):
        admin = create_user(role=Role.ADMIN)
        with self.assertRaises(PermissionDenied):
            admin.delete()
        self.assertTrue(User.objects.filter(pk=admin.pk).exists())

    def test_can_delete_admin_when_another_exists(self):
        admin = create_user(role=Role.ADMIN)
        create_user(role=Role.ADMIN)
        admin.delete()
        self.assertFalse(User.objects.filter(pk=admin.pk).exists())


class UserServiceTest(TestCase):

    def setUp(self):
        self.admin = create_user(role=Role.ADMIN, name='Alice Admin')
        self.manager = create_user(role=Role.MANAGER, name='Mark Manager')
        self.employee = create_user(role=Role.EMPLOYEE, name='Eve Employee')

    def test_list_users_requires_identity(self):
        with self.assertRaises(Unauthenticated):
            UserService.list_users(None)

    def test_employee_cannot_list_users(self):
        with self.assertRaises(Forbidden):
            UserService.list_users(self.employee)

    def test_manager_can_search_users(self):
        users = UserService.list_users(self.manager, search='eve')
        self.assertEqual([u.pk for u in users], [self.employee.pk])

    def test_only_admin_changes_roles(self):
        with self.assertRaises(Forbidden):
            UserService.update_role(self.manager, self.employee.pk, Role.MANAGER)

    def test_promotion_grants_project_create(self):
        self.assertFalse(has_permission(self.employee.role, 'projects', 'create'))

        UserService.update_role(self.admin, self.employee.pk, Role.MANAGER)

        self.employee.refresh_from_db()
        self.assertEqual(self.employee.role, Role.MANAGER)
        self.assertTrue(has_permission(self.employee.role, 'projects', 'create'))

    def test_invalid_role_rejected(self):
        with self.assertRaises(ValidationError):
            UserService.update_role(self.admin, self.employee.pk, 'USER')

    def test_unknown_user(self):
        with self.assertRaises(NotFound):
            UserService.update_role(self.admin, 999999, Role.MANAGER)

    def test_last_admin_cannot_be_demoted(self):
        with self.assertRaises(ValidationError):
            UserService.update_role(self.admin, self.admin.pk, Role.EMPLOYEE)

    def test_admin_can_be_demoted_when_another_exists(self):
        other = create_user(role=Role.ADMIN)
        user = UserService.update_role(self.admin, other.pk, Role.MANAGER)
        self.assertEqual(user.role, Role.MANAGER)

    def test_role_change_is_logged(self):
        with self.assertLogs('core.user_accounts.services', level='INFO') as logs:
            UserService.update_role(self.admin, self.employee.pk, Role.MANAGER)
        self.assertIn('EMPLOYEE to MANAGER', logs.output[0])

    def test_cannot_delete_self(self):
        other_admin = create_user(role=Role.ADMIN)
        with self.assertRaises(ValidationError):
            UserService.delete_user(other_admin, other_admin.pk)

    def test_manager_cannot_delete_users(self):
        with self.assertRaises(Forbidden):
            UserService.delete_user(self.manager, self.employee.pk)

    def test_admin_deletes_user(self):
        UserService.delete_user(self.admin, self.employee.pk)
        self.assertFalse(User.objects.filter(pk=self.employee.pk).exists())
