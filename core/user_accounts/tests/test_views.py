"""
Tests for User Account API Views.
Covers registration, login, profile management, and admin operations.
"""
from rest_framework.test import APITestCase, APIClient
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import get_user_model

from core.base.test_utils import create_user, DEFAULT_PASSWORD
from core.permissions.roles import Role

User = get_user_model()


class RegistrationAPITest(APITestCase):
    """Test user registration endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/register/'
        self.valid_data = {
            'email': 'newuser@example.com',
            'name': 'New User',
            'phone_number': '+1234567890',
            'password': 'SecurePass123',
            'confirm_password': 'SecurePass123'
        }

    def test_register_user_success(self):
        """Registration returns tokens and creates an EMPLOYEE"""
        response = self.client.post(self.url, self.valid_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('tokens', response.data)
        self.assertEqual(response.data['user']['role'], Role.EMPLOYEE)
        self.assertIn('access', response.data['tokens'])
        self.assertIn('refresh', response.data['tokens'])

    def test_register_ignores_requested_role(self):
        data = dict(self.valid_data, role='ADMIN')
        self.client.post(self.url, data, format='json')
        self.assertEqual(User.objects.get(email='newuser@example.com').role, Role.EMPLOYEE)

    def test_register_duplicate_email(self):
        self.client.post(self.url, self.valid_data, format='json')
        response = self.client.post(self.url, self.valid_data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_register_password_mismatch(self):
        data = dict(self.valid_data, confirm_password='OtherPass123')
        response = self.client.post(self.url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_register_weak_password(self):
        data = dict(self.valid_data, password='alllowercase1', confirm_password='alllowercase1')
        response = self.client.post(self.url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class LoginAPITest(APITestCase):
    """Test user login endpoint"""

    def setUp(self):
        self.client = APIClient()
        self.url = '/auth/login/'
        self.user = create_user(email='testuser@example.com', name='Test User')

    def test_login_success(self):
        data = {'email': 'testuser@example.com', 'password': DEFAULT_PASSWORD}
        response = self.client.post(self.url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('tokens', response.data)

    def test_login_wrong_password(self):
        data = {'email': 'testuser@example.com', 'password': 'WrongPass123'}
        response = self.client.post(self.url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_missing_fields(self):
        response = self.client.post(self.url, {'email': 'testuser@example.com'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class TokenAPITest(APITestCase):
    """Test JWT refresh and logout"""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user()
        self.refresh = RefreshToken.for_user(self.user)

    def test_refresh_token_success(self):
        response = self.client.post('/auth/token/refresh/', {'refresh': str(self.refresh)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)

    def test_logout_success(self):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {self.refresh.access_token}')
        response = self.client.post('/auth/logout/', {'refresh': str(self.refresh)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_logout_requires_refresh(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post('/auth/logout/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class UserProfileAPITest(APITestCase):
    """Test user profile endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user(name='Test User')
        self.client.force_authenticate(user=self.user)

    def test_get_profile(self):
        response = self.client.get('/accounts/profile/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Test User')

    def test_profile_cannot_change_role(self):
        response = self.client.patch('/accounts/profile/', {'name': 'Renamed', 'role': 'ADMIN'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, 'Renamed')
        self.assertEqual(self.user.role, Role.EMPLOYEE)

    def test_my_permissions(self):
        response = self.client.get('/accounts/permissions/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['role'], Role.EMPLOYEE)
        self.assertEqual(response.data['permissions']['tasks'], ['read', 'update'])

    def test_profile_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get('/accounts/profile/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_change_password(self):
        response = self.client.post('/auth/change-password/', {
            'old_password': DEFAULT_PASSWORD,
            'new_password': 'BrandNew456',
            'confirm_password': 'BrandNew456',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('BrandNew456'))


class UserAdministrationAPITest(APITestCase):
    """User listing, deletion and role changes"""

    def setUp(self):
        self.client = APIClient()
        self.admin = create_user(role=Role.ADMIN)
        self.manager = create_user(role=Role.MANAGER)
        self.employee = create_user(role=Role.EMPLOYEE)

    def test_admin_lists_users_paginated(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.get('/accounts/users/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['count'], 3)

    def test_employee_cannot_list_users(self):
        self.client.force_authenticate(user=self.employee)
        response = self.client.get('/accounts/users/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_anonymous_gets_401(self):
        response = self.client.get('/accounts/users/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_manager_cannot_change_roles(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post(f'/accounts/users/{self.employee.pk}/role/', {'role': 'ADMIN'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_promoted_user_can_create_projects(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post(f'/accounts/users/{self.employee.pk}/role/', {'role': 'MANAGER'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['user']['role'], Role.MANAGER)

        self.employee.refresh_from_db()
        self.client.force_authenticate(user=self.employee)
        response = self.client.post('/hr/projects/', {
            'name': 'Migration',
            'start_date': '2025-01-01',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_invalid_role_rejected(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post(f'/accounts/users/{self.employee.pk}/role/', {'role': 'USER'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_last_admin_cannot_demote_self(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.patch(f'/accounts/users/{self.admin.pk}/role/', {'role': 'EMPLOYEE'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['status'], 'error')

    def test_unknown_user_returns_404(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.get('/accounts/users/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_deletes_user(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.delete(f'/accounts/users/{self.employee.pk}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(pk=self.employee.pk).exists())
