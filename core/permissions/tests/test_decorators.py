"""
Tests for the require_permission view decorator.
"""
from django.test import TestCase
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.test import APIRequestFactory, force_authenticate

from core.base.test_utils import create_user
from core.permissions.decorators import require_permission


@api_view(['GET', 'POST', 'PATCH', 'DELETE'])
@require_permission('projects')
def projects_view(request):
    return Response({'ok': True})


@api_view(['POST'])
@require_permission('users', 'update')
def role_view(request):
    return Response({'ok': True})


class RequirePermissionTests(TestCase):

    def setUp(self):
        self.factory = APIRequestFactory()
        self.employee = create_user(role='EMPLOYEE')
        self.manager = create_user(role='MANAGER')
        self.admin = create_user(role='ADMIN')

    def _call(self, view, method, user=None):
        request = getattr(self.factory, method)('/fake/', {}, format='json')
        if user is not None:
            force_authenticate(request, user=user)
        return view(request)

    def test_anonymous_gets_401(self):
        response = self._call(projects_view, 'get')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['message'], 'Authentication required')

    def test_action_derived_from_method(self):
        self.assertEqual(self._call(projects_view, 'get', self.employee).status_code, status.HTTP_200_OK)
        for method in ('post', 'patch', 'delete'):
            with self.subTest(method=method):
                response = self._call(projects_view, method, self.employee)
                self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_forbidden_body_names_required_permission(self):
        response = self._call(projects_view, 'delete', self.employee)
        self.assertEqual(response.data['status'], 'error')
        self.assertEqual(
            response.data['data']['required_permission'],
            {'resource': 'projects', 'action': 'delete'}
        )

    def test_manager_may_write_projects(self):
        self.assertEqual(self._call(projects_view, 'post', self.manager).status_code, status.HTTP_200_OK)

    def test_explicit_action(self):
        self.assertEqual(self._call(role_view, 'post', self.manager).status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self._call(role_view, 'post', self.admin).status_code, status.HTTP_200_OK)
