"""
API tests for employee and salary endpoints.
"""
from decimal import Decimal

from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from core.base.test_utils import create_employee, create_user
from core.permissions.roles import Role
from HR.employees.models import Salary


class EmployeeAPITest(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = create_user(role=Role.ADMIN)
        self.manager = create_user(role=Role.MANAGER)
        self.u1 = create_user(role=Role.EMPLOYEE)
        self.u2 = create_user(role=Role.EMPLOYEE)
        self.e1 = create_employee(user=self.u1, department='Engineering')
        self.e2 = create_employee(user=self.u2, department='Design')

    def test_employee_lists_all_employees(self):
        self.client.force_authenticate(user=self.u1)
        response = self.client.get('/hr/employees/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = {row['id'] for row in response.data['data']['results']}
        self.assertEqual(ids, {self.e1.pk, self.e2.pk})

    def test_employee_cannot_update_other_employee(self):
        self.client.force_authenticate(user=self.u1)
        response = self.client.patch(f'/hr/employees/{self.e2.pk}/', {'department': 'Sales'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_employee_cannot_update_own_department(self):
        self.client.force_authenticate(user=self.u1)
        response = self.client.patch(f'/hr/employees/{self.e1.pk}/', {'department': 'Sales'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.e1.refresh_from_db()
        self.assertEqual(self.e1.department, 'Engineering')

    def test_employee_detail_scope(self):
        self.client.force_authenticate(user=self.u1)
        self.assertEqual(self.client.get(f'/hr/employees/{self.e1.pk}/').status_code, status.HTTP_200_OK)
        response = self.client.get(f'/hr/employees/{self.e2.pk}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['status'], 'error')

    def test_detail_includes_salaries(self):
        Salary.objects.create(employee=self.e2, month=4, year=2025, base_salary=Decimal('3000'))
        self.client.force_authenticate(user=self.manager)
        response = self.client.get(f'/hr/employees/{self.e2.pk}/')
        self.assertEqual(len(response.data['salaries']), 1)

    def test_missing_employee_returns_404(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.get('/hr/employees/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_admin_creates_employee(self):
        user = create_user()
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/hr/employees/', {
            'user_id': user.pk,
            'position': 'QA Engineer',
            'department': 'Engineering',
            'join_date': '2025-02-01',
            'base_salary': '3500.00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['user_id'], user.pk)
        self.assertEqual(Salary.objects.filter(employee_id=response.data['id']).count(), 1)

    def test_manager_cannot_create_employee(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post('/hr/employees/', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_assignable_is_not_paginated(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.get('/hr/employees/assignable/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['employees']), 2)


class SalaryAPITest(APITestCase):

    def setUp(self):
        self.client = APIClient()
        self.admin = create_user(role=Role.ADMIN)
        self.manager = create_user(role=Role.MANAGER)
        self.u1 = create_user(role=Role.EMPLOYEE)
        self.e1 = create_employee(user=self.u1)
        self.salary = Salary.objects.create(employee=self.e1, month=1, year=2025, base_salary=Decimal('2000'))

    def test_admin_deletes_salary(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.delete(f'/hr/salaries/{self.salary.pk}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_manager_cannot_delete_salary(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.delete(f'/hr/salaries/{self.salary.pk}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Salary.objects.filter(pk=self.salary.pk).exists())

    def test_upsert_returns_201_then_200(self):
        self.client.force_authenticate(user=self.manager)
        payload = {'employee_id': self.e1.pk, 'month': 2, 'year': 2025, 'base_salary': '2100.00'}
        self.assertEqual(self.client.post('/hr/salaries/', payload, format='json').status_code, status.HTTP_201_CREATED)
        payload['bonus'] = '100.00'
        response = self.client.post('/hr/salaries/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Decimal(response.data['total_salary']), Decimal('2200.00'))

    def test_invalid_month_rejected(self):
        self.client.force_authenticate(user=self.admin)
        payload = {'employee_id': self.e1.pk, 'month': 13, 'year': 2025, 'base_salary': '2100.00'}
        response = self.client.post('/hr/salaries/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_employee_reads_own_history(self):
        self.client.force_authenticate(user=self.u1)
        response = self.client.get(f'/hr/employees/{self.e1.pk}/salaries/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['years'], [2025])
        self.assertEqual(len(response.data['salaries']), 1)
