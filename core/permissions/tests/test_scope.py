"""
Tests for ownership resolution, the self-scope guards and the task
field policy. Records are plain objects; the guards only read ids.
"""
from types import SimpleNamespace

from django.test import SimpleTestCase

from core.permissions.roles import Identity
from core.permissions.scope import (
    TASK_EDITABLE_FIELDS,
    allowed_task_fields,
    can_access_employee_record,
    can_access_salary_record,
    can_update_task,
    filter_task_changes,
    resolve_employee_owner,
    resolve_salary_owner,
    resolve_task_owner,
)


def employee(pk, user_id):
    return SimpleNamespace(pk=pk, id=pk, user_id=user_id)


def salary(pk, emp):
    return SimpleNamespace(pk=pk, employee=emp, employee_id=emp.pk)


def task(pk, assignee=None):
    return SimpleNamespace(
        pk=pk,
        assigned_to=assignee,
        assigned_to_id=assignee.pk if assignee else None,
    )


class OwnershipResolutionTests(SimpleTestCase):

    def setUp(self):
        self.e1 = employee(pk=10, user_id=2)

    def test_employee_owner(self):
        self.assertEqual(resolve_employee_owner(self.e1), 2)

    def test_salary_owner_goes_through_employee(self):
        self.assertEqual(resolve_salary_owner(salary(5, self.e1)), 2)

    def test_task_owner(self):
        self.assertEqual(resolve_task_owner(task(7, self.e1)), 2)

    def test_unassigned_task_has_no_owner(self):
        self.assertIsNone(resolve_task_owner(task(7)))


class GuardTests(SimpleTestCase):

    def setUp(self):
        self.u1 = Identity(id=1, role='EMPLOYEE')
        self.u2 = Identity(id=2, role='EMPLOYEE')
        self.manager = Identity(id=3, role='MANAGER')
        self.admin = Identity(id=4, role='ADMIN')
        self.e1 = employee(pk=10, user_id=2)

    def test_employee_sees_only_own_employee_record(self):
        self.assertTrue(can_access_employee_record(self.u2, self.e1))
        self.assertFalse(can_access_employee_record(self.u1, self.e1))

    def test_employee_sees_only_own_salary(self):
        record = salary(5, self.e1)
        self.assertTrue(can_access_salary_record(self.u2, record))
        self.assertFalse(can_access_salary_record(self.u1, record))

    def test_unscoped_roles_pass_every_guard(self):
        for caller in (self.manager, self.admin):
            with self.subTest(role=caller.role):
                self.assertTrue(can_access_employee_record(caller, self.e1))
                self.assertTrue(can_access_salary_record(caller, salary(5, self.e1)))
                self.assertTrue(can_update_task(caller, task(7, self.e1)))
                self.assertTrue(can_update_task(caller, task(8)))

    def test_task_assigned_to_another_user(self):
        # u1 is an EMPLOYEE, the task is assigned to e1 which belongs to u2
        self.assertFalse(can_update_task(self.u1, task(7, self.e1)))
        self.assertTrue(can_update_task(self.u2, task(7, self.e1)))

    def test_unassigned_task_not_updatable_by_employee(self):
        self.assertFalse(can_update_task(self.u1, task(8)))

    def test_only_employee_identities_are_scoped(self):
        foreign = employee(pk=20, user_id=99)
        for role in ('ADMIN', 'MANAGER', 'EMPLOYEE'):
            caller = Identity(id=1, role=role)
            with self.subTest(role=role):
                self.assertEqual(can_access_employee_record(caller, foreign), not caller.is_employee)

    def test_ownership_is_read_on_every_call(self):
        record = task(7, self.e1)
        self.assertTrue(can_update_task(self.u2, record))
        record.assigned_to = employee(pk=11, user_id=1)
        record.assigned_to_id = 11
        self.assertFalse(can_update_task(self.u2, record))
        self.assertTrue(can_update_task(self.u1, record))


class TaskFieldPolicyTests(SimpleTestCase):

    def test_employee_may_only_change_status(self):
        self.assertEqual(allowed_task_fields('EMPLOYEE'), frozenset({'status'}))

    def test_managers_and_admins_may_change_everything(self):
        self.assertEqual(allowed_task_fields('MANAGER'), TASK_EDITABLE_FIELDS)
        self.assertEqual(allowed_task_fields('ADMIN'), TASK_EDITABLE_FIELDS)

    def test_filter_drops_disallowed_fields(self):
        changes = {'status': 'DONE', 'title': 'Renamed', 'priority': 'HIGH', 'assigned_to': 3}
        self.assertEqual(filter_task_changes('EMPLOYEE', changes), {'status': 'DONE'})
        self.assertEqual(filter_task_changes('MANAGER', changes), changes)

    def test_filter_without_status_is_empty_for_employee(self):
        self.assertEqual(filter_task_changes('EMPLOYEE', {'title': 'x'}), {})

    def test_unknown_role_raises(self):
        with self.assertRaises(ValueError):
            allowed_task_fields('GUEST')
