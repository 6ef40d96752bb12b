from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from core.permissions.roles import Role
from HR.employees.models import Employee, Salary
from HR.projects.models import Project, ProjectStatus, Task, TaskPriority, TaskStatus

User = get_user_model()

DEMO_PASSWORD = 'DemoPass123'


class Command(BaseCommand):
    help = 'Create demo users (one per role), employees, salary history, a project and tasks'

    def add_arguments(self, parser):
        parser.add_argument('--password', default=DEMO_PASSWORD, help='Password for the demo users')
        parser.add_argument('--months', type=int, default=6, help='Months of salary history per employee')

    def populate_users(self, password):
        self.stdout.write('\n* Creating Users...')
        users_data = [
            ('admin@example.com', 'Ada Admin', Role.ADMIN),
            ('manager@example.com', 'Max Manager', Role.MANAGER),
            ('employee@example.com', 'Emma Employee', Role.EMPLOYEE),
            ('dev@example.com', 'Dan Developer', Role.EMPLOYEE),
        ]
        users = {}
        for email, name, role in users_data:
            user = User.objects.filter(email=email).first()
            if user is None:
                user = User.objects.create_user(email=email, name=name, password=password, role=role)
            users[email] = user
        self.stdout.write(f'  ✓ Ensured {len(users_data)} users')
        return users

    def populate_employees(self, users, admin):
        self.stdout.write('\n* Creating Employees...')
        employees_data = [
            ('manager@example.com', 'Engineering Manager', 'Engineering', date(2022, 3, 1), '7500.00'),
            ('employee@example.com', 'HR Specialist', 'Human Resources', date(2023, 6, 15), '4200.00'),
            ('dev@example.com', 'Backend Developer', 'Engineering', date(2024, 1, 8), '5100.00'),
        ]
        employees = {}
        for email, position, department, join_date, base in employees_data:
            employee, _ = Employee.objects.get_or_create(
                user=users[email],
                defaults={
                    'position': position,
                    'department': department,
                    'join_date': join_date,
                    'created_by': admin,
                    'updated_by': admin,
                }
            )
            employees[email] = (employee, Decimal(base))
        self.stdout.write(f'  ✓ Ensured {len(employees_data)} employees')
        return employees

    def populate_salaries(self, employees, months, admin):
        self.stdout.write('\n* Creating Salary History...')
        today = timezone.localdate()
        count = 0
        for employee, base in employees.values():
            year, month = today.year, today.month
            for offset in range(months):
                _, created = Salary.objects.get_or_create(
                    employee=employee,
                    month=month,
                    year=year,
                    defaults={
                        'base_salary': base,
                        'bonus': Decimal('250.00') if offset % 3 == 0 else Decimal('0'),
                        'deductions': Decimal('100.00'),
                        'created_by': admin,
                        'updated_by': admin,
                    }
                )
                count += int(created)
                month -= 1
                if month == 0:
                    month, year = 12, year - 1
        self.stdout.write(f'  ✓ Created {count} salary records')

    def populate_projects(self, employees, manager):
        self.stdout.write('\n* Creating Projects and Tasks...')
        project, _ = Project.objects.get_or_create(
            name='Employee Self-Service Portal',
            defaults={
                'description': 'Portal for leave requests, payslips and profile updates',
                'status': ProjectStatus.IN_PROGRESS,
                'start_date': date(2025, 1, 6),
                'created_by': manager,
                'updated_by': manager,
            }
        )
        hr_employee = employees['employee@example.com'][0]
        developer = employees['dev@example.com'][0]
        tasks_data = [
            ('Collect payslip requirements', hr_employee, TaskStatus.DONE, TaskPriority.MEDIUM),
            ('Design profile page', developer, TaskStatus.IN_PROGRESS, TaskPriority.HIGH),
            ('Implement leave request API', developer, TaskStatus.TODO, TaskPriority.CRITICAL),
            ('Write onboarding guide', None, TaskStatus.TODO, TaskPriority.LOW),
        ]
        for title, assignee, task_status, priority in tasks_data:
            Task.objects.get_or_create(
                project=project,
                title=title,
                defaults={
                    'assigned_to': assignee,
                    'status': task_status,
                    'priority': priority,
                    'created_by': manager,
                    'updated_by': manager,
                }
            )
        self.stdout.write(f'  ✓ Ensured 1 project with {len(tasks_data)} tasks')

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Seeding demo data...')

        users = self.populate_users(options['password'])
        admin = users['admin@example.com']
        employees = self.populate_employees(users, admin)
        self.populate_salaries(employees, options['months'], admin)
        self.populate_projects(employees, users['manager@example.com'])

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(self.style.SUCCESS('✅ Demo data ready'))
        self.stdout.write(f"Log in as admin@example.com, manager@example.com or employee@example.com ({options['password']})")
        self.stdout.write('=' * 60)
