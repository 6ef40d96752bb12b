import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('employees', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('status', models.CharField(
                    choices=[
                        ('PLANNING', 'Planning'),
                        ('IN_PROGRESS', 'In Progress'),
                        ('ON_HOLD', 'On Hold'),
                        ('COMPLETED', 'Completed'),
                        ('CANCELLED', 'Cancelled'),
                    ],
                    db_index=True, default='PLANNING', max_length=20,
                )),
                ('start_date', models.DateField()),
                ('end_date', models.DateField(blank=True, null=True)),
                ('created_by', models.ForeignKey(
                    blank=True, help_text='User who created this record', null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='projects_project_created', to=settings.AUTH_USER_MODEL,
                )),
                ('updated_by', models.ForeignKey(
                    blank=True, help_text='User who last updated this record', null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='projects_project_updated', to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Project',
                'verbose_name_plural': 'Projects',
                'db_table': 'projects',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('status', models.CharField(
                    choices=[
                        ('TODO', 'To Do'),
                        ('IN_PROGRESS', 'In Progress'),
                        ('REVIEW', 'Review'),
                        ('DONE', 'Done'),
                    ],
                    db_index=True, default='TODO', max_length=20,
                )),
                ('priority', models.CharField(
                    choices=[
                        ('LOW', 'Low'),
                        ('MEDIUM', 'Medium'),
                        ('HIGH', 'High'),
                        ('CRITICAL', 'Critical'),
                    ],
                    db_index=True, default='MEDIUM', max_length=10,
                )),
                ('assigned_to', models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='tasks', to='employees.employee',
                )),
                ('project', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='tasks', to='projects.project',
                )),
                ('created_by', models.ForeignKey(
                    blank=True, help_text='User who created this record', null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='projects_task_created', to=settings.AUTH_USER_MODEL,
                )),
                ('updated_by', models.ForeignKey(
                    blank=True, help_text='User who last updated this record', null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='projects_task_updated', to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                'verbose_name': 'Task',
                'verbose_name_plural': 'Tasks',
                'db_table': 'tasks',
                'ordering': ['-created_at'],
            },
        ),
    ]
