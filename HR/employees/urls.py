"""
URL configuration for HR Employees module.
"""
from django.urls import path

from . import views

app_name = 'employees'

urlpatterns = [
    # Employee endpoints
    path('employees/', views.employee_list, name='employee_list'),
    path('employees/assignable/', views.employee_assignable, name='employee_assignable'),
    path('employees/<int:pk>/', views.employee_detail, name='employee_detail'),

    # Salary endpoints
    path('employees/<int:employee_id>/salaries/', views.employee_salaries, name='employee_salaries'),
    path('salaries/', views.salary_save, name='salary_save'),
    path('salaries/<int:pk>/', views.salary_detail, name='salary_detail'),
]
