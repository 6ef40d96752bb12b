"""
HR App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    # Employees and salary history
    path('', include('HR.employees.urls')),
    # Projects and tasks
    path('', include('HR.projects.urls')),
]
