"""
URL configuration for HR Projects module.
"""
from django.urls import path

from . import views

app_name = 'projects'

urlpatterns = [
    # Project endpoints
    path('projects/', views.project_list, name='project_list'),
    path('projects/<int:pk>/', views.project_detail, name='project_detail'),

    # Task endpoints
    path('tasks/', views.task_list, name='task_list'),
    path('tasks/<int:pk>/', views.task_detail, name='task_detail'),
    path('tasks/<int:pk>/status/', views.task_status_update, name='task_status_update'),
]
