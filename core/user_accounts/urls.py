"""
URL Configuration for Accounts app.
Handles user account management functionality (not authentication).
Authentication endpoints are in auth_urls.py
"""
from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Self-service
    path('profile/', views.user_profile, name='user_profile'),
    path('permissions/', views.my_permissions, name='my_permissions'),

    # User administration (role-gated)
    path('users/', views.user_list, name='user_list'),
    path('users/<int:user_id>/', views.user_detail, name='user_detail'),
    path('users/<int:user_id>/role/', views.user_role_update, name='user_role_update'),
]
