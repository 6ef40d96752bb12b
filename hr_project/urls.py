"""
URL configuration for hr_project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path, include

urlpatterns = [
    path('hr/', include('HR.urls')),

    # Authentication endpoints (register, login, logout, password, tokens)
    path('auth/', include('core.user_accounts.auth_urls')),

    # Account management endpoints (profile, users, roles)
    path('accounts/', include('core.user_accounts.urls')),
]
