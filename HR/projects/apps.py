"""
Projects App Configuration
"""

from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    """Configuration for the Projects app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.projects'
    label = 'projects'
    verbose_name = 'Projects and Tasks'
