"""
User Account Models
Handles user authentication and the role used by every permission check.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.core.exceptions import PermissionDenied

from core.permissions.roles import Role


class CustomUserManager(BaseUserManager):
    """
    Custom user manager for CustomUser model.
    Handles user creation with a given role.
    """

    def create_user(self, email, name, password=None, role=Role.EMPLOYEE, **extra_fields):
        """
        Create and save a user.

        Args:
            email: User's email address (used for authentication)
            name: User's full name
            password: User's password (will be hashed)
            role: One of Role (defaults to EMPLOYEE)
            **extra_fields: Additional fields to set on the user (e.g. phone_number)

        Returns:
            CustomUser: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')

        user = self.model(
            email=self.normalize_email(email),
            name=name,
            role=Role(role),
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """
        Create and save an administrator.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(email, name, password=password, role=Role.ADMIN, **extra_fields)


class CustomUser(AbstractBaseUser):
    """Custom user model with email authentication and a single role"""
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=15, blank=True, default='')
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.EMPLOYEE,
        db_index=True,
        help_text="Determines blanket resource permissions"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'custom_users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.email})"

    def is_admin(self):
        return self.role == Role.ADMIN

    def is_manager(self):
        return self.role == Role.MANAGER

    def is_last_admin(self):
        """True if this user is the only remaining administrator."""
        return self.is_admin() and not CustomUser.objects.filter(
            role=Role.ADMIN
        ).exclude(pk=self.pk).exists()

    def delete(self, *args, **kwargs):
        """At least one administrator must always remain."""
        if self.is_last_admin():
            raise PermissionDenied("Cannot delete the last administrator.")
        return super().delete(*args, **kwargs)
