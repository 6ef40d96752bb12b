from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from django.core.validators import EmailValidator, RegexValidator
from .models import CustomUser
from core.permissions.roles import Role
import re


phone_regex = RegexValidator(
    regex=r'^(\+?\d{1,3})?[-.\s]?\(?\d{1,4}\)?[-.\s]?\d{1,4}[-.\s]?\d{1,9}$',
    message="Enter a valid phone number"
)


def validate_password_strength(value):
    """Shared password rules for registration and password changes"""
    if len(value) < 8:
        raise serializers.ValidationError("Password must be at least 8 characters long")

    if not re.search(r'[A-Z]', value):
        raise serializers.ValidationError("Password must contain at least one uppercase letter")

    if not re.search(r'[a-z]', value):
        raise serializers.ValidationError("Password must contain at least one lowercase letter")

    if not re.search(r'\d', value):
        raise serializers.ValidationError("Password must contain at least one number")

    validate_password(value)
    return value


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for public user registration - always creates an EMPLOYEE"""
    password = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(min_length=2, max_length=255)
    phone_number = serializers.CharField(required=False, allow_blank=True, max_length=15)

    class Meta:
        model = CustomUser
        fields = ['email', 'name', 'phone_number', 'password', 'confirm_password']

    def validate_email(self, value):
        validator = EmailValidator(message="Invalid email address")
        validator(value)

        if CustomUser.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already in use")

        return value

    def validate_phone_number(self, value):
        if value:
            phone_regex(value)
        return value

    def validate_password(self, value):
        return validate_password_strength(value)

    def validate(self, attrs):
        if attrs['password'] != attrs['confirm_password']:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match"})
        return attrs

    def create(self, validated_data):
        """Create new user with the default EMPLOYEE role"""
        validated_data.pop('confirm_password')
        return CustomUser.objects.create_user(
            email=validated_data['email'],
            name=validated_data['name'],
            password=validated_data['password'],
            phone_number=validated_data.get('phone_number', ''),
            role=Role.EMPLOYEE
        )


class UserListSerializer(serializers.ModelSerializer):
    """Serializer for listing users (admin and manager views)"""
    employee_id = serializers.SerializerMethodField()

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'phone_number', 'role', 'employee_id', 'created_at']
        read_only_fields = fields

    def get_employee_id(self, obj):
        employee = getattr(obj, 'employee', None)
        return employee.id if employee else None


class UserProfileSerializer(serializers.ModelSerializer):
    """Serializer for users viewing/updating their own profile"""

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'phone_number', 'role']
        read_only_fields = ['id', 'email', 'role']

    def validate_phone_number(self, value):
        if value:
            phone_regex(value)
        return value


class UserRoleUpdateSerializer(serializers.Serializer):
    """Payload for the administrator-only role change"""
    role = serializers.ChoiceField(
        choices=Role.choices,
        error_messages={'invalid_choice': "Invalid role. Must be ADMIN, MANAGER, or EMPLOYEE"}
    )


class ChangePasswordSerializer(serializers.Serializer):
    """Serializer for changing password"""
    old_password = serializers.CharField(required=True, write_only=True)
    new_password = serializers.CharField(required=True, write_only=True)
    confirm_password = serializers.CharField(required=True, write_only=True)

    def validate_new_password(self, value):
        return validate_password_strength(value)

    def validate(self, attrs):
        if attrs['new_password'] != attrs['confirm_password']:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match"})
        return attrs
