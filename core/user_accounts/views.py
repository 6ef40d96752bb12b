"""
API Views for User Account management and authentication.
Provides REST API endpoints for registration, login, profile management and user administration.
"""
import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from django.contrib.auth import authenticate

from core.permissions.decorators import require_permission
from core.permissions.roles import get_role_permissions
from hr_project.pagination import auto_paginate
from .serializers import (
    UserRegistrationSerializer,
    UserProfileSerializer,
    ChangePasswordSerializer,
    UserListSerializer,
    UserRoleUpdateSerializer,
)
from .services import UserService

logger = logging.getLogger(__name__)


def _token_payload(user):
    refresh = RefreshToken.for_user(user)
    return {
        'user': {
            'id': user.id,
            'email': user.email,
            'name': user.name,
            'role': user.role
        },
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token)
        }
    }


# ============================================================================
# Public Authentication Views
# ============================================================================

@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """
    Public endpoint for user registration.
    Creates a new EMPLOYEE account and returns JWT tokens.

    POST /auth/register/
    - Request body: { "email", "name", "phone_number"?, "password", "confirm_password" }
    """
    serializer = UserRegistrationSerializer(data=request.data)

    if serializer.is_valid():
        user = serializer.save()
        logger.info("User %s registered", user.pk)
        return Response({
            'message': 'User registered successfully',
            **_token_payload(user)
        }, status=status.HTTP_201_CREATED)

    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Public endpoint for user login.

    POST /auth/login/
    - Request body: { "email": "...", "password": "..." }
    - Returns: User data and JWT tokens
    """
    email = request.data.get('email')
    password = request.data.get('password')

    if not email or not password:
        return Response(
            {'error': 'Please provide both email and password'},
            status=status.HTTP_400_BAD_REQUEST
        )

    user = authenticate(request, username=email, password=password)

    if user is None:
        logger.info("Failed login attempt for %s", email)
        return Response(
            {'error': 'Invalid credentials'},
            status=status.HTTP_401_UNAUTHORIZED
        )

    return Response({
        'message': 'Login successful',
        **_token_payload(user)
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """
    Blacklists the refresh token.

    POST /auth/logout/
    - Request body: { "refresh": "..." }
    """
    refresh_token = request.data.get('refresh')
    if not refresh_token:
        return Response(
            {'error': 'Refresh token is required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    try:
        RefreshToken(refresh_token).blacklist()
    except TokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logout successful'}, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    """
    POST /auth/change-password/
    - Request body: { "old_password", "new_password", "confirm_password" }
    """
    serializer = ChangePasswordSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    user = request.user

    if not user.check_password(serializer.validated_data['old_password']):
        return Response(
            {'error': 'Old password is incorrect'},
            status=status.HTTP_400_BAD_REQUEST
        )

    user.set_password(serializer.validated_data['new_password'])
    user.save()

    return Response({'message': 'Password changed successfully'}, status=status.HTTP_200_OK)


# ============================================================================
# User Profile Views (Self-Management)
# ============================================================================

@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def user_profile(request):
    """
    View or update own profile (name, phone_number).
    Email and role cannot be changed here.

    GET/PUT/PATCH /accounts/profile/
    """
    user = request.user

    if request.method == 'GET':
        return Response(UserProfileSerializer(user).data, status=status.HTTP_200_OK)

    partial = request.method == 'PATCH'
    serializer = UserProfileSerializer(user, data=request.data, partial=partial)

    if serializer.is_valid():
        serializer.save()
        return Response({
            'message': 'Profile updated successfully',
            'user': serializer.data
        }, status=status.HTTP_200_OK)

    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_permissions(request):
    """
    Role and allowed actions per resource for the current user.

    GET /accounts/permissions/
    """
    return Response({
        'user_id': request.user.id,
        'role': request.user.role,
        'permissions': get_role_permissions(request.user.role)
    }, status=status.HTTP_200_OK)


# ============================================================================
# User Administration Views
# ============================================================================

@api_view(['GET'])
@require_permission('users')
@auto_paginate
def user_list(request):
    """
    GET /accounts/users/?search=...
    """
    users = UserService.list_users(request.user, search=request.query_params.get('search'))
    return Response(UserListSerializer(users, many=True).data, status=status.HTTP_200_OK)


@api_view(['GET', 'DELETE'])
@require_permission('users')
def user_detail(request, user_id):
    """
    GET /accounts/users/<id>/
    DELETE /accounts/users/<id>/
    """
    if request.method == 'GET':
        user = UserService.get_user(request.user, user_id)
        return Response(UserListSerializer(user).data, status=status.HTTP_200_OK)

    UserService.delete_user(request.user, user_id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['POST', 'PATCH'])
@require_permission('users', 'update')
def user_role_update(request, user_id):
    """
    Administrator-only role change.

    POST /accounts/users/<id>/role/
    - Request body: { "role": "ADMIN" | "MANAGER" | "EMPLOYEE" }
    """
    serializer = UserRoleUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    user = UserService.update_role(request.user, user_id, serializer.validated_data['role'])
    return Response({
        'message': 'User role updated successfully',
        'user': UserListSerializer(user).data
    }, status=status.HTTP_200_OK)
