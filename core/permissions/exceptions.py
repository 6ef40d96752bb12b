"""
Authorization errors.

They extend DRF's exceptions so the project exception handler renders
them with the right status code and the standard error envelope.
Messages are generic and never include record data.
"""
from rest_framework import exceptions


class Unauthenticated(exceptions.NotAuthenticated):
    default_detail = 'Authentication required'
    default_code = 'unauthenticated'


class Forbidden(exceptions.PermissionDenied):
    default_detail = "You don't have permission to perform this action"
    default_code = 'forbidden'


class NotFound(exceptions.NotFound):
    default_detail = 'Record not found'
    default_code = 'not_found'
