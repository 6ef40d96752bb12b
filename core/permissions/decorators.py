"""
Permission decorators for function-based views.
"""
from functools import wraps

from rest_framework import status

from hr_project.response_formatter import error_response
from .services import user_can_perform_action


METHOD_ACTIONS = {
    'GET': 'read',
    'HEAD': 'read',
    'OPTIONS': 'read',
    'POST': 'create',
    'PUT': 'update',
    'PATCH': 'update',
    'DELETE': 'delete',
}


def require_permission(resource, action=None):
    """
    Decorator to check the permission matrix for function-based views.

    Args:
        resource: The resource kind (e.g., 'employees')
        action: The action to check. If None, derived from the HTTP method

    Usage:
        @api_view(['GET', 'POST'])
        @require_permission('projects')
        def project_list(request):
            # GET = 'read', POST = 'create'
            ...

        @api_view(['POST'])
        @require_permission('users', 'update')
        def user_role_update(request, user_id):
            ...
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user or not request.user.is_authenticated:
                return error_response(
                    'Authentication required',
                    status_code=status.HTTP_401_UNAUTHORIZED
                )

            determined_action = action or METHOD_ACTIONS.get(request.method, 'read')

            allowed, reason = user_can_perform_action(request.user, resource, determined_action)
            if not allowed:
                return error_response(
                    'Permission denied',
                    data={
                        'detail': reason,
                        'required_permission': {
                            'resource': resource,
                            'action': determined_action
                        }
                    },
                    status_code=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)

        return wrapper
    return decorator
