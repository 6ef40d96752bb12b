"""
Automatic Pagination for Function-Based Views

Wraps list views so that GET responses returning a list are paginated
and emitted in the standardized response format:
{
    "status": "success",
    "message": "",
    "data": {"count": ..., "pages": ..., "page": ..., "page_size": ..., "results": [...]}
}
"""
import math
from functools import wraps

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardResultsSetPagination(PageNumberPagination):
    """
    Standard pagination class for the project.

    Query Parameters:
    - page: Page number (default: 1)
    - page_size: Items per page (default: settings.PAGE_SIZE, max: settings.MAX_PAGE_SIZE)
    """
    page_size = getattr(settings, 'PAGE_SIZE', 10)
    page_size_query_param = 'page_size'
    max_page_size = getattr(settings, 'MAX_PAGE_SIZE', 100)

    def get_paginated_response(self, data):
        """
        Override to wrap pagination in standard response format.
        """
        count = self.page.paginator.count
        page_size = self.page.paginator.per_page
        return Response({
            'status': 'success',
            'message': '',
            'data': {
                'count': count,
                'pages': math.ceil(count / page_size) if page_size else 0,
                'page': self.page.number,
                'page_size': page_size,
                'next': self.get_next_link(),
                'previous': self.get_previous_link(),
                'results': data
            }
        })


def auto_paginate(view_func):
    """
    Decorator that automatically paginates list responses from function-based views.

    Usage:
        @api_view(['GET', 'POST'])
        @auto_paginate
        def project_list(request):
            ...

    - Only paginates GET requests whose response data is a list
    - Leaves detail views and mutations untouched
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        response = view_func(request, *args, **kwargs)

        if (
            request.method == 'GET' and
            isinstance(response, Response) and
            isinstance(response.data, list)
        ):
            paginator = StandardResultsSetPagination()
            page = paginator.paginate_queryset(response.data, request)

            if page is not None:
                return paginator.get_paginated_response(page)

        return response

    return wrapper
