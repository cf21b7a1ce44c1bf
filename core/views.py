# core/views.py
from .http import error_response


def not_found_view(request, exception=None):
    return error_response("Route not found", "NOT_FOUND", 404)


def server_error_view(request):
    return error_response("Internal server error", "INTERNAL_ERROR", 500)
