# core/middleware.py
import logging

from .http import error_response

logger = logging.getLogger(__name__)


class JsonExceptionMiddleware:
    """Exceções não tratadas nas rotas /api/ viram 500 no envelope JSON padrão."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not request.path.startswith("/api/"):
            return None
        logger.exception("Erro inesperado em %s %s", request.method, request.path)
        return error_response("Internal server error", "INTERNAL_ERROR", 500)
