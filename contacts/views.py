# contacts/views.py
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from core.http import api_view, client_ip, parse_json_body, query_params, success_response

from .services import get_contact_service


# -----------------------------
# API externa (formulário do site)
# -----------------------------
@csrf_exempt
@require_http_methods(["POST"])
@api_view
def contact_create_view(request):
    result = get_contact_service().create(parse_json_body(request), client_ip(request))
    return success_response(result, status=201)


# -----------------------------
# API interna (atendimento)
# -----------------------------
@require_GET
@api_view
def contact_list_view(request):
    page = get_contact_service().list(query_params(request))
    return success_response(page.data, page.metadata)


@csrf_exempt
@require_http_methods(["GET", "PUT"])
@api_view
def contact_manage_view(request, contact_id):
    service = get_contact_service()

    if request.method == "GET":
        return success_response(service.get(contact_id))

    return success_response(service.update(contact_id, parse_json_body(request)))
