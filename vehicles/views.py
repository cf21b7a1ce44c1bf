# vehicles/views.py
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from core.http import api_view, parse_json_body, query_params, success_response

from .services import get_vehicle_service

LIST_MULTI_PARAMS = ("marca", "modelo", "cambio")


# -----------------------------
# API externa (pública)
# -----------------------------
@require_GET
@api_view
def vehicle_list_view(request):
    page = get_vehicle_service().list(query_params(request, LIST_MULTI_PARAMS))
    return success_response(page.data, page.metadata)


@require_GET
@api_view
def vehicle_filters_view(request):
    return success_response(get_vehicle_service().filters())


@require_GET
@api_view
def vehicle_detail_view(request, vehicle_id):
    return success_response(get_vehicle_service().get(vehicle_id))


# -----------------------------
# API interna (administração)
# -----------------------------
@csrf_exempt
@require_http_methods(["POST"])
@api_view
def vehicle_create_view(request):
    vehicle = get_vehicle_service().create(parse_json_body(request))
    return success_response(vehicle, status=201)


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
@api_view
def vehicle_manage_view(request, vehicle_id):
    service = get_vehicle_service()

    if request.method == "GET":
        return success_response(service.get(vehicle_id))

    if request.method == "PUT":
        return success_response(service.update(vehicle_id, parse_json_body(request)))

    return success_response(service.delete(vehicle_id))
