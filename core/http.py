# core/http.py
import json
from functools import wraps
from typing import Any, Dict, Iterable, Optional

from django.http import JsonResponse

from .errors import ServiceError, ValidationFailed


def success_response(data: Any, metadata: Optional[Dict] = None, status: int = 200) -> JsonResponse:
    body = {"success": True, "data": data}
    if metadata is not None:
        body["metadata"] = metadata
    return JsonResponse(body, status=status, json_dumps_params={"ensure_ascii": False})


def error_response(message: str, code: str, status: int, details: Any = None) -> JsonResponse:
    error = {"message": message, "code": code}
    if details is not None:
        error["details"] = details
    return JsonResponse(
        {"success": False, "error": error},
        status=status,
        json_dumps_params={"ensure_ascii": False},
    )


def api_view(view):
    """
    Converte ServiceError no envelope de erro.

    Qualquer outra exceção segue adiante e vira 500 no
    JsonExceptionMiddleware.
    """

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except ServiceError as exc:
            return error_response(exc.message, exc.code, exc.status_code, exc.details)

    return wrapper


def parse_json_body(request) -> Any:
    try:
        return json.loads(request.body.decode("utf-8") or "null")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValidationFailed("Payload inválido", [{"campo": "", "mensagem": str(exc), "tipo": "json_invalid"}])


def query_params(request, multi: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Achata a QueryDict em um dict simples.

    Chaves em `multi` viram listas e aceitam tanto `marca=A&marca=B` quanto
    `marca[]=A` (formato do axios). Valores vazios são ignorados.
    """
    multi = set(multi)
    params: Dict[str, Any] = {}
    for key in request.GET.keys():
        name = key[:-2] if key.endswith("[]") else key
        if name in multi:
            values = [v for v in request.GET.getlist(key) if v != ""]
            if values:
                params.setdefault(name, []).extend(values)
        else:
            value = request.GET.get(key)
            if value != "":
                params[name] = value
    return params


def client_ip(request) -> str:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR") or "0.0.0.0"
