# dealership/urls.py
from django.urls import path, include

from vehicles import urls as vehicle_urls
from contacts import urls as contact_urls

external_patterns = vehicle_urls.external_patterns + contact_urls.external_patterns
internal_patterns = vehicle_urls.internal_patterns + contact_urls.internal_patterns

urlpatterns = [
    path("api/external/", include(external_patterns)),
    path("api/internal/", include(internal_patterns)),
]

handler404 = "core.views.not_found_view"
handler500 = "core.views.server_error_view"
