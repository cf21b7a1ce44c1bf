# vehicles/urls.py
from django.urls import path
from . import views

external_patterns = [
    path("vehicle", views.vehicle_list_view, name="vehicle_list"),
    path("vehicle/filters", views.vehicle_filters_view, name="vehicle_filters"),
    path("vehicle/<str:vehicle_id>", views.vehicle_detail_view, name="vehicle_detail"),
]

internal_patterns = [
    path("vehicle", views.vehicle_create_view, name="vehicle_create"),
    path("vehicle/<str:vehicle_id>", views.vehicle_manage_view, name="vehicle_manage"),
]
