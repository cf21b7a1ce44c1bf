# contacts/urls.py
from django.urls import path
from . import views

external_patterns = [
    path("contact", views.contact_create_view, name="contact_create"),
]

internal_patterns = [
    path("contact", views.contact_list_view, name="contact_list"),
    path("contact/<str:contact_id>", views.contact_manage_view, name="contact_manage"),
]
