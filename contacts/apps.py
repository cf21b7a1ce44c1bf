# contacts/apps.py
from django.apps import AppConfig

from .store import ContactStore


class ContactsConfig(AppConfig):
    name = "contacts"
    verbose_name = "Contatos"

    def ready(self):
        self.store = ContactStore()
