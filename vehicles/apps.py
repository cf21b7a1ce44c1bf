# vehicles/apps.py
import logging

from django.apps import AppConfig
from django.conf import settings

from core.store import RecordStore

logger = logging.getLogger(__name__)


class VehiclesConfig(AppConfig):
    name = "vehicles"
    verbose_name = "Veículos"

    def ready(self):
        # O store do catálogo pertence ao app: criado vazio na subida do processo.
        self.store = RecordStore()

        seed_count = getattr(settings, "VEHICLE_SEED_COUNT", 0)
        if seed_count > 0:
            from .seeding import seed_catalog
            from .services import get_vehicle_service

            seed_catalog(get_vehicle_service(self.store), seed_count)
            logger.info("Catálogo populado com %s veículos fake", seed_count)
