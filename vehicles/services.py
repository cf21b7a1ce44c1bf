# vehicles/services.py
import logging
from datetime import datetime
from operator import itemgetter
from typing import Callable, Dict, Optional

from django.apps import apps
from django.conf import settings
from django.utils import timezone

from core.errors import NotFound
from core.query import Page, apply_filters, at_least, at_most, one_of, paginate, sort_records
from core.store import Record, RecordStore
from core.timeutils import isoformat_utc
from core.validation import parse_record_id, validate

from .derived import TITLE_FIELDS, build_title, principal_image, share_metadata, similar_vehicles
from .schemas import VehicleCreate, VehicleListParams, VehiclePatch

logger = logging.getLogger(__name__)

# sort -> (chave, decrescente?)
SORTS = {
    "relevance": (itemgetter("id"), True),  # mais novos primeiro
    "price_asc": (itemgetter("preco"), False),
    "price_desc": (itemgetter("preco"), True),
    "year_asc": (itemgetter("ano_fabricacao"), False),
    "year_desc": (itemgetter("ano_fabricacao"), True),
    "model_asc": (lambda r: r["modelo"].casefold(), False),
    "model_desc": (lambda r: r["modelo"].casefold(), True),
}


class VehicleService:
    """
    Regras de negócio do catálogo: CRUD, listagem com filtros/ordenação/página
    e os campos derivados (título, imagem principal, similares, compartilhamento).

    O store é injetado; em produção vem do VehiclesConfig.
    """

    def __init__(self, store: RecordStore, base_url: str = "http://localhost:3000",
                 clock: Callable[[], datetime] = timezone.now):
        self.store = store
        self.base_url = base_url
        self.clock = clock

    def list(self, params: Dict) -> Page:
        filters = validate(VehicleListParams, params, "Invalid parameters")

        records = apply_filters(self.store.get_all(), [
            one_of("marca", filters.marca),
            one_of("modelo", filters.modelo),
            at_least("ano_fabricacao", filters.ano_min),
            at_most("ano_fabricacao", filters.ano_max),
            at_least("preco", filters.preco_min),
            at_most("preco", filters.preco_max),
            one_of("cambio", filters.cambio),
        ])

        key, descending = SORTS[filters.sort]
        records = sort_records(records, key, descending)
        return paginate(records, filters.page, filters.pageSize)

    def filters(self) -> Dict:
        """Opções de filtro a partir do estoque atual."""
        records = self.store.get_all()
        prices = [r["preco"] for r in records]
        return {
            "marcas": sorted({r["marca"] for r in records}),
            "modelos": sorted({r["modelo"] for r in records}),
            "anos": sorted({r["ano_fabricacao"] for r in records}, reverse=True),
            "precoMin": min(prices) if prices else 0,
            "precoMax": max(prices) if prices else 0,
            "cambios": sorted({r["cambio"] for r in records if r.get("cambio")}),
        }

    def create(self, payload) -> Record:
        data = validate(VehicleCreate, payload).model_dump(exclude_none=True)

        record_id = self.store.next_id()
        now = isoformat_utc(self.clock())
        record = {
            "id": record_id,
            "id_veiculo": str(record_id),
            **data,
            "titulo_anuncio": data.get("titulo_anuncio") or build_title(data),
            "imagem_principal": principal_image(data["fotos"]),
            "dateCreated": now,
            "dateModified": now,
        }
        self.store.add(record)
        logger.info("Veículo criado id=%s titulo=%r", record_id, record["titulo_anuncio"])
        return record

    def get(self, raw_id) -> Dict:
        record = self._get_or_404(parse_record_id(raw_id))
        return {
            **record,
            "veiculos_similares": similar_vehicles(record, self.store.get_all()),
            "compartilhamento": share_metadata(record, self.base_url),
        }

    def update(self, raw_id, payload) -> Record:
        record_id = parse_record_id(raw_id)
        changes = validate(VehiclePatch, payload).changes()
        existing = self._get_or_404(record_id)

        # Título: override explícito > recálculo se marca/modelo/ano mudou > mantém
        title = changes.pop("titulo_anuncio", None)
        if title:
            changes["titulo_anuncio"] = title
        elif TITLE_FIELDS.intersection(changes):
            changes["titulo_anuncio"] = build_title({**existing, **changes})

        if "fotos" in changes:
            changes["imagem_principal"] = principal_image(changes["fotos"])

        changes["dateModified"] = isoformat_utc(self.clock())
        updated = self.store.update(record_id, changes)
        logger.info("Veículo atualizado id=%s campos=%s", record_id, sorted(changes))
        return updated

    def delete(self, raw_id) -> Dict:
        record_id = parse_record_id(raw_id)
        if not self.store.exists(record_id):
            raise NotFound("Vehicle not found")
        self.store.delete(record_id)
        logger.info("Veículo removido id=%s", record_id)
        return {"message": "Deleted successfully"}

    def _get_or_404(self, record_id: int) -> Record:
        record = self.store.get_by_id(record_id)
        if record is None:
            raise NotFound("Vehicle not found")
        return record


def get_vehicle_service(store: Optional[RecordStore] = None) -> VehicleService:
    if store is None:
        store = apps.get_app_config("vehicles").store
    return VehicleService(store, base_url=settings.SITE_BASE_URL)
