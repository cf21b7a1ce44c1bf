# contacts/services.py
import logging
from datetime import datetime
from operator import itemgetter
from typing import Callable, Dict, Optional

from django.apps import apps
from django.utils import timezone

from core.errors import NotFound
from core.query import Page, apply_filters, at_least, at_most, equals, paginate, sort_records
from core.store import Record, RecordStore
from core.timeutils import isoformat_utc, utc_date_stamp
from core.validation import parse_record_id, validate

from . import constants as c
from .schemas import ContactCreate, ContactListParams, ContactPatch
from .store import ContactStore

logger = logging.getLogger(__name__)


def format_protocol(date_stamp: str, sequence: int) -> str:
    """YYYYMMDD + sequência diária com 5 dígitos (ex.: 2024051200001)."""
    return f"{date_stamp}{sequence:0{c.PROTOCOL_SEQUENCE_DIGITS}d}"


class ContactService:
    """
    Fluxo de leads: criação pública (com protocolo) e gestão interna.

    O protocolo é gerado uma única vez, na criação, e nunca muda.
    Transições de status não têm ordem obrigatória.
    """

    def __init__(self, store: ContactStore, vehicle_store: Optional[RecordStore] = None,
                 clock: Callable[[], datetime] = timezone.now):
        self.store = store
        self.vehicle_store = vehicle_store
        self.clock = clock

    def create(self, payload, ip_address: str) -> Dict:
        data = validate(ContactCreate, payload).model_dump(exclude={"captcha_token"})

        if data["assunto"] == c.FINANCING_SUBJECT:
            data["financiamento"] = True

        self._check_vehicle_reference(data["id_veiculo"])

        moment = self.clock()
        date_stamp = utc_date_stamp(moment)
        now = isoformat_utc(moment)

        record_id = self.store.next_id()
        protocol = format_protocol(date_stamp, self.store.next_protocol_sequence(date_stamp))

        record = {
            "id": record_id,
            "protocolo": protocol,
            **data,
            "status": "Novo",
            "ip_usuario": ip_address,
            "dateCreated": now,
            "dateModified": now,
        }
        self.store.add(record)
        logger.info("Contato criado id=%s protocolo=%s assunto=%r", record_id, protocol, data["assunto"])

        # Envio de e-mail simulado: só registra no log
        logger.info("[EMAIL MOCK] Confirmação para %s, protocolo %s", data["email"], protocol)
        logger.info("[EMAIL MOCK] Aviso à equipe de vendas, protocolo %s", protocol)

        return {
            "protocolo": protocol,
            "mensagem": c.SUCCESS_MESSAGE,
            "prazo_resposta": c.RESPONSE_DEADLINE,
        }

    def list(self, params: Dict) -> Page:
        filters = validate(ContactListParams, params, "Invalid parameters")

        records = apply_filters(self.store.get_all(), [
            equals("status", filters.status),
            equals("id_veiculo", filters.id_veiculo),
            at_least("dateCreated", filters.date_min),
            at_most("dateCreated", filters.date_max),
        ])

        # Sempre do mais novo para o mais antigo; id desempata criações no mesmo milissegundo
        records = sort_records(records, itemgetter("dateCreated", "id"), descending=True)
        return paginate(records, filters.page, filters.pageSize)

    def get(self, raw_id) -> Record:
        record = self.store.get_by_id(parse_record_id(raw_id))
        if record is None:
            raise NotFound("Contact not found")
        return record

    def update(self, raw_id, payload) -> Record:
        record_id = parse_record_id(raw_id)
        changes = validate(ContactPatch, payload).changes()
        if not self.store.exists(record_id):
            raise NotFound("Contact not found")

        changes["dateModified"] = isoformat_utc(self.clock())
        updated = self.store.update(record_id, changes)
        logger.info("Contato atualizado id=%s campos=%s", record_id, sorted(changes))
        return updated

    def _check_vehicle_reference(self, vehicle_ref: str) -> None:
        # O formulário aceita id digitado manualmente: referência desconhecida não bloqueia.
        if self.vehicle_store is None or not vehicle_ref.isdigit():
            return
        if not self.vehicle_store.exists(int(vehicle_ref)):
            logger.warning("Contato referencia veículo inexistente id_veiculo=%s", vehicle_ref)


def get_contact_service() -> ContactService:
    return ContactService(
        apps.get_app_config("contacts").store,
        vehicle_store=apps.get_app_config("vehicles").store,
    )
