# contacts/store.py
from typing import Dict

from core.store import RecordStore


class ContactStore(RecordStore):
    """
    Store de contatos com a contagem diária usada no protocolo.

    `next_protocol_sequence` conta e reserva a sequência sob o lock do store.
    O maior valor já emitido por dia fica guardado, então duas requisições
    simultâneas nunca recebem o mesmo número, mesmo antes do `add`.
    """

    def __init__(self):
        super().__init__()
        self._issued: Dict[str, int] = {}

    def _count_for(self, date_stamp: str) -> int:
        return sum(
            1 for record in self._records.values()
            if record["dateCreated"][:10].replace("-", "") == date_stamp
        )

    def daily_count(self, date_stamp: str) -> int:
        """Quantos contatos foram criados no dia YYYYMMDD."""
        with self._lock:
            return self._count_for(date_stamp)

    def next_protocol_sequence(self, date_stamp: str) -> int:
        with self._lock:
            sequence = max(self._count_for(date_stamp), self._issued.get(date_stamp, 0)) + 1
            self._issued[date_stamp] = sequence
            return sequence

    def clear(self) -> None:
        super().clear()
        with self._lock:
            self._issued.clear()
