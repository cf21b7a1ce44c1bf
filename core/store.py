# core/store.py
import threading
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


class RecordStore:
    """
    Coleção em memória indexada por id.

    - Os ids vêm de um contador que começa em 1 e nunca reaproveita valores,
      nem depois de um delete (só `clear()` reinicia o contador).
    - Cada operação segura um lock, então alocação de id e escrita no mapa
      são atômicas mesmo com o servidor WSGI rodando em threads.
    - Leituras e escritas devolvem cópias rasas: alterar o dict retornado
      não muda o registro guardado.
    - Nada é persistido: reiniciar o processo perde tudo.
    """

    def __init__(self):
        self._records: Dict[int, Record] = {}
        self._current_id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._current_id += 1
            return self._current_id

    def add(self, record: Record) -> Record:
        with self._lock:
            self._records[record["id"]] = dict(record)
        return dict(record)

    def get_by_id(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._records.get(record_id)
            return dict(record) if record is not None else None

    def get_all(self) -> List[Record]:
        """Snapshot dos registros (ordem de inserção)."""
        with self._lock:
            return [dict(record) for record in self._records.values()]

    def update(self, record_id: int, changes: Record) -> Optional[Record]:
        """Merge raso de `changes` sobre o registro; None se o id não existe."""
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = {**existing, **changes}
            self._records[record_id] = updated
            return dict(updated)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def exists(self, record_id: int) -> bool:
        with self._lock:
            return record_id in self._records

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
            self._current_id = 0
