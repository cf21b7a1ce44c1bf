# core/query.py
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from .store import Record

MAX_PAGE_SIZE = 100

Predicate = Callable[[Record], bool]


###############################################################################
#                          Filtro / ordenação / página                         #
###############################################################################
# Mesmo formato para veículos e contatos:
#   1) parte do snapshot completo do store;
#   2) aplica zero ou mais predicados independentes, em sequência;
#   3) aplica exatamente uma ordenação;
#   4) fatia por página (1-based). Página fora do intervalo -> lista vazia.
#
# Os construtores de predicado devolvem None quando o critério não foi
# informado, assim a lista de filtros pode ser montada sem ifs.
###############################################################################


def equals(field_name: str, value: Any) -> Optional[Predicate]:
    if value is None:
        return None
    return lambda record: record.get(field_name) == value


def one_of(field_name: str, values: Optional[Iterable[Any]]) -> Optional[Predicate]:
    allowed = set(values or ())
    if not allowed:
        return None
    return lambda record: record.get(field_name) in allowed


def at_least(field_name: str, bound: Any) -> Optional[Predicate]:
    """Limite inferior inclusivo. Strings ISO-8601 comparam lexicograficamente."""
    if bound is None:
        return None
    return lambda record: record.get(field_name) is not None and record[field_name] >= bound


def at_most(field_name: str, bound: Any) -> Optional[Predicate]:
    if bound is None:
        return None
    return lambda record: record.get(field_name) is not None and record[field_name] <= bound


def apply_filters(records: List[Record], predicates: Iterable[Optional[Predicate]]) -> List[Record]:
    for predicate in predicates:
        if predicate is not None:
            records = [r for r in records if predicate(r)]
    return records


def sort_records(records: List[Record], key: Callable[[Record], Any], descending: bool = False) -> List[Record]:
    # Empates ficam na ordem de inserção (sorted é estável), sem chave secundária.
    return sorted(records, key=key, reverse=descending)


@dataclass
class Page:
    data: List[Record]
    metadata: Dict[str, Any] = field(default_factory=dict)


def paginate(records: List[Record], page: int, page_size: int) -> Page:
    if page < 1:
        raise ValueError("page deve ser >= 1")
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size deve estar entre 1 e {MAX_PAGE_SIZE}")

    total = len(records)
    total_pages = math.ceil(total / page_size)
    offset = (page - 1) * page_size

    return Page(
        data=records[offset:offset + page_size],
        metadata={
            "page": page,
            "pageSize": page_size,
            "total": total,
            "totalPages": total_pages,
            "hasNext": page < total_pages,
            "hasPrevious": page > 1,
        },
    )
