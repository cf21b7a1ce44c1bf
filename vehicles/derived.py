# vehicles/derived.py
"""
Campos derivados do veículo.

Tudo aqui é calculado a partir de outros campos no momento da escrita
(título, imagem principal) ou da leitura do detalhe (similares e
compartilhamento). São funções puras para facilitar os testes.
"""
import re
from typing import Dict, Iterable, List, Optional

from core.store import Record

from .constants import SHARE_NETWORKS, SIMILAR_LIMIT, SIMILAR_PRICE_RANGE

TITLE_FIELDS = frozenset({"marca", "modelo", "ano_fabricacao"})

SIMILAR_FIELDS = (
    "id",
    "titulo_anuncio",
    "preco",
    "imagem_principal",
    "marca",
    "modelo",
    "ano_fabricacao",
    "quilometragem",
)


def build_title(vehicle: Dict) -> str:
    return f"{vehicle['marca']} {vehicle['modelo']} {vehicle['ano_fabricacao']}"


def principal_image(photos: Optional[List[Dict]]) -> str:
    """URL da primeira foto marcada como principal; senão a primeira foto; senão ""."""
    if not photos:
        return ""
    chosen = next((p for p in photos if p.get("principal")), photos[0])
    return chosen["url"]


def similar_vehicles(target: Record, records: Iterable[Record], limit: int = SIMILAR_LIMIT) -> List[Dict]:
    """
    Outros veículos com a mesma marca OU carroceria e preço dentro de
    [0.8x, 1.2x] do alvo (limites inclusivos). Mantém a ordem do store,
    sem ranking adicional.
    """
    low, high = (target["preco"] * factor for factor in SIMILAR_PRICE_RANGE)
    similar = []
    for v in records:
        if v["id"] == target["id"]:
            continue
        if v["marca"] != target["marca"] and v["carroceria"] != target["carroceria"]:
            continue
        if not low <= v["preco"] <= high:
            continue
        similar.append({k: v.get(k) for k in SIMILAR_FIELDS})
        if len(similar) >= limit:
            break
    return similar


def build_slug(vehicle: Record) -> str:
    raw = f"{vehicle['marca']}-{vehicle['modelo']}-{vehicle['ano_fabricacao']}-{vehicle['id']}"
    return re.sub(r"\s+", "-", raw.lower())


def format_price_ptbr(value: float) -> str:
    """
    Número no formato pt-BR: milhar com ponto, decimais com vírgula e sem
    zeros à direita (ex.: 89900 -> "89.900", 1234.5 -> "1.234,5").
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def share_metadata(vehicle: Record, base_url: str) -> Dict:
    slug = build_slug(vehicle)
    return {
        "url": f"{base_url.rstrip('/')}/veiculo/{slug}",
        "texto": (
            f"Confira este {vehicle['marca']} {vehicle['modelo']} {vehicle['ano_fabricacao']} "
            f"por R$ {format_price_ptbr(vehicle['preco'])}"
        ),
        "redes": list(SHARE_NETWORKS),
    }
