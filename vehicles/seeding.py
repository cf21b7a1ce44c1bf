# vehicles/seeding.py
import random
from typing import Dict, List, Optional

from faker import Faker

BRANDS = [
    ("Volkswagen", ["Gol", "Polo", "T-Cross", "Nivus"]),
    ("Chevrolet", ["Onix", "Tracker", "S10", "Cruze"]),
    ("Fiat", ["Argo", "Cronos", "Toro", "Pulse"]),
    ("Toyota", ["Corolla", "Yaris", "Hilux", "RAV4"]),
    ("Hyundai", ["HB20", "Creta", "i30", "Tucson"]),
    ("Honda", ["Civic", "City", "HR-V", "Fit"]),
    ("Ford", ["Ka", "Ranger", "Fusion", "Territory"]),
]

FUEL = ["Gasolina", "Etanol", "Flex", "Diesel", "Elétrico", "Híbrido"]
TRANS = ["Manual", "Automático", "CVT", "Automatizado"]
BODY = ["Hatch", "Sedan", "SUV", "Picape", "Cupê", "Wagon"]
COLORS = ["Preto", "Branco", "Prata", "Cinza", "Azul", "Vermelho"]
ENGINES = ["1.0", "1.6", "2.0", "1.0 TSI", "1.5 Turbo", "Elétrico 150kW"]

ITEMS = [
    ("Ar-condicionado", "Conforto"),
    ("Bancos de couro", "Conforto"),
    ("Airbag duplo", "Segurança"),
    ("Freios ABS", "Segurança"),
    ("Controle de estabilidade", "Segurança"),
    ("Central multimídia", "Tecnologia"),
    ("Câmera de ré", "Tecnologia"),
    ("Piloto automático", "Tecnologia"),
    ("Rodas de liga leve", "Estética"),
    ("Teto solar", "Estética"),
    ("Modo esportivo", "Performance"),
]

PAYMENTS = ["À vista", "Financiamento", "Consórcio", "Leasing"]


def _items(rng: random.Random, k: int) -> List[Dict]:
    return [{"nome": nome, "categoria": cat} for nome, cat in rng.sample(ITEMS, k)]


def build_vehicle_payload(fake: Faker, rng: random.Random) -> Dict:
    """Um payload de criação válido para a API interna."""
    brand, models = rng.choice(BRANDS)
    model = rng.choice(models)
    year = rng.randint(2005, 2025)
    slug = f"{brand}-{model}-{year}".lower()

    photos = [
        {"url": f"https://picsum.photos/seed/{slug}-{i}/800/600", "principal": False, "legenda": fake.sentence(nb_words=3)[:50]}
        for i in range(rng.randint(1, 5))
    ]
    photos[rng.randrange(len(photos))]["principal"] = True

    payments = rng.sample(PAYMENTS, rng.randint(1, 3))
    conditions = {
        "formas_pagamento": payments,
        "aceita_troca": rng.choice([True, False]),
        "documentacao_necessaria": [{"nome": "CNH"}, {"nome": "Comprovante de residência"}],
        "situacao_documental": {"status": "Regular"},
    }
    if "Financiamento" in payments:
        conditions["financiamento"] = {
            "entrada_minima": round(rng.uniform(5_000, 30_000), 2),
            "taxa_juros": round(rng.uniform(0.9, 2.5), 2),
            "prazo_maximo": rng.choice([24, 36, 48, 60]),
        }

    payload = {
        "preco": round(rng.uniform(35_000, 350_000), 2),
        "status": rng.choice(["Disponível", "Disponível", "Reservado", "Vendido"]),
        "fotos": photos,
        "marca": brand,
        "modelo": model,
        "ano_fabricacao": year,
        "ano_modelo": min(year + rng.randint(0, 1), 2026),
        "quilometragem": rng.randint(0, 200_000),
        "combustivel": rng.choice(FUEL),
        "cambio": rng.choice(TRANS),
        "potencia": f"{rng.randint(75, 250)} cv",
        "cor": rng.choice(COLORS),
        "portas": rng.choice([2, 4, 5]),
        "carroceria": rng.choice(BODY),
        "motor": rng.choice(ENGINES),
        "final_placa": rng.randint(0, 9),
        "itens_serie": _items(rng, 3),
        "opcionais": _items(rng, 2),
        "condicoes": conditions,
    }

    if rng.random() < 0.7:
        payload["historico"] = {
            "procedencia": rng.choice(["Particular", "Concessionária", "Frota"]),
            "proprietarios": rng.randint(1, 4),
            "revisoes": [
                {"data": fake.date_between("-3y", "today").isoformat(), "km": rng.randint(10_000, 60_000),
                 "local": f"Concessionária {brand} {fake.city()}"[:100]},
            ],
        }
    return payload


def build_vehicle_payloads(n: int, seed: Optional[int] = None) -> List[Dict]:
    fake = Faker("pt_BR")
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)
    return [build_vehicle_payload(fake, rng) for _ in range(n)]


def seed_catalog(service, n: int, seed: Optional[int] = None) -> List[Dict]:
    """Cria `n` veículos fake passando pelas mesmas validações da API."""
    return [service.create(payload) for payload in build_vehicle_payloads(n, seed)]
