from datetime import datetime, timezone

from django.test import SimpleTestCase

from core.errors import NotFound, ValidationFailed
from core.store import RecordStore
from vehicles.services import VehicleService
from vehicles.tests.payloads import vehicle_payload


def fixed_clock():
    return datetime(2024, 5, 12, 13, 45, tzinfo=timezone.utc)


class VehicleServiceTests(SimpleTestCase):
    """
    Testes unitários do VehicleService com um store próprio (injetado).

    Objetivo:
    - Validar os campos derivados (título, imagem principal) na criação e na atualização.
    - Validar filtros, ordenações e paginação da listagem.
    - Garantir que erros de validação / not found não alteram o store.
    """

    def setUp(self):
        self.store = RecordStore()
        self.service = VehicleService(self.store, base_url="https://loja.example", clock=fixed_clock)

    # --------------------------------------------------------------------------
    # Criação
    # --------------------------------------------------------------------------

    def test_create_derives_title_and_principal_image(self):
        """Duas fotos, a segunda marcada como principal; título omitido."""
        fotos = [
            {"url": "https://img.example/1.jpg", "principal": False},
            {"url": "https://img.example/2.jpg", "principal": True},
        ]
        vehicle = self.service.create(vehicle_payload(fotos=fotos))

        self.assertEqual(vehicle["id"], 1)
        self.assertEqual(vehicle["id_veiculo"], "1")
        self.assertEqual(vehicle["imagem_principal"], "https://img.example/2.jpg")
        self.assertEqual(vehicle["titulo_anuncio"], "Jeep Compass 2021")
        self.assertEqual(vehicle["dateCreated"], "2024-05-12T13:45:00.000Z")
        self.assertEqual(self.store.get_by_id(1), vehicle)

    def test_create_without_flagged_photo_uses_first(self):
        vehicle = self.service.create(vehicle_payload())
        self.assertEqual(vehicle["imagem_principal"], "https://cdn.c2smotors.com.br/compass/1.jpg")

    def test_create_keeps_explicit_title(self):
        vehicle = self.service.create(vehicle_payload(titulo_anuncio="Compass Limited impecável"))
        self.assertEqual(vehicle["titulo_anuncio"], "Compass Limited impecável")

    def test_create_reports_every_violation_and_does_not_store(self):
        payload = vehicle_payload(preco=-1, portas=7, fotos=[], cambio="Teletransporte")
        payload.pop("marca")

        with self.assertRaises(ValidationFailed) as ctx:
            self.service.create(payload)

        campos = {d["campo"] for d in ctx.exception.details}
        self.assertTrue({"preco", "portas", "fotos", "cambio", "marca"} <= campos)
        self.assertEqual(self.store.count(), 0)

    def test_create_rejects_invalid_photo_url(self):
        with self.assertRaises(ValidationFailed) as ctx:
            self.service.create(vehicle_payload(fotos=[{"url": "not-a-url", "principal": True}]))
        self.assertEqual(ctx.exception.details[0]["campo"], "fotos.0.url")

    def test_create_rejects_numbers_and_flags_sent_as_strings(self):
        """Números e booleanos do corpo não são convertidos a partir de string."""
        cases = {
            "preco": vehicle_payload(preco="50000"),
            "ano_fabricacao": vehicle_payload(ano_fabricacao="2020"),
            "portas": vehicle_payload(portas=True),
            "fotos.0.principal": vehicle_payload(fotos=[{"url": "https://img.example/1.jpg", "principal": "on"}]),
        }
        for campo, payload in cases.items():
            with self.subTest(campo=campo):
                with self.assertRaises(ValidationFailed) as ctx:
                    self.service.create(payload)
                self.assertIn(campo, [d["campo"] for d in ctx.exception.details])

        self.assertEqual(self.store.count(), 0)

    def test_create_rejects_infinite_price(self):
        for preco in (float("inf"), float("nan")):
            with self.subTest(preco=preco):
                with self.assertRaises(ValidationFailed) as ctx:
                    self.service.create(vehicle_payload(preco=preco))
                self.assertEqual(ctx.exception.details[0]["campo"], "preco")

        condicoes = vehicle_payload()["condicoes"]
        condicoes["financiamento"]["taxa_juros"] = float("inf")
        with self.assertRaises(ValidationFailed):
            self.service.create(vehicle_payload(condicoes=condicoes))
        self.assertEqual(self.store.count(), 0)

    def test_whole_prices_are_stored_as_int(self):
        vehicle = self.service.create(vehicle_payload(preco=119000))
        self.assertEqual(vehicle["preco"], 119000)
        self.assertIsInstance(vehicle["preco"], int)
        self.assertIsInstance(vehicle["condicoes"]["financiamento"]["entrada_minima"], int)

        vehicle = self.service.create(vehicle_payload(preco=89900.5))
        self.assertEqual(vehicle["preco"], 89900.5)

    # --------------------------------------------------------------------------
    # Atualização / remoção
    # --------------------------------------------------------------------------

    def test_update_recomputes_title_when_year_changes(self):
        self.service.create(vehicle_payload())
        updated = self.service.update("1", {"ano_fabricacao": 2022})
        self.assertEqual(updated["titulo_anuncio"], "Jeep Compass 2022")

    def test_update_explicit_title_wins_over_recompute(self):
        self.service.create(vehicle_payload())
        updated = self.service.update(1, {"modelo": "Renegade", "titulo_anuncio": "Oferta da semana"})
        self.assertEqual(updated["titulo_anuncio"], "Oferta da semana")
        self.assertEqual(updated["modelo"], "Renegade")

    def test_update_keeps_custom_title_when_unrelated_fields_change(self):
        self.service.create(vehicle_payload(titulo_anuncio="Meu título"))
        updated = self.service.update(1, {"preco": 99000})
        self.assertEqual(updated["titulo_anuncio"], "Meu título")
        self.assertEqual(updated["preco"], 99000)

    def test_update_photos_recomputes_principal_image(self):
        self.service.create(vehicle_payload())
        updated = self.service.update(1, {"fotos": [{"url": "https://img.example/novo.jpg", "principal": True}]})
        self.assertEqual(updated["imagem_principal"], "https://img.example/novo.jpg")

    def test_update_rejects_explicit_null(self):
        """null explícito não apaga campo: é erro de validação."""
        self.service.create(vehicle_payload())
        with self.assertRaises(ValidationFailed):
            self.service.update(1, {"marca": None})
        self.assertEqual(self.store.get_by_id(1)["marca"], "Jeep")

    def test_update_unknown_vehicle_is_not_found_and_store_unchanged(self):
        self.service.create(vehicle_payload())
        before = self.store.get_all()

        with self.assertRaises(NotFound):
            self.service.update(999, {"preco": 1})

        self.assertEqual(self.store.get_all(), before)

    def test_delete(self):
        self.service.create(vehicle_payload())
        self.assertEqual(self.service.delete("1"), {"message": "Deleted successfully"})
        self.assertFalse(self.store.exists(1))
        with self.assertRaises(NotFound):
            self.service.delete("1")

    # --------------------------------------------------------------------------
    # Listagem
    # --------------------------------------------------------------------------

    def test_price_desc_sort(self):
        for preco in (10000, 30000, 20000):
            self.service.create(vehicle_payload(preco=preco))

        page = self.service.list({"sort": "price_desc"})
        self.assertEqual([v["preco"] for v in page.data], [30000, 20000, 10000])

    def test_relevance_is_newest_first(self):
        for _ in range(3):
            self.service.create(vehicle_payload())
        self.assertEqual([v["id"] for v in self.service.list({}).data], [3, 2, 1])

    def test_model_sort_ignores_case(self):
        for modelo in ("onix", "Argo", "Compass"):
            self.service.create(vehicle_payload(modelo=modelo))
        page = self.service.list({"sort": "model_asc"})
        self.assertEqual([v["modelo"] for v in page.data], ["Argo", "Compass", "onix"])

    def test_filters_combine_and_total_counts_matches_before_slicing(self):
        self.service.create(vehicle_payload(marca="Fiat", modelo="Argo", ano_fabricacao=2019, preco=48000, cambio="Manual"))
        self.service.create(vehicle_payload(marca="Jeep", ano_fabricacao=2021, preco=119000))
        self.service.create(vehicle_payload(marca="Jeep", ano_fabricacao=2023, preco=159000))
        self.service.create(vehicle_payload(marca="Honda", modelo="Civic", ano_fabricacao=2020, preco=110000, cambio="CVT"))

        page = self.service.list({
            "marca": ["Jeep", "Honda"],
            "ano_min": "2020",
            "preco_max": "150000",
            "cambio": ["Automático", "CVT"],
            "pageSize": "1",
        })

        self.assertEqual(page.metadata["total"], 2)
        self.assertEqual(page.metadata["totalPages"], 2)
        self.assertTrue(page.metadata["hasNext"])
        self.assertEqual(len(page.data), 1)

    def test_page_beyond_last_is_empty(self):
        for _ in range(4):
            self.service.create(vehicle_payload())

        page = self.service.list({"page": 3, "pageSize": 2})
        self.assertEqual(page.data, [])
        self.assertFalse(page.metadata["hasNext"])
        self.assertTrue(page.metadata["hasPrevious"])

    def test_invalid_list_params(self):
        for params in ({"pageSize": "101"}, {"page": "0"}, {"sort": "random"}, {"cambio": ["Foguete"]}):
            with self.assertRaises(ValidationFailed) as ctx:
                self.service.list(params)
            self.assertEqual(ctx.exception.message, "Invalid parameters")

    def test_filter_options(self):
        self.assertEqual(self.service.filters()["precoMin"], 0)

        self.service.create(vehicle_payload(marca="Jeep", ano_fabricacao=2021, preco=119000))
        self.service.create(vehicle_payload(marca="Fiat", modelo="Argo", ano_fabricacao=2019, preco=48000, cambio="Manual"))

        options = self.service.filters()
        self.assertEqual(options["marcas"], ["Fiat", "Jeep"])
        self.assertEqual(options["modelos"], ["Argo", "Compass"])
        self.assertEqual(options["anos"], [2021, 2019])
        self.assertEqual((options["precoMin"], options["precoMax"]), (48000, 119000))
        self.assertEqual(options["cambios"], ["Automático", "Manual"])

    # --------------------------------------------------------------------------
    # Detalhe
    # --------------------------------------------------------------------------

    def test_detail_is_idempotent(self):
        self.service.create(vehicle_payload())
        self.service.create(vehicle_payload(preco=110000))

        first = self.service.get("1")
        second = self.service.get("1")

        self.assertEqual(first, second)
        self.assertEqual([v["id"] for v in first["veiculos_similares"]], [2])
        self.assertEqual(first["compartilhamento"]["url"], "https://loja.example/veiculo/jeep-compass-2021-1")

    def test_detail_not_found(self):
        with self.assertRaises(NotFound):
            self.service.get("42")
