import json

from django.apps import apps
from django.test import SimpleTestCase
from django.urls import reverse

from contacts.tests.payloads import contact_payload


class ContactAPITests(SimpleTestCase):
    """
    Testes de integração das rotas de contato.

    - POST público (/api/external/contact): 201 + protocolo.
    - Rotas internas de atendimento: listagem paginada, detalhe e atualização.
    """

    def setUp(self):
        self.store = apps.get_app_config("contacts").store
        self.store.clear()
        self.addCleanup(self.store.clear)

    def _submit(self, **overrides):
        return self.client.post(
            reverse("contact_create"),
            data=json.dumps(contact_payload(**overrides)),
            content_type="application/json",
            HTTP_X_FORWARDED_FOR="177.10.20.30, 10.0.0.1",
        )

    def test_submit_returns_201_with_protocol(self):
        resp = self._submit()

        self.assertEqual(resp.status_code, 201)
        data = resp.json()["data"]
        self.assertRegex(data["protocolo"], r"^\d{8}00001$")
        self.assertEqual(data["prazo_resposta"], "24h úteis")
        self.assertEqual(self.store.get_by_id(1)["ip_usuario"], "177.10.20.30")

    def test_financing_subject_without_flag(self):
        payload = contact_payload(assunto="Financiamento")
        payload.pop("financiamento", None)
        resp = self.client.post(reverse("contact_create"), data=json.dumps(payload), content_type="application/json")

        self.assertEqual(resp.status_code, 201)
        self.assertTrue(self.store.get_by_id(1)["financiamento"])

    def test_submit_without_privacy_consent(self):
        resp = self._submit(termos_privacidade=False)

        self.assertEqual(resp.status_code, 400)
        error = resp.json()["error"]
        self.assertEqual(error["code"], "VALIDATION_ERROR")
        self.assertEqual(error["details"][0]["mensagem"], "É necessário aceitar os termos de privacidade")
        self.assertEqual(self.store.count(), 0)

    def test_submit_with_checkbox_value_is_not_consent(self):
        """Formulário enviando "on" (valor padrão de checkbox) não conta como aceite."""
        resp = self._submit(termos_privacidade="on")

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"]["details"][0]["campo"], "termos_privacidade")
        self.assertEqual(self.store.count(), 0)

    def test_internal_list_get_and_update(self):
        for _ in range(3):
            self._submit()

        resp = self.client.get(reverse("contact_list"), {"pageSize": 2})
        body = resp.json()
        self.assertEqual([c["id"] for c in body["data"]], [3, 2])
        self.assertEqual(body["metadata"]["total"], 3)
        self.assertTrue(body["metadata"]["hasNext"])

        url = reverse("contact_manage", args=[2])
        resp = self.client.put(
            url,
            data=json.dumps({"status": "Em atendimento", "consultor_responsavel": "Carlos"}),
            content_type="application/json",
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["consultor_responsavel"], "Carlos")

        detail = self.client.get(url).json()["data"]
        self.assertEqual(detail["status"], "Em atendimento")
        self.assertTrue(detail["protocolo"].endswith("00002"))

    def test_update_with_invalid_status(self):
        self._submit()
        resp = self.client.put(
            reverse("contact_manage", args=[1]),
            data=json.dumps({"status": "Arquivado"}),
            content_type="application/json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.store.get_by_id(1)["status"], "Novo")

    def test_unknown_contact(self):
        resp = self.client.get(reverse("contact_manage", args=[42]))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"]["message"], "Contact not found")

    def test_contacts_have_no_delete(self):
        self._submit()
        resp = self.client.delete(reverse("contact_manage", args=[1]))
        self.assertEqual(resp.status_code, 405)
        self.assertEqual(self.store.count(), 1)
