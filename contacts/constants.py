# contacts/constants.py
from typing import Literal

ITEMS_PER_PAGE = 20
RESPONSE_DEADLINE = "24h úteis"
SUCCESS_MESSAGE = "Solicitação recebida com sucesso"

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
PHONE_MIN_DIGITS = 10
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

PROTOCOL_SEQUENCE_DIGITS = 5

# Assunto que marca automaticamente o interesse em financiamento
FINANCING_SUBJECT = "Financiamento"

ContactStatus = Literal["Novo", "Em atendimento", "Concluído", "Cancelado"]
ContactSubject = Literal[
    "Informações gerais",
    "Agendamento de test drive",
    "Negociação de preço",
    "Financiamento",
    "Outro",
]
ContactPreference = Literal["Telefone", "E-mail", "WhatsApp"]
ContactBestTime = Literal["Manhã", "Tarde", "Noite", "Qualquer horário"]
