# contacts/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator

from core.timeutils import isoformat_utc
from core.validation import PatchModel

from . import constants as c


def _normalize_iso_datetime(value: str) -> str:
    """
    Aceita data-hora ISO-8601 com fuso ("Z" ou offset) e devolve no formato
    gravado em dateCreated, para que a comparação de strings seja correta.
    """
    if "T" not in value:
        raise ValueError("missing time")
    moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        raise ValueError("missing timezone")
    return isoformat_utc(moment)


class ContactCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nome_completo: str = Field(min_length=c.NAME_MIN_LENGTH, max_length=c.NAME_MAX_LENGTH)
    email: EmailStr
    telefone: str = Field(min_length=c.PHONE_MIN_DIGITS, pattern=r"^[0-9()\-\s]+$")
    preferencia_contato: c.ContactPreference
    melhor_horario: c.ContactBestTime = "Qualquer horário"
    id_veiculo: str = Field(min_length=1)
    modelo_veiculo: str = Field(min_length=1)
    assunto: c.ContactSubject
    mensagem: str = Field(min_length=c.MESSAGE_MIN_LENGTH, max_length=c.MESSAGE_MAX_LENGTH)
    financiamento: StrictBool = False
    # Só o booleano true conta como aceite ("on", 1, "1" são rejeitados)
    termos_privacidade: StrictBool
    receber_novidades: StrictBool = False
    # Aceito, mas não verificado nem armazenado
    captcha_token: Optional[str] = None

    @field_validator("nome_completo")
    @classmethod
    def _first_and_last_name(cls, value: str) -> str:
        if len(value.strip().split(" ")) < 2:
            raise ValueError("Deve conter nome e sobrenome")
        return value

    @field_validator("email")
    @classmethod
    def _email_length(cls, value: str) -> str:
        if len(value) > c.EMAIL_MAX_LENGTH:
            raise ValueError(f"E-mail deve ter no máximo {c.EMAIL_MAX_LENGTH} caracteres")
        return value

    @field_validator("termos_privacidade")
    @classmethod
    def _terms_accepted(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("É necessário aceitar os termos de privacidade")
        return value


class ContactPatch(PatchModel):
    status: Optional[c.ContactStatus] = None
    consultor_responsavel: Optional[str] = None
    notas_atendimento: Optional[str] = None


class ContactListParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    page: int = Field(1, ge=1)
    pageSize: int = Field(c.ITEMS_PER_PAGE, ge=1, le=100)
    status: Optional[c.ContactStatus] = None
    date_min: Optional[str] = None
    date_max: Optional[str] = None
    id_veiculo: Optional[str] = None

    @field_validator("date_min", "date_max")
    @classmethod
    def _iso_datetime(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            return _normalize_iso_datetime(value)
        except ValueError:
            raise ValueError("Data inválida, use ISO-8601 com fuso (ex.: 2024-05-12T00:00:00.000Z)") from None
