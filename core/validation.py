# core/validation.py
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


class PatchModel(BaseModel):
    """
    Base para payloads de atualização parcial.

    Todos os campos são opcionais, mas um `null` explícito é rejeitado:
    campo ausente = "não mexer", nunca "apagar".
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value):
        if value is None:
            raise ValueError("Valor nulo não é permitido")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecordIdParam(BaseModel):
    id: int = Field(gt=0)


def describe_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Uma entrada por restrição violada: campo (caminho com pontos), mensagem e tipo."""
    details = []
    for err in exc.errors():
        message = err["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({
            "campo": ".".join(str(part) for part in err["loc"]),
            "mensagem": message,
            "tipo": err["type"],
        })
    return details


def validate(schema: Type[ModelT], data: Any, message: str = "Validation failed") -> ModelT:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(message, describe_errors(exc)) from exc


def parse_record_id(raw: Any) -> int:
    return validate(RecordIdParam, {"id": raw}, "Invalid ID").id
