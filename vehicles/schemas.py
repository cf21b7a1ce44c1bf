# vehicles/schemas.py
from typing import Annotated, List, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StrictBool, StrictInt, field_validator

from core.validation import PatchModel

from . import constants as c


def _whole_to_int(value: float) -> Union[int, float]:
    # 119000.0 é gravado e devolvido como 119000
    return int(value) if value.is_integer() else value


# Números do corpo: sem coerção de string/bool e sem inf/nan (JSON inválido na resposta)
Amount = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False), PlainSerializer(_whole_to_int)]


# -----------------------------
# Sub-estruturas
# -----------------------------
class Photo(BaseModel):
    url: str = Field(max_length=c.URL_MAX_LENGTH)
    principal: StrictBool
    legenda: Optional[str] = Field(None, max_length=c.PHOTO_CAPTION_MAX_LENGTH)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("URL inválida")
        return value


class Item(BaseModel):
    nome: str = Field(min_length=1, max_length=100)
    categoria: c.ItemCategory


class Revision(BaseModel):
    data: str
    km: StrictInt = Field(ge=0)
    local: str = Field(max_length=100)


class Claim(BaseModel):
    data: str
    tipo: str = Field(max_length=50)
    descricao: str = Field(max_length=200)


class TechnicalReport(BaseModel):
    data: str
    resultado: str = Field(max_length=50)


class History(BaseModel):
    procedencia: str = Field(min_length=1, max_length=50)
    proprietarios: StrictInt = Field(ge=0)
    garantia: Optional[str] = Field(None, max_length=100)
    revisoes: Optional[List[Revision]] = None
    sinistros: Optional[List[Claim]] = None
    laudo_tecnico: Optional[TechnicalReport] = None


class FinancingTerms(BaseModel):
    entrada_minima: Amount
    taxa_juros: Amount
    prazo_maximo: StrictInt = Field(gt=0)


class RequiredDocument(BaseModel):
    nome: str = Field(min_length=1, max_length=100)
    obs: Optional[str] = Field(None, max_length=200)


class DocumentStatus(BaseModel):
    status: str = Field(min_length=1, max_length=50)
    pendencias: Optional[str] = Field(None, max_length=200)
    obs: Optional[str] = Field(None, max_length=200)


class SalesConditions(BaseModel):
    formas_pagamento: List[c.PaymentMethod] = Field(min_length=1)
    financiamento: Optional[FinancingTerms] = None
    aceita_troca: StrictBool
    observacoes_venda: Optional[str] = Field(None, max_length=500)
    documentacao_necessaria: List[RequiredDocument]
    situacao_documental: DocumentStatus


# -----------------------------
# Campos do veículo (compartilhados entre criação e atualização)
# -----------------------------
Title = Annotated[str, Field(max_length=c.TITLE_MAX_LENGTH)]
Price = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False), PlainSerializer(_whole_to_int)]
Photos = Annotated[List[Photo], Field(min_length=1, max_length=c.MAX_PHOTOS)]
Brand = Annotated[str, Field(min_length=1, max_length=c.BRAND_MAX_LENGTH)]
Model = Annotated[str, Field(min_length=1, max_length=c.MODEL_MAX_LENGTH)]
Year = Annotated[int, Field(strict=True, ge=c.MIN_YEAR)]
Mileage = Annotated[int, Field(strict=True, ge=0)]
Power = Annotated[str, Field(max_length=20)]
Color = Annotated[str, Field(max_length=30)]
Doors = Annotated[int, Field(strict=True, ge=2, le=5)]
Engine = Annotated[str, Field(max_length=20)]
PlateDigit = Annotated[int, Field(strict=True, ge=0, le=9)]


class VehicleCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    titulo_anuncio: Optional[Title] = None
    preco: Price
    status: c.VehicleStatus
    fotos: Photos
    marca: Brand
    modelo: Model
    ano_fabricacao: Year
    ano_modelo: Year
    quilometragem: Mileage
    combustivel: c.Fuel
    cambio: c.Transmission
    potencia: Power
    cor: Color
    portas: Doors
    carroceria: c.BodyType
    motor: Engine
    final_placa: PlateDigit
    itens_serie: List[Item]
    opcionais: List[Item]
    historico: Optional[History] = None
    condicoes: SalesConditions


class VehiclePatch(PatchModel):
    titulo_anuncio: Optional[Title] = None
    preco: Optional[Price] = None
    status: Optional[c.VehicleStatus] = None
    fotos: Optional[Photos] = None
    marca: Optional[Brand] = None
    modelo: Optional[Model] = None
    ano_fabricacao: Optional[Year] = None
    ano_modelo: Optional[Year] = None
    quilometragem: Optional[Mileage] = None
    combustivel: Optional[c.Fuel] = None
    cambio: Optional[c.Transmission] = None
    potencia: Optional[Power] = None
    cor: Optional[Color] = None
    portas: Optional[Doors] = None
    carroceria: Optional[c.BodyType] = None
    motor: Optional[Engine] = None
    final_placa: Optional[PlateDigit] = None
    itens_serie: Optional[List[Item]] = None
    opcionais: Optional[List[Item]] = None
    historico: Optional[History] = None
    condicoes: Optional[SalesConditions] = None


class VehicleListParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    page: int = Field(1, ge=1)
    pageSize: int = Field(c.ITEMS_PER_PAGE, ge=1, le=100)
    sort: c.SortOption = c.DEFAULT_SORT
    marca: List[str] = []
    modelo: List[str] = []
    ano_min: Optional[int] = None
    ano_max: Optional[int] = None
    preco_min: Optional[float] = Field(None, allow_inf_nan=False)
    preco_max: Optional[float] = Field(None, allow_inf_nan=False)
    cambio: List[c.Transmission] = []
