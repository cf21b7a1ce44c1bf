# vehicles/constants.py
from typing import Literal

ITEMS_PER_PAGE = 12
DEFAULT_SORT = "relevance"
MIN_YEAR = 1900

MODEL_MAX_LENGTH = 50
BRAND_MAX_LENGTH = 50
URL_MAX_LENGTH = 2048
TITLE_MAX_LENGTH = 100
PHOTO_CAPTION_MAX_LENGTH = 50
MAX_PHOTOS = 20

# Veículos similares: mesma marca OU carroceria, preço dentro de ±20%
SIMILAR_PRICE_RANGE = (0.8, 1.2)
SIMILAR_LIMIT = 6

SHARE_NETWORKS = ["Facebook", "Twitter", "WhatsApp", "Telegram", "Email"]

Transmission = Literal["Manual", "Automático", "CVT", "Semi-automático", "Automatizado"]
Fuel = Literal["Gasolina", "Etanol", "Flex", "Diesel", "Elétrico", "Híbrido"]
BodyType = Literal["Hatch", "Sedan", "SUV", "Picape", "Minivan", "Conversível", "Cupê", "Wagon"]
VehicleStatus = Literal["Disponível", "Reservado", "Vendido"]
ItemCategory = Literal["Conforto", "Segurança", "Tecnologia", "Performance", "Estética"]
PaymentMethod = Literal["À vista", "Financiamento", "Consórcio", "Leasing"]
SortOption = Literal["relevance", "price_asc", "price_desc", "year_desc", "year_asc", "model_asc", "model_desc"]
