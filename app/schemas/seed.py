import uuid
from decimal import Decimal

from pydantic import BaseModel, Field


class MenuItemSeed(BaseModel):
    id: uuid.UUID
    name: str
    price: Decimal = Field(ge=0, decimal_places=2)
    description: str | None = None


class MenuSeed(BaseModel):
    id: uuid.UUID
    name: str
    menu_items: list[MenuItemSeed] = []


class RestaurantSeed(BaseModel):
    id: uuid.UUID
    name: str
    menus: list[MenuSeed] = []

    model_config = {"extra": "forbid"}
