import uuid
from decimal import Decimal

import strawberry

from app.models import Menu, MenuItem, Restaurant


@strawberry.type(name="MenuItem", description="A dish or drink offered on a menu.")
class MenuItemType:
    id: uuid.UUID
    name: str
    price: Decimal
    description: str | None
    menu_id: uuid.UUID

    @classmethod
    def from_model(cls, item: MenuItem) -> "MenuItemType":
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            description=item.description,
            menu_id=item.menu_id,
        )


@strawberry.type(name="Menu")
class MenuType:
    id: uuid.UUID
    name: str
    restaurant_id: uuid.UUID
    menu_items: list[MenuItemType]

    @classmethod
    def from_model(cls, menu: Menu) -> "MenuType":
        return cls(
            id=menu.id,
            name=menu.name,
            restaurant_id=menu.restaurant_id,
            menu_items=[MenuItemType.from_model(item) for item in menu.menu_items],
        )


@strawberry.type(name="Restaurant")
class RestaurantType:
    id: uuid.UUID
    name: str
    menus: list[MenuType]

    @classmethod
    def from_model(cls, restaurant: Restaurant) -> "RestaurantType":
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            menus=[MenuType.from_model(menu) for menu in restaurant.menus],
        )
