# Import all models here so SQLAlchemy registers them with Base.metadata
from app.models.menu import Menu
from app.models.menu_item import MenuItem
from app.models.restaurant import Restaurant

__all__ = [
    "Menu",
    "MenuItem",
    "Restaurant",
]
