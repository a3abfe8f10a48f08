import uuid

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Menu(Base):
    __tablename__ = "menus"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    restaurant_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("restaurants.id"), nullable=False, index=True
    )

    restaurant: Mapped["Restaurant"] = relationship("Restaurant", back_populates="menus")
    menu_items: Mapped[list["MenuItem"]] = relationship(
        "MenuItem", back_populates="menu", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Menu(id={self.id}, name='{self.name}', restaurant_id={self.restaurant_id})>"
