import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import AsyncSessionLocal
from app.models import Menu, MenuItem, Restaurant
from app.schemas.seed import RestaurantSeed

logger = logging.getLogger(__name__)

_RESTAURANT_SEED = [
    {
        "id": "5f0c3a52-8d1e-4b7a-9c61-1a2b3c4d5e01",
        "name": "The Golden Fork",
        "menus": [
            {
                "id": "7c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e11",
                "name": "Lunch",
                "menu_items": [
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a21",
                        "name": "Margherita Pizza",
                        "description": "Classic tomato & mozzarella",
                        "price": "12.99",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a22",
                        "name": "Caesar Salad",
                        "description": "Romaine, croutons, parmesan",
                        "price": "8.99",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a23",
                        "name": "Chicken Burger",
                        "description": "Grilled chicken with lettuce & tomato",
                        "price": "10.99",
                    },
                ],
            },
            {
                "id": "7c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e12",
                "name": "Drinks",
                "menu_items": [
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a24",
                        "name": "Coke",
                        "description": "330 ml can",
                        "price": "2.50",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a25",
                        "name": "Water",
                        "description": "500 ml bottle",
                        "price": "1.99",
                    },
                ],
            },
        ],
    },
    {
        "id": "5f0c3a52-8d1e-4b7a-9c61-1a2b3c4d5e02",
        "name": "Sakura Garden",
        "menus": [
            {
                "id": "7c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e13",
                "name": "Dinner",
                "menu_items": [
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a26",
                        "name": "Salmon Nigiri",
                        "description": "Two pieces, fresh salmon on rice",
                        "price": "6.50",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a27",
                        "name": "Miso Soup",
                        "description": "Tofu, wakame, spring onion",
                        "price": "3.25",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a28",
                        "name": "Chicken Teriyaki",
                        "description": "Served with steamed rice",
                        "price": "14.00",
                    },
                ],
            },
            {
                "id": "7c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e14",
                "name": "Desserts",
                "menu_items": [
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a29",
                        "name": "Mochi",
                        "price": "4.75",
                    },
                ],
            },
        ],
    },
    {
        "id": "5f0c3a52-8d1e-4b7a-9c61-1a2b3c4d5e03",
        "name": "Casa Verde",
        "menus": [
            {
                "id": "7c1d2e3f-4a5b-4c6d-8e7f-0a1b2c3d4e15",
                "name": "Tapas",
                "menu_items": [
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a2a",
                        "name": "Patatas Bravas",
                        "description": "Fried potatoes, spicy tomato sauce",
                        "price": "5.50",
                    },
                    {
                        "id": "9e2f3a4b-5c6d-4e7f-8a9b-0c1d2e3f4a2b",
                        "name": "Gambas al Ajillo",
                        "description": "Prawns in garlic and chili oil",
                        "price": "9.90",
                    },
                ],
            },
        ],
    },
]


def seed_payload() -> list[RestaurantSeed]:
    """The sample restaurants inserted on startup, validated."""
    return [RestaurantSeed.model_validate(data) for data in _RESTAURANT_SEED]


def _build_restaurant(seed: RestaurantSeed) -> Restaurant:
    return Restaurant(
        id=seed.id,
        name=seed.name,
        menus=[
            Menu(
                id=menu.id,
                name=menu.name,
                menu_items=[
                    MenuItem(
                        id=item.id,
                        name=item.name,
                        description=item.description,
                        price=item.price,
                    )
                    for item in menu.menu_items
                ],
            )
            for menu in seed.menus
        ],
    )


async def seed_restaurants(
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> int:
    """Populate restaurants if the table is empty. Called once on startup.

    Returns the number of restaurants inserted (0 when data was already present).
    """
    async with session_factory() as db:
        result = await db.execute(select(Restaurant.id).limit(1))
        if result.scalars().first() is not None:
            logger.info("Restaurants already present, skipping seed")
            return 0

        restaurants = [_build_restaurant(seed) for seed in seed_payload()]
        db.add_all(restaurants)
        await db.commit()

        logger.info(
            "Seeded %d restaurants",
            len(restaurants),
            extra={
                "menu_count": sum(len(r.menus) for r in restaurants),
                "item_count": sum(len(m.menu_items) for r in restaurants for m in r.menus),
            },
        )
        return len(restaurants)
