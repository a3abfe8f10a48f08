import logging
import uuid
from typing import Annotated

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types import RestaurantType
from app.metrics import GRAPHQL_RESOLUTIONS
from app.services.restaurant_repository import MENUS_WITH_ITEMS

logger = logging.getLogger(__name__)


def _coerce_restaurant_id(value: strawberry.ID | None) -> uuid.UUID | None:
    # Raised inside the field so a bad id only nulls this field, not its siblings.
    if value is None:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise GraphQLError(f"Invalid restaurant ID: {value!r} is not a UUID")


@strawberry.type
class Query:
    @strawberry.field(description="A single restaurant, or null when no restaurant has this ID.")
    async def restaurant(
        self,
        info: Info[GraphQLContext, None],
        id: Annotated[
            strawberry.ID | None, strawberry.argument(description="The ID of the restaurant.")
        ] = None,
    ) -> RestaurantType | None:
        restaurant_id = _coerce_restaurant_id(id)
        logger.info(
            "Resolving restaurant",
            extra={"request_id": info.context.request_id, "restaurant_id": str(restaurant_id)},
        )
        restaurant = await info.context.restaurants.find_by_id(
            restaurant_id, load=(MENUS_WITH_ITEMS,)
        )
        GRAPHQL_RESOLUTIONS.labels("restaurant", "found" if restaurant else "absent").inc()
        return RestaurantType.from_model(restaurant) if restaurant else None

    @strawberry.field(description="Every restaurant with its menus and menu items.")
    async def restaurants(self, info: Info[GraphQLContext, None]) -> list[RestaurantType]:
        restaurants = await info.context.restaurants.find_all(load=(MENUS_WITH_ITEMS,))
        logger.info(
            "Resolved restaurants",
            extra={"request_id": info.context.request_id, "count": len(restaurants)},
        )
        GRAPHQL_RESOLUTIONS.labels("restaurants", "listed").inc()
        return [RestaurantType.from_model(r) for r in restaurants]


schema = strawberry.Schema(query=Query)
