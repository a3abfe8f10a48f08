from strawberry.fastapi import BaseContext

from app.services.restaurant_repository import RestaurantRepository


class GraphQLContext(BaseContext):
    """Per-request context handed to every resolver.

    Carries the repository explicitly so resolvers never reach for a global
    session.
    """

    def __init__(self, restaurants: RestaurantRepository, request_id: str = "unknown") -> None:
        super().__init__()
        self.restaurants = restaurants
        self.request_id = request_id
