from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from app.config import settings
from app.database import get_db
from app.graphql.context import GraphQLContext
from app.graphql.schema import schema
from app.services.restaurant_repository import RestaurantRepository


async def get_context(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> GraphQLContext:
    return GraphQLContext(
        restaurants=RestaurantRepository(db),
        request_id=getattr(request.state, "request_id", "unknown"),
    )


router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if settings.graphiql_enabled else None,
)
