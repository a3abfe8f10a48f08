"""Tests for the GraphQL query surface, executed directly against the schema."""

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.graphql.context import GraphQLContext
from app.graphql.schema import schema
from app.services.restaurant_repository import RestaurantRepository
from app.services.seeding import seed_payload

RESTAURANT_FIELDS = """
    id
    name
    menus {
        id
        name
        restaurantId
        menuItems { id name price description menuId }
    }
"""

RESTAURANT_QUERY = f"query Restaurant($id: ID) {{ restaurant(id: $id) {{ {RESTAURANT_FIELDS} }} }}"
RESTAURANTS_QUERY = f"{{ restaurants {{ {RESTAURANT_FIELDS} }} }}"


def _canonical(restaurant: dict) -> dict:
    """Order-independent view of a restaurant payload, prices as Decimal."""
    return {
        "id": restaurant["id"],
        "name": restaurant["name"],
        "menus": sorted(
            (
                {
                    "id": menu["id"],
                    "name": menu["name"],
                    "restaurantId": menu["restaurantId"],
                    "menuItems": sorted(
                        ({**item, "price": Decimal(item["price"])} for item in menu["menuItems"]),
                        key=lambda i: i["id"],
                    ),
                }
                for menu in restaurant["menus"]
            ),
            key=lambda m: m["id"],
        ),
    }


def _expected(seed) -> dict:
    return _canonical(
        {
            "id": str(seed.id),
            "name": seed.name,
            "menus": [
                {
                    "id": str(menu.id),
                    "name": menu.name,
                    "restaurantId": str(seed.id),
                    "menuItems": [
                        {
                            "id": str(item.id),
                            "name": item.name,
                            "price": str(item.price),
                            "description": item.description,
                            "menuId": str(menu.id),
                        }
                        for item in menu.menu_items
                    ],
                }
                for menu in seed.menus
            ],
        }
    )


def _sample(field: str, outcome: str) -> float:
    return REGISTRY.get_sample_value(
        "graphql_resolutions_total", {"field": field, "outcome": outcome}
    ) or 0.0


class TestRestaurantField:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("seed", seed_payload(), ids=lambda s: s.name)
    async def test_returns_seeded_graph(self, context, seed):
        result = await schema.execute(
            RESTAURANT_QUERY, variable_values={"id": str(seed.id)}, context_value=context
        )

        assert result.errors is None
        assert _canonical(result.data["restaurant"]) == _expected(seed)

    @pytest.mark.asyncio
    async def test_unknown_id_is_null_not_error(self, context):
        before = _sample("restaurant", "absent")

        result = await schema.execute(
            RESTAURANT_QUERY, variable_values={"id": str(uuid.uuid4())}, context_value=context
        )

        assert result.errors is None
        assert result.data == {"restaurant": None}
        assert _sample("restaurant", "absent") == before + 1

    @pytest.mark.asyncio
    async def test_omitted_id_is_null(self, context):
        result = await schema.execute("{ restaurant { name } }", context_value=context)

        assert result.errors is None
        assert result.data == {"restaurant": None}

    @pytest.mark.asyncio
    async def test_malformed_variable_is_rejected_before_lookup(self, context):
        context.restaurants = AsyncMock(spec=RestaurantRepository)

        result = await schema.execute(
            RESTAURANT_QUERY, variable_values={"id": "not-a-uuid"}, context_value=context
        )

        assert result.data == {"restaurant": None}
        assert len(result.errors) == 1
        assert result.errors[0].path == ["restaurant"]
        assert "not a UUID" in result.errors[0].message
        context.restaurants.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_literal_leaves_sibling_fields_intact(self, context):
        result = await schema.execute(
            '{ restaurant(id: "bad") { name } restaurants { name } }', context_value=context
        )

        assert result.data["restaurant"] is None
        assert len(result.data["restaurants"]) == len(seed_payload())
        assert [e.path for e in result.errors] == [["restaurant"]]

    @pytest.mark.asyncio
    async def test_both_root_fields_in_one_query(self, context):
        seed = seed_payload()[0]

        result = await schema.execute(
            "query R($id: ID) { restaurant(id: $id) { name } restaurants { id } }",
            variable_values={"id": str(seed.id)},
            context_value=context,
        )

        assert result.errors is None
        assert result.data["restaurant"] == {"name": seed.name}
        assert len(result.data["restaurants"]) == len(seed_payload())

    @pytest.mark.asyncio
    async def test_only_requested_fields_are_returned(self, context):
        seed = seed_payload()[1]

        result = await schema.execute(
            "query R($id: ID) { restaurant(id: $id) { name } }",
            variable_values={"id": str(seed.id)},
            context_value=context,
        )

        assert result.data == {"restaurant": {"name": seed.name}}


class TestRestaurantsField:
    @pytest.mark.asyncio
    async def test_returns_every_seeded_restaurant(self, context):
        result = await schema.execute(RESTAURANTS_QUERY, context_value=context)

        assert result.errors is None
        restaurants = result.data["restaurants"]
        assert len(restaurants) == len(seed_payload())
        by_id = {r["id"]: _canonical(r) for r in restaurants}
        for seed in seed_payload():
            assert by_id[str(seed.id)] == _expected(seed)

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, session_factory):
        async with session_factory() as session:
            context = GraphQLContext(restaurants=RestaurantRepository(session))
            result = await schema.execute("{ restaurants { id } }", context_value=context)

        assert result.errors is None
        assert result.data == {"restaurants": []}

    @pytest.mark.asyncio
    async def test_name_only_selection(self, context):
        result = await schema.execute("{ restaurants { name } }", context_value=context)

        assert sorted(r["name"] for r in result.data["restaurants"]) == sorted(
            s.name for s in seed_payload()
        )
        assert all(set(r) == {"name"} for r in result.data["restaurants"])

    @pytest.mark.asyncio
    async def test_repeated_queries_are_identical(self, context):
        first = await schema.execute(RESTAURANTS_QUERY, context_value=context)
        second = await schema.execute(RESTAURANTS_QUERY, context_value=context)

        assert first.data == second.data


class TestStoreFailure:
    @pytest.fixture
    def broken_context(self):
        session = AsyncMock(spec=AsyncSession)
        session.execute.side_effect = OperationalError(
            "SELECT restaurants", {}, Exception("connection refused")
        )
        return GraphQLContext(restaurants=RestaurantRepository(session))

    @pytest.mark.asyncio
    async def test_restaurant_failure_is_reported_as_error(self, broken_context):
        result = await schema.execute(
            RESTAURANT_QUERY,
            variable_values={"id": str(uuid.uuid4())},
            context_value=broken_context,
        )

        assert result.data == {"restaurant": None}
        assert len(result.errors) == 1
        assert "Restaurant query failed" in result.errors[0].message
        assert result.errors[0].path == ["restaurant"]

    @pytest.mark.asyncio
    async def test_restaurants_failure_nulls_the_response(self, broken_context):
        result = await schema.execute(RESTAURANTS_QUERY, context_value=broken_context)

        assert result.data is None
        assert "Restaurant query failed" in result.errors[0].message
