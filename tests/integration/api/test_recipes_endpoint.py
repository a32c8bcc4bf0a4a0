"""Integration tests for the v2 recipe endpoints.

Tests cover:
- Create/read/update/delete with ownership
- Ingredient resolution through the catalog
- Ratings and the average rating
- Price aggregation and the pricing cache
- Search filters and paging
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import pytest


if TYPE_CHECKING:
    import respx
    from httpx import AsyncClient


pytestmark = pytest.mark.integration

RECIPES_URL = "/v2/recipes"
BOB = {"X-User-ID": "bob"}
CAROL = {"X-User-ID": "carol"}


def _payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "Pancakes",
        "instructions": "Whisk, rest, fry.",
        "difficulty": 2,
        "diet": "VEGETARIAN",
        "course": "BREAKFAST",
        "ingredientIds": ["flour", "milk", "eggs"],
    }
    data.update(overrides)
    return data


async def _create(
    client: AsyncClient,
    headers: dict[str, str] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    response = await client.post(
        RECIPES_URL,
        json=_payload(**overrides),
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateRecipe:
    """Tests for POST /v2/recipes."""

    async def test_create_and_read_back(self, client: AsyncClient) -> None:
        """Should store the recipe and return it from GET unchanged."""
        response = await client.post(RECIPES_URL, json=_payload())

        assert response.status_code == 201
        created = response.json()
        assert response.headers["Location"] == f"{RECIPES_URL}/{created['id']}"
        assert created["userId"] == "alice"
        assert created["averageRating"] == 0
        assert [i["externalId"] for i in created["ingredients"]] == [
            "flour",
            "milk",
            "eggs",
        ]
        assert created["ingredients"][0]["name"] == "Plain Flour"
        assert created["ingredients"][0]["cost"] == 1.2

        fetched = await client.get(response.headers["Location"])

        assert fetched.status_code == 200
        assert fetched.json() == created

    async def test_duplicate_and_unknown_ingredients(self, client: AsyncClient) -> None:
        """Should keep duplicates and drop ids the catalog does not know."""
        created = await _create(client, ingredientIds=["eggs", "saffron", "eggs"])

        assert [i["externalId"] for i in created["ingredients"]] == ["eggs", "eggs"]

    async def test_invalid_payload_is_not_persisted(
        self,
        client: AsyncClient,
        catalog: respx.MockRouter,
    ) -> None:
        """Should answer 422 with field details and store nothing."""
        response = await client.post(RECIPES_URL, json=_payload(difficulty=7))

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert [d["field"] for d in body["details"]] == ["difficulty"]
        assert not catalog["batch_get"].called

        listing = await client.get(RECIPES_URL)
        assert listing.json() == []

    async def test_unknown_course_is_rejected(self, client: AsyncClient) -> None:
        """Should reject an unknown course value."""
        response = await client.post(RECIPES_URL, json=_payload(course="BRUNCH"))

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "course"

    async def test_requires_caller(self, client: AsyncClient) -> None:
        """Should answer 401 without a caller identity."""
        response = await client.post(
            RECIPES_URL,
            json=_payload(),
            headers={"X-User-ID": ""},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"

    async def test_unreachable_catalog_is_503(
        self,
        client: AsyncClient,
        catalog: respx.MockRouter,
    ) -> None:
        """Should answer 503 and store nothing when the catalog is down."""
        catalog["batch_get"].mock(side_effect=httpx.ConnectError("refused"))

        response = await client.post(RECIPES_URL, json=_payload())

        assert response.status_code == 503
        assert response.json()["error"] == "CATALOG_UNAVAILABLE"
        assert (await client.get(RECIPES_URL)).json() == []

    async def test_catalog_error_is_502(
        self,
        client: AsyncClient,
        catalog: respx.MockRouter,
    ) -> None:
        """Should answer 502 when the catalog answers with an error."""
        catalog["batch_get"].mock(
            return_value=httpx.Response(500, json={"message": "catalog failure"})
        )

        response = await client.post(RECIPES_URL, json=_payload())

        assert response.status_code == 502
        assert response.json()["error"] == "CATALOG_ERROR"


class TestReadRecipe:
    """Tests for GET /v2/recipes/{id}."""

    async def test_unknown_recipe_is_404(self, client: AsyncClient) -> None:
        """Should answer 404 for an unknown id."""
        response = await client.get(f"{RECIPES_URL}/999")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    async def test_reads_are_public(self, client: AsyncClient) -> None:
        """Should serve reads without a caller identity."""
        created = await _create(client)

        response = await client.get(
            f"{RECIPES_URL}/{created['id']}",
            headers={"X-User-ID": ""},
        )

        assert response.status_code == 200


class TestUpdateRecipe:
    """Tests for PUT /v2/recipes/{id}."""

    async def test_replaces_fields_and_ingredients(self, client: AsyncClient) -> None:
        """Should swap every field and the whole ingredient list."""
        created = await _create(client)

        response = await client.put(
            f"{RECIPES_URL}/{created['id']}",
            json=_payload(
                name="Butter pancakes",
                difficulty=3,
                diet=None,
                ingredientIds=["butter"],
            ),
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["name"] == "Butter pancakes"
        assert updated["difficulty"] == 3
        assert updated["diet"] is None
        assert [i["externalId"] for i in updated["ingredients"]] == ["butter"]

        fetched = (await client.get(f"{RECIPES_URL}/{created['id']}")).json()
        assert fetched == updated

    async def test_other_user_cannot_update(self, client: AsyncClient) -> None:
        """Should answer 401 to anyone but the owner."""
        created = await _create(client)

        response = await client.put(
            f"{RECIPES_URL}/{created['id']}",
            json=_payload(name="Stolen"),
            headers=BOB,
        )

        assert response.status_code == 401
        fetched = (await client.get(f"{RECIPES_URL}/{created['id']}")).json()
        assert fetched["name"] == "Pancakes"

    async def test_invalid_payload_checked_before_ownership(
        self,
        client: AsyncClient,
    ) -> None:
        """Should answer 422 to a non-owner sending an invalid payload."""
        created = await _create(client)

        response = await client.put(
            f"{RECIPES_URL}/{created['id']}",
            json=_payload(name="", difficulty=9),
            headers=BOB,
        )

        assert response.status_code == 422
        assert [d["field"] for d in response.json()["details"]] == [
            "name",
            "difficulty",
        ]
        fetched = (await client.get(f"{RECIPES_URL}/{created['id']}")).json()
        assert fetched["name"] == "Pancakes"

    async def test_unknown_recipe_is_404(self, client: AsyncClient) -> None:
        """Should answer 404 for an unknown id with a valid payload."""
        response = await client.put(f"{RECIPES_URL}/999", json=_payload())

        assert response.status_code == 404


class TestDeleteRecipe:
    """Tests for DELETE /v2/recipes/{id}."""

    async def test_delete_then_404(self, client: AsyncClient) -> None:
        """Should delete once and answer 404 afterwards."""
        created = await _create(client)
        url = f"{RECIPES_URL}/{created['id']}"

        first = await client.delete(url)
        second = await client.delete(url)

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404
        assert (await client.get(url)).status_code == 404

    async def test_other_user_cannot_delete(self, client: AsyncClient) -> None:
        """Should answer 401 and keep the recipe."""
        created = await _create(client)
        url = f"{RECIPES_URL}/{created['id']}"

        response = await client.delete(url, headers=BOB)

        assert response.status_code == 401
        assert (await client.get(url)).status_code == 200


class TestRating:
    """Tests for PATCH /v2/recipes/{id}/rating."""

    async def test_average_over_users(self, client: AsyncClient) -> None:
        """Should average one rating per user, replacing repeated ratings."""
        created = await _create(client)
        url = f"{RECIPES_URL}/{created['id']}"

        first = await client.patch(f"{url}/rating", json={"rating": 5}, headers=BOB)
        await client.patch(f"{url}/rating", json={"rating": 4}, headers=CAROL)

        assert first.status_code == 204
        assert (await client.get(url)).json()["averageRating"] == 4.5

        await client.patch(f"{url}/rating", json={"rating": 3}, headers=BOB)

        assert (await client.get(url)).json()["averageRating"] == 3.5

    async def test_average_is_rounded(self, client: AsyncClient) -> None:
        """Should round the average to two decimal places."""
        created = await _create(client)
        url = f"{RECIPES_URL}/{created['id']}"

        for user, value in (("alice", 5), ("bob", 4), ("carol", 4)):
            await client.patch(
                f"{url}/rating",
                json={"rating": value},
                headers={"X-User-ID": user},
            )

        assert (await client.get(url)).json()["averageRating"] == 4.33

    async def test_out_of_range_rating(self, client: AsyncClient) -> None:
        """Should answer 422 for a rating outside 1..5."""
        created = await _create(client)

        response = await client.patch(
            f"{RECIPES_URL}/{created['id']}/rating",
            json={"rating": 0},
        )

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "rating"

    async def test_unknown_recipe(self, client: AsyncClient) -> None:
        """Should answer 404 when rating an unknown recipe."""
        response = await client.patch(f"{RECIPES_URL}/999/rating", json={"rating": 3})

        assert response.status_code == 404


class TestPrice:
    """Tests for GET /v2/recipes/{id}/price."""

    async def test_sums_current_costs(self, client: AsyncClient) -> None:
        """Should add the cost of every ingredient occurrence."""
        created = await _create(client, ingredientIds=["flour", "flour", "eggs"])

        response = await client.get(f"{RECIPES_URL}/{created['id']}/price")

        assert response.status_code == 200
        assert response.json() == {"value": 4.8}

    async def test_no_ingredients_cost_zero(
        self,
        client: AsyncClient,
        catalog: respx.MockRouter,
    ) -> None:
        """Should price an empty recipe at zero without the catalog."""
        created = await _create(client, ingredientIds=[])

        response = await client.get(f"{RECIPES_URL}/{created['id']}/price")

        assert response.json() == {"value": 0}
        assert not catalog["batch_get"].called

    async def test_repeated_price_uses_cache(
        self,
        client: AsyncClient,
        catalog: respx.MockRouter,
    ) -> None:
        """Should not ask the catalog again for cached ingredients."""
        created = await _create(client)
        url = f"{RECIPES_URL}/{created['id']}/price"

        await client.get(url)
        calls_after_first_price = catalog["batch_get"].call_count
        await client.get(url)

        assert catalog["batch_get"].call_count == calls_after_first_price

    async def test_unknown_recipe(self, client: AsyncClient) -> None:
        """Should answer 404 for an unknown recipe."""
        response = await client.get(f"{RECIPES_URL}/999/price")

        assert response.status_code == 404


class TestSearchRecipes:
    """Tests for GET /v2/recipes."""

    @pytest.fixture
    async def seeded(self, client: AsyncClient) -> list[dict[str, Any]]:
        """Create three recipes with different owners and difficulties."""
        return [
            await _create(client, name="Toast", difficulty=1, course="BREAKFAST"),
            await _create(client, name="Risotto", difficulty=3, course="MAIN"),
            await _create(
                client,
                headers=BOB,
                name="Souffle",
                difficulty=5,
                course="DESSERT",
                diet=None,
            ),
        ]

    async def test_lists_in_id_order(
        self,
        client: AsyncClient,
        seeded: list[dict[str, Any]],
    ) -> None:
        """Should return all recipes ordered by id."""
        response = await client.get(RECIPES_URL)

        assert [r["id"] for r in response.json()] == [r["id"] for r in seeded]

    async def test_difficulty_range_is_inclusive(
        self,
        client: AsyncClient,
        seeded: list[dict[str, Any]],
    ) -> None:
        """Should include recipes on both bounds."""
        response = await client.get(
            RECIPES_URL,
            params={"difficultyFrom": 3, "difficultyTo": 5},
        )

        assert [r["name"] for r in response.json()] == ["Risotto", "Souffle"]

    async def test_filters_combine(
        self,
        client: AsyncClient,
        seeded: list[dict[str, Any]],
    ) -> None:
        """Should AND course, diet and owner filters."""
        by_owner = await client.get(RECIPES_URL, params={"userId": "bob"})
        by_course = await client.get(
            RECIPES_URL,
            params={"course": "MAIN", "diet": "VEGETARIAN"},
        )

        assert [r["name"] for r in by_owner.json()] == ["Souffle"]
        assert [r["name"] for r in by_course.json()] == ["Risotto"]

    async def test_paging(
        self,
        client: AsyncClient,
        seeded: list[dict[str, Any]],
    ) -> None:
        """Should skip whole pages."""
        page_two = await client.get(RECIPES_URL, params={"page": 2, "pageSize": 2})
        page_three = await client.get(RECIPES_URL, params={"page": 3, "pageSize": 2})

        assert [r["name"] for r in page_two.json()] == ["Souffle"]
        assert page_three.json() == []

    async def test_invalid_page_size(self, client: AsyncClient) -> None:
        """Should answer 422 for pageSize outside the allowed range."""
        response = await client.get(RECIPES_URL, params={"pageSize": 0})

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "pageSize"

    async def test_unknown_course_filter(self, client: AsyncClient) -> None:
        """Should answer 422 for an unknown course filter."""
        response = await client.get(RECIPES_URL, params={"course": "BRUNCH"})

        assert response.status_code == 422
