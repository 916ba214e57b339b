"""End-to-end bill splitting workflows"""

from decimal import Decimal

import pytest
from httpx import AsyncClient


async def register_and_login(client: AsyncClient, username: str) -> dict:
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "SecurePass123!",
        },
    )
    assert response.status_code == 201

    login = await client.post(
        "/api/v1/auth/login",
        data={"username": username, "password": "SecurePass123!"},
    )
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.json()['access_token']}"}


class TestRestaurantNight:
    """A full evening, from an empty bill to a shared link"""

    @pytest.mark.asyncio
    async def test_split_edit_and_share(self, client: AsyncClient):
        """
        Scenario:
        - Alice registers and opens a bill for three friends
        - Noodles are shared by everyone, Alice has a dessert of her own
        - Tax is 10%, then the dessert turns out to be two portions
        - Every summary adds up to the bill total
        - A share link shows the same numbers without logging in
        - Alice saves the bill and finds it in her history
        """
        headers = await register_and_login(client, "alice")

        # Step 1: Open a bill
        bill = (await client.post("/api/v1/bills", json={"title": "Noodle night"}, headers=headers)).json()
        url = f"/api/v1/bills/{bill['id']}"

        # Step 2: Add the table
        people = (
            await client.post(
                f"{url}/participants", json={"names": ["Alice", "Ben", "Chloe"]}, headers=headers
            )
        ).json()["participants"]
        alice, ben, chloe = (p["id"] for p in people)

        # Step 3: Order
        await client.post(f"{url}/items", json={"name": "Noodles", "price": "45"}, headers=headers)
        dessert = (
            await client.post(f"{url}/items", json={"name": "Mochi", "price": "8"}, headers=headers)
        ).json()
        await client.put(
            f"{url}/items/{dessert['id']}/splits",
            json={"weights": {str(alice): 1}},
            headers=headers,
        )
        await client.put(f"{url}/adjustments", json={"tax_percent": "10"}, headers=headers)

        summary = (await client.get(f"{url}/summary", headers=headers)).json()
        totals = {int(k): Decimal(v) for k, v in summary["totals"].items()}
        assert Decimal(summary["total"]) == Decimal("58.30")
        assert totals == {alice: Decimal("25.30"), ben: Decimal("16.50"), chloe: Decimal("16.50")}

        # Step 4: Two portions of dessert
        await client.patch(f"{url}/items/{dessert['id']}", json={"quantity": 2}, headers=headers)

        summary = (await client.get(f"{url}/summary", headers=headers)).json()
        totals = {int(k): Decimal(v) for k, v in summary["totals"].items()}
        assert Decimal(summary["total"]) == Decimal("67.10")
        assert totals[alice] == Decimal("34.10")
        assert sum(totals.values()) == Decimal(summary["total"])

        # Step 5: Share
        link = (await client.post(f"{url}/share", headers=headers)).json()
        shared = (await client.get(link["path"])).json()
        assert shared["totals"] == summary["totals"]

        # Step 6: Save and find it in history
        saved = await client.post(f"{url}/save", headers=headers)
        assert saved.json()["saved_at"] is not None

        history = (await client.get("/api/v1/bills", headers=headers)).json()
        assert history["items"][0]["title"] == "Noodle night"
        assert Decimal(history["items"][0]["total"]) == Decimal("67.10")

    @pytest.mark.asyncio
    async def test_bills_are_private(self, client: AsyncClient):
        """
        Scenario:
        - Alice and Bob each register
        - Bob cannot read, change or delete Alice's bill
        - Bob's history is empty
        """
        alice_headers = await register_and_login(client, "alice")
        bob_headers = await register_and_login(client, "bob")

        bill = (await client.post("/api/v1/bills", json={}, headers=alice_headers)).json()
        url = f"/api/v1/bills/{bill['id']}"

        assert (await client.get(url, headers=bob_headers)).status_code == 403
        assert (
            await client.put(f"{url}/adjustments", json={"tip_amount": "5"}, headers=bob_headers)
        ).status_code == 403
        assert (await client.delete(url, headers=bob_headers)).status_code == 403

        history = (await client.get("/api/v1/bills", headers=bob_headers)).json()
        assert history["items"] == []

        # Alice's bill is untouched
        detail = (await client.get(url, headers=alice_headers)).json()
        assert detail["tip_amount"] is None

    @pytest.mark.asyncio
    async def test_start_over(self, client: AsyncClient):
        """
        Scenario:
        - A bill with people, items and a big discount is reset
        - The summary is back to zero and the bill keeps its title
        """
        headers = await register_and_login(client, "alice")
        bill = (await client.post("/api/v1/bills", json={"title": "Brunch"}, headers=headers)).json()
        url = f"/api/v1/bills/{bill['id']}"

        await client.post(f"{url}/participants", json={"names": ["A", "B"]}, headers=headers)
        await client.post(f"{url}/items", json={"name": "Eggs", "price": "20"}, headers=headers)
        await client.put(f"{url}/adjustments", json={"discount_amount": "50"}, headers=headers)

        summary = (await client.get(f"{url}/summary", headers=headers)).json()
        assert Decimal(summary["discount"]) == Decimal("20")
        assert Decimal(summary["total"]) == Decimal("0")

        reset = (await client.post(f"{url}/reset", headers=headers)).json()
        assert reset["title"] == "Brunch"
        assert reset["discount_amount"] is None

        summary = (await client.get(f"{url}/summary", headers=headers)).json()
        assert Decimal(summary["total"]) == Decimal("0")
        assert summary["totals"] == {}
