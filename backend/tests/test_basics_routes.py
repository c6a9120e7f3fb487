"""
Roster API - Basics Lessons Endpoint Tests (api1 to api5)
=========================================================

What:  HTTP-level tests for the first five lessons.
How:   HTTPX AsyncClient over ASGITransport (no server process).
"""

import pytest


class TestHelloAndSampleUser:

    @pytest.mark.asyncio
    async def test_hello(self, test_client):
        response = await test_client.get("/api1/hello")
        assert response.status_code == 200
        assert response.text == "Hello, World!"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_sample_user(self, test_client):
        response = await test_client.get("/api2/user")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "John Doe", "email": "john@example.com"}


class TestGreet:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["Name", "name"])
    async def test_greet_accepts_either_key_case(self, test_client, key):
        response = await test_client.post("/api3/greet", json={key: "Alice"})
        assert response.status_code == 200
        assert response.text == "Hello, Alice!"


class TestValidate:

    @pytest.mark.asyncio
    async def test_valid_name(self, test_client):
        response = await test_client.post("/api4/validate", json={"Name": "Alice"})
        assert response.status_code == 200
        assert response.json() == {"statusCode": 200, "message": "Hello, Alice!", "data": "Alice"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"Name": ""}, {"Name": "   "}, {"Name": None}, {}])
    async def test_blank_name(self, test_client, body):
        response = await test_client.post("/api4/validate", json=body)
        assert response.status_code == 400
        assert response.json() == {"statusCode": 400, "message": "Name is required.", "data": None}


class TestUserIdRouteParameter:

    @pytest.mark.asyncio
    async def test_valid_id(self, test_client):
        response = await test_client.get("/api5/user_id/123456")
        assert response.status_code == 200
        assert response.json() == {"userId": 123456, "message": "User with ID 123456 retrieved."}

    @pytest.mark.asyncio
    async def test_zero_is_accepted(self, test_client):
        response = await test_client.get("/api5/user_id/0")
        assert response.status_code == 200
        assert response.json()["userId"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api5/user_id", "/api5/user_id/"])
    async def test_missing_id(self, test_client, path):
        response = await test_client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is required."}

    @pytest.mark.asyncio
    async def test_not_a_number(self, test_client):
        response = await test_client.get("/api5/user_id/123abc")
        assert response.status_code == 400
        assert response.json() == {"error": "User ID must be a valid number."}

    @pytest.mark.asyncio
    async def test_negative(self, test_client):
        response = await test_client.get("/api5/user_id/-123456")
        assert response.status_code == 400
        assert response.json() == {"error": "User ID must be a positive number."}
