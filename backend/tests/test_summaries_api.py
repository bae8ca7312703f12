"""
Standup Notes Backend - /summaries Endpoint Tests
=================================================

What we test:
    ✅ Summary CRUD mirrors notes (201 / 204 regardless of match)
    ✅ Standup: 400 without date, no-notes message, generated + saved
    ✅ Standup: provider failure → 500 with details
    ✅ GET /health reports store and provider status
"""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from standup_notes.exceptions import LLMServiceError


class TestSummariesCrud:

    @pytest.mark.asyncio
    async def test_create_and_list(self, test_client):
        response = await test_client.post(
            "/summaries",
            json={"summary_date": "2024-01-05", "content": "did things"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["summary_date"] == "2024-01-05"
        assert body["content"] == "did things"

        listed = (await test_client.get("/summaries")).json()
        assert listed == [body]

    @pytest.mark.asyncio
    async def test_update_overwrites_both_fields(self, test_client):
        created = (
            await test_client.post("/summaries", json={"summary_date": "2024-01-05", "content": "a"})
        ).json()

        response = await test_client.put(
            f"/summaries/{created['id']}",
            json={"summary_date": "2024-01-06", "content": "b"},
        )

        assert response.status_code == 204
        listed = (await test_client.get("/summaries")).json()
        assert listed == [{"id": created["id"], "summary_date": "2024-01-06", "content": "b"}]

    @pytest.mark.asyncio
    async def test_numeric_fields_stored_as_text(self, test_client):
        response = await test_client.post(
            "/summaries", json={"summary_date": 20240105, "content": 42}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["summary_date"] == "20240105"
        assert body["content"] == "42"

    @pytest.mark.asyncio
    async def test_missing_id_is_success(self, test_client):
        put = await test_client.put("/summaries/424242", json={"summary_date": "x", "content": "y"})
        delete = await test_client.delete("/summaries/424242")

        assert put.status_code == 204
        assert delete.status_code == 204

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        created = (
            await test_client.post("/summaries", json={"summary_date": "2024-01-05", "content": "a"})
        ).json()

        assert (await test_client.delete(f"/summaries/{created['id']}")).status_code == 204
        assert (await test_client.get("/summaries")).json() == []


class TestStandupSummary:

    @pytest.mark.asyncio
    async def test_missing_date_is_400(self, test_client, mock_completion):
        response = await test_client.post("/summaries/standup-summary")

        assert response.status_code == 400
        assert response.json()["error"] == "Date is required"
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_date_is_400(self, test_client, mock_completion):
        response = await test_client.post("/summaries/standup-summary", params={"date": "soon"})

        assert response.status_code == 400
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_notes(self, test_client, mock_completion):
        response = await test_client.post(
            "/summaries/standup-summary", params={"date": "2024-01-05"}
        )

        assert response.status_code == 200
        assert response.json() == {"summary": "No notes found for the specified date."}
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_offset_date_uses_utc_day(self, test_client, add_note, mock_completion):
        # 2024-01-05T23:30-05:00 is Jan 6 in UTC: the window is Jan 7 to Jan 9
        await add_note("only on the 6th", datetime(2024, 1, 6, 9, 0))

        response = await test_client.post(
            "/summaries/standup-summary", params={"date": "2024-01-05T23:30:00-05:00"}
        )

        assert response.status_code == 200
        assert response.json() == {"summary": "No notes found for the specified date."}
        mock_completion.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generates_and_saves(self, test_client, add_note, mock_completion):
        await add_note("fixed bug X", datetime(2024, 1, 6, 9, 0))
        await add_note("blocked on review", datetime(2024, 1, 7, 11, 0))

        response = await test_client.post(
            "/summaries/standup-summary", params={"date": "2024-01-05"}
        )

        assert response.status_code == 200
        body = response.json()
        generated = mock_completion.complete.return_value
        assert body["summary"] == generated
        assert body["savedSummary"]["summary_date"] == "2024-01-05"
        assert body["savedSummary"]["content"] == generated
        assert body["savedSummary"]["id"] is not None

        prompt = mock_completion.complete.await_args.args[0][1]["content"]
        assert "fixed bug X\n\nblocked on review" in prompt

        listed = (await test_client.get("/summaries")).json()
        assert [s["id"] for s in listed] == [body["savedSummary"]["id"]]

    @pytest.mark.asyncio
    async def test_save_failure_returns_null(self, test_client, db_engine, add_note):
        from standup_notes.models import Summary

        await add_note("fixed bug X", datetime(2024, 1, 6, 9, 0))
        async with db_engine.begin() as conn:
            await conn.run_sync(Summary.__table__.drop)

        response = await test_client.post(
            "/summaries/standup-summary", params={"date": "2024-01-05"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]
        assert "savedSummary" in body
        assert body["savedSummary"] is None

    @pytest.mark.asyncio
    async def test_provider_failure_is_500_with_details(self, test_client, add_note, mock_completion):
        await add_note("fixed bug X", datetime(2024, 1, 6, 9, 0))
        mock_completion.complete = AsyncMock(
            side_effect=LLMServiceError(
                message="quota exceeded",
                details={"type": "ResourceExhausted"},
            )
        )

        response = await test_client.post(
            "/summaries/standup-summary", params={"date": "2024-01-05"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "quota exceeded"
        assert body["details"]["type"] == "ResourceExhausted"
        assert (await test_client.get("/summaries")).json() == []


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["completion"] == "available"

    @pytest.mark.asyncio
    async def test_health_degraded_without_provider(self, test_client, mock_completion):
        mock_completion.health_check = AsyncMock(return_value=False)

        body = (await test_client.get("/health")).json()

        assert body["status"] == "degraded"
        assert body["completion"] == "unavailable"
