# tests/test_jobs_api.py
from unittest.mock import AsyncMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError


@pytest.mark.asyncio
async def test_create_then_list_jobs(client):
    r = await client.post("/api/jobs", json={"title": "Engineer", "company": "Acme"})
    assert r.status_code == 200
    body = r.json()
    assert body["acknowledged"] is True
    assert ObjectId.is_valid(body["insertedId"])

    r2 = await client.get("/api/jobs")
    assert r2.status_code == 200
    jobs = r2.json()
    assert len(jobs) == 1
    assert jobs[0]["_id"] == body["insertedId"]
    assert jobs[0]["title"] == "Engineer"
    assert jobs[0]["company"] == "Acme"


@pytest.mark.asyncio
async def test_job_extra_fields_are_kept(client, store):
    payload = {"title": "Designer", "location": "Remote", "salary": 90000, "tags": ["ui", "ux"]}
    r = await client.post("/api/jobs", json=payload)
    assert r.status_code == 200

    doc = await store.jobs.find_one({"_id": ObjectId(r.json()["insertedId"])})
    assert doc["location"] == "Remote"
    assert doc["salary"] == 90000
    assert doc["tags"] == ["ui", "ux"]


@pytest.mark.asyncio
async def test_job_body_must_be_object(client):
    r = await client.post("/api/jobs", json=["not", "an", "object"])
    assert r.status_code == 400
    assert "error" in r.json()


@pytest.mark.asyncio
async def test_delete_job(client, store):
    res = await store.jobs.insert_one({"title": "Engineer"})

    r = await client.delete(f"/api/jobs/{res.inserted_id}")
    assert r.status_code == 200
    assert r.json()["deletedCount"] == 1

    r2 = await client.delete(f"/api/jobs/{res.inserted_id}")
    assert r2.json()["deletedCount"] == 0


@pytest.mark.asyncio
async def test_delete_job_bad_id(client):
    r = await client.delete("/api/jobs/xyz")
    assert r.status_code == 500
    assert "xyz" in r.json()["error"]


@pytest.mark.asyncio
async def test_job_null_fields_are_stored(client, store):
    r = await client.post("/api/jobs", json={"title": "Engineer", "company": None, "salary": None})
    assert r.status_code == 200

    doc = await store.jobs.find_one({"_id": ObjectId(r.json()["insertedId"])})
    assert doc["title"] == "Engineer"
    assert "company" in doc and doc["company"] is None
    assert "salary" in doc and doc["salary"] is None


@pytest.mark.asyncio
async def test_unset_job_defaults_are_not_stored(client, store):
    r = await client.post("/api/jobs", json={"location": "Remote"})
    doc = await store.jobs.find_one({"_id": ObjectId(r.json()["insertedId"])})
    assert "title" not in doc
    assert "company" not in doc


@pytest.mark.asyncio
async def test_list_jobs_store_failure(client, monkeypatch):
    monkeypatch.setattr(
        "careerconnect.api.v1.jobs.list_jobs",
        AsyncMock(side_effect=PyMongoError("connection closed")),
    )
    r = await client.get("/api/jobs")
    assert r.status_code == 500
    assert r.json() == {"error": "connection closed"}
