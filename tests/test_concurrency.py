import asyncio
import httpx
import pytest
import os
import sys

# ensure project root in sys.path so internal imports work
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from db import make_engine, init_db, RideStore
from main import create_app
from sample_data import seed

RIDE = {
    "start_lat": -6.188225,
    "start_long": 106.698526,
    "end_lat": -6.188153,
    "end_long": 106.738628,
    "rider_name": "Mychael",
    "driver_name": "Go",
    "driver_vehicle": "Honda Beat",
}


@pytest.fixture
def store(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path}/concurrency.db")
    init_db(engine)
    yield RideStore(engine)
    engine.dispose()


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_ids(store):
    app = create_app(store)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as client:
        res = await asyncio.gather(*[client.post("/rides", json=RIDE) for _ in range(10)])
        assert all(r.status_code == 200 for r in res)
        ids = [r.json()[0]["rideID"] for r in res]
        assert sorted(ids) == list(range(1, 11))
        listed = await client.get("/rides", params={"page": 1, "size": 10})
    assert [r["rideID"] for r in listed.json()] == list(range(1, 11))


@pytest.mark.asyncio
async def test_concurrent_reads_over_seeded_rides(store):
    seeded = seed(store, count=30)
    app = create_app(store)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as client:
        pages = await asyncio.gather(*[client.get("/rides", params={"page": p, "size": 10}) for p in (1, 2, 3)])
    got = [r["rideID"] for resp in pages for r in resp.json()]
    assert got == seeded
