"""Simple concurrency demo that creates rides concurrently against the ASGI app.
This runs in-process and doesn't require the server to be started separately.
Run: python concurrency_demo.py
"""
import asyncio
from db import init_db
from main import app
import httpx

RIDE = {
    "start_lat": -6.188225,
    "start_long": 106.698526,
    "end_lat": -6.188153,
    "end_long": 106.738628,
    "rider_name": "Mychael",
    "driver_name": "Go",
    "driver_vehicle": "Honda Beat",
}


async def run(n=10):
    init_db()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        tasks = [client.post("/rides", json=RIDE) for _ in range(n)]
        res = await asyncio.gather(*tasks)
        for r in res:
            print(r.status_code, r.json())


if __name__ == "__main__":
    asyncio.run(run())
