from db import init_db, RideStore
import random

RIDERS = ["Mychael", "Ayu", "Budi", "Sinta", "Rizky", "Dewi"]
DRIVERS = ["Go", "Agus", "Joko", "Putri"]
VEHICLES = ["Honda Beat", "Yamaha NMAX", "Toyota Avanza", "Suzuki Ertiga"]


def seed(store=None, count=25):
    if store is None:
        init_db()
        store = RideStore()
    # sample: random trips around central Jakarta
    center = (-6.1882, 106.7185)
    ids = []
    for _ in range(count):
        ids.append(store.insert({
            "start_lat": center[0] + (random.random() - 0.5) * 0.1,
            "start_long": center[1] + (random.random() - 0.5) * 0.1,
            "end_lat": center[0] + (random.random() - 0.5) * 0.1,
            "end_long": center[1] + (random.random() - 0.5) * 0.1,
            "rider_name": random.choice(RIDERS),
            "driver_name": random.choice(DRIVERS),
            "driver_vehicle": random.choice(VEHICLES),
        }))
    return ids


if __name__ == "__main__":
    ids = seed()
    print(f"Seeded {len(ids)} rides")
