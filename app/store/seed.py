"""Demo catalog and parking lots for a fresh store."""

import logging

from app.store.memory import MemoryStore

logger = logging.getLogger(__name__)

REWARDS = [
    {
        "name": "Voucher Grab 20k",
        "description": "20,000 VND off a ride",
        "points_cost": 100,
        "category": "transport",
        "icon": "fas fa-gift",
    },
    {
        "name": "Voucher Starbucks",
        "description": "25,000 VND off drinks",
        "points_cost": 150,
        "category": "food",
        "icon": "fas fa-coffee",
    },
    {
        "name": "Voucher xăng 50k",
        "description": "Petrolimex/Shell",
        "points_cost": 300,
        "category": "fuel",
        "icon": "fas fa-gas-pump",
    },
]

# Ho Chi Minh City
PARKING_LOTS = [
    {
        "name": "Bãi xe Nguyễn Huệ",
        "address": "78 Nguyễn Huệ, Quận 1, TP.HCM",
        "latitude": "10.7769",
        "longitude": "106.7009",
        "owner_id": "owner1",
        "motorcycle_capacity": 50,
        "car_capacity": 20,
        "motorcycle_price": 5000,
        "car_price": 15000,
        "current_motorcycle_spots": 35,
        "current_car_spots": 8,
        "facilities": ["covered", "security"],
        "operating_hours": {"open_time": "06:00", "close_time": "22:00", "is_24h": False},
        "description": "Spacious lot in the city centre",
    },
    {
        "name": "Bãi xe Vincom Center",
        "address": "70-72 Lê Thánh Tôn, Quận 1, TP.HCM",
        "latitude": "10.7829",
        "longitude": "106.7024",
        "owner_id": "owner2",
        "motorcycle_capacity": 100,
        "car_capacity": 50,
        "motorcycle_price": 8000,
        "car_price": 15000,
        "current_motorcycle_spots": 0,
        "current_car_spots": 0,
        "facilities": ["covered", "security", "camera", "toilet"],
        "operating_hours": {"open_time": "08:00", "close_time": "22:00", "is_24h": False},
        "description": "Shopping mall parking at Vincom Center",
    },
    {
        "name": "Bãi xe Chợ Bến Thành",
        "address": "Lê Lợi, Quận 1, TP.HCM",
        "latitude": "10.7720",
        "longitude": "106.6980",
        "owner_id": "owner3",
        "motorcycle_capacity": 80,
        "car_capacity": 30,
        "motorcycle_price": 3000,
        "car_price": 12000,
        "current_motorcycle_spots": 45,
        "current_car_spots": 15,
        "facilities": ["security"],
        "operating_hours": {"open_time": "05:00", "close_time": "23:00", "is_24h": False},
        "description": "Next to Ben Thanh market",
    },
    {
        "name": "Bãi xe Landmark 81",
        "address": "208 Nguyễn Hữu Cảnh, Bình Thạnh, TP.HCM",
        "latitude": "10.7944",
        "longitude": "106.7219",
        "owner_id": "owner4",
        "motorcycle_capacity": 150,
        "car_capacity": 80,
        "motorcycle_price": 10000,
        "car_price": 20000,
        "current_motorcycle_spots": 120,
        "current_car_spots": 50,
        "facilities": ["covered", "security", "camera", "toilet", "ev_charging"],
        "operating_hours": {"open_time": "00:00", "close_time": "23:59", "is_24h": True},
        "description": "Modern lot in the tallest building in Vietnam",
    },
    {
        "name": "Bãi xe Bitexco Financial Tower",
        "address": "02 Hải Triều, Quận 1, TP.HCM",
        "latitude": "10.7718",
        "longitude": "106.7038",
        "owner_id": "owner7",
        "motorcycle_capacity": 120,
        "car_capacity": 60,
        "motorcycle_price": 9000,
        "car_price": 18000,
        "current_motorcycle_spots": 80,
        "current_car_spots": 35,
        "facilities": ["covered", "security", "camera", "toilet", "valet"],
        "operating_hours": {"open_time": "00:00", "close_time": "23:59", "is_24h": True},
        "description": "Premium lot with valet parking",
    },
    {
        "name": "Bãi xe Phố Đi Bộ Nguyễn Huệ",
        "address": "Nguyễn Huệ, Quận 1, TP.HCM",
        "latitude": "10.7743",
        "longitude": "106.7019",
        "owner_id": "owner8",
        "motorcycle_capacity": 90,
        "car_capacity": 0,
        "motorcycle_price": 6000,
        "car_price": 0,
        "current_motorcycle_spots": 60,
        "current_car_spots": 0,
        "facilities": ["security", "camera"],
        "operating_hours": {"open_time": "06:00", "close_time": "23:00", "is_24h": False},
        "description": "Motorcycle-only lot by the walking street",
    },
]


def seed_demo_data(store: MemoryStore) -> None:
    """Fill ``store`` with the reward catalog and sample lots.

    Seeded lots start unrated, matching their empty review lists.
    """
    for reward in REWARDS:
        store.create_reward(reward)
    for lot in PARKING_LOTS:
        store.create_parking_lot(lot)
    logger.info(f"Seeded {len(REWARDS)} rewards and {len(PARKING_LOTS)} parking lots")
