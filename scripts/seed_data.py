#!/usr/bin/env python3
"""
Seed script: creates users and items via the API (no direct DB), then has each
user book one item through the normal cart -> checkout flow.
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 10 --items-per-user 5 --coupon SAVE10
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rentkaro.booking import TIME_SLOTS, Cart, checkout
from rentkaro.booking.client import DEFAULT_BASE_URL, RentkaroClient
from rentkaro.core.exceptions import AppError, ConflictError

ITEMS = [
    ("Professional DSLR Camera", "Electronics", 45),
    ("Mountain Bike", "Sports", 25),
    ("Camping Tent (4 person)", "Outdoor", 18),
    ("Cordless Drill", "Tools", 12),
    ("Projector", "Electronics", 30),
    ("Party Speaker", "Electronics", 22),
    ("Pressure Washer", "Tools", 28),
    ("Kayak", "Sports", 40),
    ("Sewing Machine", "Home", 15),
    ("Air Fryer", "Home", 10),
]

DESCRIPTIONS = [
    "Well maintained and cleaned after every rental.",
    "Pickup only. Charger and manual included.",
    "Great for weekend trips.",
    "Lightly used, works perfectly.",
]


def random_item() -> dict:
    name, category, price = random.choice(ITEMS)
    return {
        "name": name,
        "price_per_day": price,
        "category": category,
        "description": random.choice(DESCRIPTIONS),
        "availableDates": "Available this month",
    }


async def seed(args) -> None:
    created_users = 0
    created_items: list[int] = []
    bookings = 0
    errors: list[str] = []

    async with RentkaroClient.from_url(args.base_url) as client:
        # 1) Create users and their listings
        print(f"Creating {args.users} users with {args.items_per_user} items each...")
        for i in range(args.users):
            email = f"user{i + 1}@example.com"
            try:
                try:
                    await client.signup("password123", email=email)
                except ConflictError:
                    # Already exists - reuse same credentials
                    await client.login("password123", email=email)
                created_users += 1
                for _ in range(args.items_per_user):
                    item = random_item()
                    created_items.append(
                        await client.create_item(item.pop("name"), item.pop("price_per_day"), **item)
                    )
            except AppError as e:
                errors.append(f"User {email}: {e.message}")

        # 2) Each user books one random item through the cart
        if args.book and created_items:
            print("Booking one item per user...")
            for i in range(created_users):
                email = f"user{i + 1}@example.com"
                try:
                    await client.login("password123", email=email)
                    item = await client.get_item(random.choice(created_items))
                    cart = Cart().stage(item, "2026-12-01", random.choice(TIME_SLOTS))
                    result = await checkout(cart, args.coupon, client)
                    bookings += len(result.rental_ids)
                except AppError as e:
                    errors.append(f"Booking {email}: {e.message}")

    print(f"\nDone. Users: {created_users}, Items created: {len(created_items)}, Rentals: {bookings}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


def main():
    ap = argparse.ArgumentParser(description="Seed users, items and rentals via API")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--items-per-user", type=int, default=5, help="Items per user")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    ap.add_argument("--coupon", default=None, help="Coupon code to apply at checkout")
    ap.add_argument("--no-book", dest="book", action="store_false", help="Skip the checkout step")
    asyncio.run(seed(ap.parse_args()))


if __name__ == "__main__":
    main()
