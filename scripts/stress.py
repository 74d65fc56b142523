"""
Fire concurrent bookings at one event on a running server.

Every request comes from a different user and books one ticket, so with an
event of capacity N exactly N requests should get 201 and the rest 409. Run it
against a server backed by PostgreSQL with sql/schema.sql applied; the
in-memory test database has no stored procedures.

    python scripts/stress.py --event-id 1 --requests 20
"""
import argparse
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import httpx


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Concurrent booking stress test.")
    parser.add_argument("--event-id", type=int, required=True)
    parser.add_argument("--requests", type=int, default=20)
    parser.add_argument("--base-url", default="http://localhost:3000")
    return parser.parse_args()


def book_one(client: httpx.Client, event_id: int, index: int) -> tuple[int, dict]:
    response = client.post(
        "/api/bookings",
        json={"user": f"testuser_{index}", "event_id": event_id, "tickets_to_book": 1},
    )
    return response.status_code, response.json()


def main():
    args = parse_args()

    with httpx.Client(base_url=args.base_url, timeout=30) as client:
        before = client.get(f"/api/events/{args.event_id}").json()

        with ThreadPoolExecutor(max_workers=args.requests) as executor:
            futures = [
                executor.submit(book_one, client, args.event_id, i)
                for i in range(args.requests)
            ]
            results = [f.result() for f in futures]

        after = client.get(f"/api/events/{args.event_id}").json()

    for status, body in results:
        print(status, body)

    counts = Counter(status for status, _ in results)
    print(f"status counts: {dict(counts)}")
    print(
        f"tickets_sold: {before['tickets_sold']} -> {after['tickets_sold']} "
        f"(capacity {after['capacity']})"
    )
    if after["tickets_sold"] > after["capacity"]:
        raise SystemExit("oversold: tickets_sold exceeds capacity")


if __name__ == "__main__":
    main()
