#!/usr/bin/env python3
"""Benchmark permission checks: latency (p50, p95, p99) and QPS.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=... KEYCLOAK_CLIENT_SECRET=...
  python scripts/bench_check.py [--num-grants 200] [--num-checks 500]

The benchmark user owns the seeded resources and grants read to synthetic
users, then checks read access as the grantees (one store lookup per check).
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> tuple[str, str]:
    """Return (access_token, subject) for a password-grant login."""
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    token = r.json()["access_token"]
    info = httpx.post(
        f"{url}/introspect",
        data={"token": token, "client_id": client_id, "client_secret": client_secret},
        timeout=30.0,
    )
    info.raise_for_status()
    return token, info.json()["sub"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission checks")
    parser.add_argument("--num-grants", type=int, default=200, help="Grants to seed before checking")
    parser.add_argument("--num-checks", type=int, default=500, help="Number of check requests")
    parser.add_argument("--output", type=str, default="/results/bench_check.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "snipauth")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "snipauth-api")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "snipauth-api-secret")
    user = os.environ.get("BENCH_USER", "testuser")
    password = os.environ.get("BENCH_PASSWORD", "testpass")

    print("Getting token...")
    token, owner_id = get_token(keycloak_url, realm, client_id, client_secret, user, password)
    headers = {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}

    print(f"Seeding {args.num_grants} grants...")
    with httpx.Client(timeout=60.0) as client:
        for i in range(args.num_grants):
            client.post(
                f"{api_url}/v1/authorization/permissions",
                json={
                    "owner_id": owner_id,
                    "grantee_id": f"bench-user-{i}",
                    "resource_id": f"bench-snippet-{i}",
                    "can_read": True,
                },
                headers=headers,
            ).raise_for_status()

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_checks} check requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for n in range(args.num_checks):
            i = n % args.num_grants
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/authorization/check",
                json={
                    "user_id": f"bench-user-{i}",
                    "resource_id": f"bench-snippet-{i}",
                    "owner_id": owner_id,
                    "action": "read",
                },
                headers=headers,
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 200 and r.json()["allowed"]:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful checks.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Check benchmark (grants={args.num_grants}, checks={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
