#!/usr/bin/env python3
"""Benchmark mind map saves: latency per save, then list and cleanup.

Usage:
    export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
    export KEYCLOAK_REALM=mindmaps KEYCLOAK_CLIENT_ID=mindmaps-api KEYCLOAK_CLIENT_SECRET=...
    export BENCH_USER=testuser BENCH_PASSWORD=testpass
    python scripts/bench_save.py [--num-maps 100] [--content-size 2000] [--rewrites 3]
"""
from __future__ import annotations

import argparse
import json
import os
import statistics
import sys
import time
from urllib.parse import quote

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
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
    return r.json()["access_token"]


def _percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    return ordered[max(int(len(ordered) * q) - 1, 0)] * 1000


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark mind map saves")
    parser.add_argument("--num-maps", type=int, default=50, help="Number of distinct mind maps")
    parser.add_argument("--content-size", type=int, default=1000, help="Approximate content length per map")
    parser.add_argument("--rewrites", type=int, default=1, help="Saves per mind map (first one creates)")
    parser.add_argument("--keep", action="store_true", help="Do not delete the benchmark maps afterwards")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "mindmaps"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "mindmaps-api"),
        os.environ.get("KEYCLOAK_CLIENT_SECRET", ""),
        os.environ.get("BENCH_USER", "testuser"),
        os.environ.get("BENCH_PASSWORD", "testpass"),
    )
    headers = {"Authorization": f"Bearer {token}"}

    names = [f"bench-{i:05d}" for i in range(args.num_maps)]
    latencies: list[float] = []
    errors = 0

    print(f"Saving {args.num_maps} maps x {args.rewrites} (content ~{args.content_size} chars)...")
    start_total = time.perf_counter()
    with httpx.Client(base_url=api_url, headers=headers, timeout=60.0) as client:
        for round_no in range(args.rewrites):
            for name in names:
                content = json.dumps({"round": round_no, "nodes": ["x" * args.content_size]})
                t0 = time.perf_counter()
                r = client.post(f"/api/mindmaps/{quote(name, safe='')}", json={"content": content})
                if r.status_code == 200:
                    latencies.append(time.perf_counter() - t0)
                else:
                    errors += 1
        total_elapsed = time.perf_counter() - start_total

        t0 = time.perf_counter()
        listed = client.get("/api/mindmaps")
        list_ms = (time.perf_counter() - t0) * 1000
        listed.raise_for_status()

        if not args.keep:
            for name in names:
                client.delete(f"/api/mindmaps/{quote(name, safe='')}")

    n = len(latencies)
    if n == 0:
        print("No successful saves.")
        return 1

    print(
        f"Save benchmark (n={n}, errors={errors})\n"
        f"  Throughput: {n / total_elapsed:.2f} saves/s\n"
        f"  Latency: p50={statistics.median(latencies) * 1000:.1f} ms, "
        f"p95={_percentile(latencies, 0.95):.1f} ms, p99={_percentile(latencies, 0.99):.1f} ms\n"
        f"  List: {len(listed.json())} maps in {list_ms:.1f} ms\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
