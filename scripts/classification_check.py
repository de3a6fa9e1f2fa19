#!/usr/bin/env python3
"""
Task classification verification script.

1. Hit /health on a running API.
2. POST a description to /api/tasks/classify and print the enrichment.
3. POST a blank description and confirm the 400 validation envelope.
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from typing import Any, Dict

import httpx

API_BASE = os.getenv("API_BASE", "http://localhost:8000").rstrip("/")
API_PREFIX = os.getenv("TASKLENS_API_PREFIX", "/api").rstrip("/")
DESCRIPTION = os.getenv(
    "CLASSIFY_TEST_TEXT",
    "Schedule a meeting with John Doe today at Site Office 2pm",
)
HTTP_TIMEOUT = float(os.getenv("CLASSIFY_HTTP_TIMEOUT", "10"))


def banner(label: str) -> None:
    print("\n" + "=" * 80)
    print(label)
    print("=" * 80)


async def check_health(client: httpx.AsyncClient) -> None:
    banner("STEP 1 → /health")
    response = await client.get(f"{API_BASE}/health")
    print(f"/health status: {response.status_code}")
    if response.status_code != 200:
        raise SystemExit("API is not healthy; aborting classification check.")


async def classify(client: httpx.AsyncClient, text: str) -> Dict[str, Any]:
    banner(f"STEP 2 → {API_PREFIX}/tasks/classify '{text[:64]}'")
    response = await client.post(f"{API_BASE}{API_PREFIX}/tasks/classify", json={"description": text})
    print(f"classify status: {response.status_code}")
    payload = response.json()
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    if response.status_code != 200:
        raise SystemExit("Classification failed.")
    return payload


async def check_validation(client: httpx.AsyncClient) -> None:
    banner("STEP 3 → blank description is rejected")
    response = await client.post(f"{API_BASE}{API_PREFIX}/tasks/classify", json={"description": "   "})
    print(f"blank status: {response.status_code}")
    if response.status_code != 400:
        raise SystemExit("Expected a 400 validation error for a blank description.")


async def main() -> None:
    text = " ".join(sys.argv[1:]).strip() or DESCRIPTION
    banner(f"Task classification check against {API_BASE}")
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        await check_health(client)
        await classify(client, text)
        await check_validation(client)
    print("\nClassification verification complete.")


if __name__ == "__main__":
    asyncio.run(main())
