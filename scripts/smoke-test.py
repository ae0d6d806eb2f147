#!/usr/bin/env python3
"""
Smoke test for powgate deployments.

Flow:
1. Health check
2. Fetch a challenge (GET /api/v1/challenge)
3. Solve it locally and submit (POST /api/v1/solution), expect success
4. Submit a solution for a tampered payload, expect invalid_signature

Usage:
    ./scripts/smoke-test.py https://staging.example.com
    ./scripts/smoke-test.py https://staging.example.com --difficulty 3
    ./scripts/smoke-test.py https://staging.example.com --health-only
"""

import argparse
import base64
import hashlib
import itertools
import json
import sys
import time
from datetime import datetime
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

DEFAULT_TIMEOUT_SECONDS = 30.0
BODY_PREVIEW_CHARS = 200


class ApiError(RuntimeError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"API error {status_code}: {body[:BODY_PREVIEW_CHARS]}")
        self.status_code = status_code
        self.body = body


class SmokeFailure(RuntimeError):
    pass


def log(msg: str) -> None:
    """Print timestamped log message."""
    print(f"[{datetime.now().strftime('%H:%M:%S')}] {msg}", flush=True)


def request_json(
    method: str, url: str, payload: dict | None = None, timeout: float = DEFAULT_TIMEOUT_SECONDS
) -> Any:
    body = json.dumps(payload).encode() if payload is not None else None
    req = Request(url, data=body, method=method)
    req.add_header("Accept", "application/json")
    if body is not None:
        req.add_header("Content-Type", "application/json")
    try:
        with urlopen(req, timeout=timeout) as resp:
            return json.loads(resp.read().decode("utf-8"))
    except HTTPError as e:
        raise ApiError(e.code, e.read().decode("utf-8", errors="replace")) from e


def solve(data: str, criteria: str) -> tuple[str, str]:
    """Brute-force a decimal counter; returns (value, hash)."""
    prefix = data.encode()
    for counter in itertools.count():
        value = str(counter)
        digest = hashlib.sha256(prefix + value.encode()).hexdigest()
        if digest.startswith(criteria):
            return value, digest
    raise AssertionError("unreachable")


def tamper(data: str) -> str:
    """Flip one nonce byte of a payload."""
    raw = bytearray(base64.b64decode(data))
    raw[12] ^= 0xFF
    return base64.b64encode(bytes(raw)).decode()


def step_health(base_url: str) -> None:
    result = request_json("GET", f"{base_url}/health")
    if result.get("status") != "healthy":
        raise SmokeFailure(f"unexpected health response: {result}")


def step_solve(base_url: str, difficulty: int) -> dict:
    query = urlencode({"difficulty": difficulty})
    challenge = request_json("GET", f"{base_url}/api/v1/challenge?{query}")

    start = time.perf_counter()
    value, digest = solve(challenge["data"], challenge["criteria"])
    log(f"  solved in {time.perf_counter() - start:.2f}s (value={value})")

    result = request_json(
        "POST",
        f"{base_url}/api/v1/solution",
        {"data": challenge["data"], "value": value, "hash": digest},
    )
    if result.get("success") is not True:
        raise SmokeFailure(f"valid solution rejected: {result}")
    return challenge


def step_tampered(base_url: str, challenge: dict) -> None:
    data = tamper(challenge["data"])
    value, digest = solve(data, challenge["criteria"])
    result = request_json(
        "POST",
        f"{base_url}/api/v1/solution",
        {"data": data, "value": value, "hash": digest},
    )
    if result.get("success") is not False or result.get("reason") != "invalid_signature":
        raise SmokeFailure(f"tampered payload not rejected as unsigned: {result}")


def main() -> int:
    parser = argparse.ArgumentParser(description="powgate deployment smoke test")
    parser.add_argument("base_url", help="e.g. https://staging.example.com")
    parser.add_argument("--difficulty", type=int, default=3)
    parser.add_argument("--health-only", action="store_true")
    args = parser.parse_args()

    base_url = args.base_url.rstrip("/")
    steps = [("health", lambda: step_health(base_url))]
    if not args.health_only:
        state: dict = {}
        steps += [
            ("solve", lambda: state.update(challenge=step_solve(base_url, args.difficulty))),
            ("tampered", lambda: step_tampered(base_url, state["challenge"])),
        ]

    for name, step in steps:
        log(f"STEP {name}")
        try:
            step()
        except (ApiError, SmokeFailure, URLError, KeyError) as e:
            log(f"FAILED {name}: {e}")
            return 1
        log(f"OK {name}")

    log("All smoke checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
