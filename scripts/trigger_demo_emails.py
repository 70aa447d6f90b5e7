#!/usr/bin/env python3
"""
Dev helper: trigger demo email endpoints on a running demo server.

Calls one or more of the GET endpoints the front-end buttons use and prints
each send result, which is handy when checking a service account setup from
a terminal.

Usage
-----
# Run every demo scenario against the server at DEFAULT_URL
python scripts/trigger_demo_emails.py

# Only the plain text and purchase emails
python scripts/trigger_demo_emails.py --endpoint send-plain-text-email --endpoint send-new-purchase

# Target a different server
python scripts/trigger_demo_emails.py --url http://localhost:7000

Environment / .env
------------------
DEFAULT_URL   Base URL of the demo server (default: http://localhost:6338).
              Overridden by --url.
"""

import argparse
import json
import os
import sys
import textwrap
from pathlib import Path

import httpx
from dotenv import load_dotenv

DEMO_ENDPOINTS = [
    "send-html-email",
    "send-plain-text-email",
    "send-html-email-attachment",
    "send-subscription-renewal",
    "send-new-purchase",
    "simulate-server-status",
]


def _print_result(endpoint: str, response: httpx.Response) -> bool:
    """Print one endpoint's outcome; return True when every email was sent."""
    try:
        body = response.json()
    except ValueError:
        print(f"\n[FAIL] {endpoint}: HTTP {response.status_code}")
        print(response.text)
        return False

    entries = body if isinstance(body, list) else [body]
    ok = response.status_code == 200 and all(entry.get("sent") for entry in entries)
    print(f"\n[{'OK' if ok else 'FAIL'}] {endpoint}: HTTP {response.status_code}")
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return ok


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    parser = argparse.ArgumentParser(
        prog="trigger_demo_emails.py",
        description=textwrap.dedent("""\
            Trigger demo email endpoints on a running Gmail Mailer demo server.

            Reads DEFAULT_URL from the environment or a .env file in the
            project root.
        """),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--url",
        default=os.getenv("DEFAULT_URL", "http://localhost:6338"),
        help="Demo server base URL (default: DEFAULT_URL or http://localhost:6338)",
    )
    parser.add_argument(
        "--endpoint",
        action="append",
        choices=DEMO_ENDPOINTS,
        help="Endpoint to call; repeat for several. Calls all of them if omitted.",
    )
    args = parser.parse_args()

    endpoints = args.endpoint or DEMO_ENDPOINTS
    base_url = args.url.rstrip("/")

    failures = 0
    with httpx.Client(base_url=base_url, timeout=60.0) as client:
        for endpoint in endpoints:
            try:
                response = client.get(f"/{endpoint}")
            except httpx.HTTPError as exc:
                print(f"\n[FAIL] {endpoint}: {exc}", file=sys.stderr)
                failures += 1
                continue
            if not _print_result(endpoint, response):
                failures += 1

    print(f"\n{len(endpoints) - failures}/{len(endpoints)} endpoints succeeded")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
