"""Lightweight REST client for the pitchrate API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_payload(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid payload JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pitchrate REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("payload", type=Path, help="Analysis response JSON")
    parser.add_argument("--breakdown", action="store_true", help="Also fetch per-attribute contributions")
    args = parser.parse_args()

    payload = load_payload(args.payload)

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/analysis", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"{args.payload}: {resp.json().get('detail')}")
        resp.raise_for_status()
        analysis = resp.json()
        print(f"Overall rating: {analysis['rating']}")
        print("Metrics:", json.dumps(analysis["metrics"], indent=2))

        if not args.breakdown:
            return

        resp = client.post("/rating", json=analysis["metrics"])
        resp.raise_for_status()
        for component in resp.json()["components"]:
            print(f"  {component['name']}: {component['contribution']:.4f}")


if __name__ == "__main__":
    main()
