#!/usr/bin/env python3
"""Send a handful of product ideas through the running proxy (or straight to the service).
Saves full responses to `scripts/smoke_results.json` and prints a summary line per idea.

Usage:
  python scripts/smoke_generate.py            # via PROXY_URL
  python scripts/smoke_generate.py --direct   # via BACKEND_URL
"""
import argparse
import json
import os
import time

import requests

from autofoundr.config import Settings

ideas = [
    "eco-friendly phone case",
    "handmade soy candle",
    "smart water bottle",
    "",
    "a very long product idea that will definitely not fit inside a thirty character brand name",
]


def run(direct: bool = False):
    settings = Settings.from_env()
    url = settings.backend_url if direct else settings.proxy_url
    results = []
    for i, idea in enumerate(ideas, start=1):
        start = time.time()
        try:
            r = requests.post(url, json={"idea": idea}, timeout=settings.request_timeout)
            status = r.status_code
            try:
                body = r.json()
            except ValueError:
                body = r.text
            if isinstance(body, dict) and body.get("brand"):
                summary = f"{body['brand']['name']} | {body['product']['title']} | {body['product']['price']}"
            else:
                summary = str(body)[:120]
        except requests.exceptions.RequestException as e:
            status = "ERR"
            body = {"error": str(e)}
            summary = str(e)
        elapsed = time.time() - start

        results.append({
            "id": i,
            "idea": idea,
            "called_url": url,
            "status": status,
            "elapsed_s": round(elapsed, 2),
            "response": body,
        })
        print(f"[{i:02d}] status={status} time={round(elapsed, 2)}s -> {summary}")

    out_path = os.path.join(os.path.dirname(__file__), "smoke_results.json")
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(results, f, ensure_ascii=False, indent=2)
    print("\nSaved full results to", out_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--direct", action="store_true", help="call the generation service instead of the proxy")
    args = parser.parse_args()
    run(direct=args.direct)
