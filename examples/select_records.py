#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging

from mongoapi.client import ClientConfig, MongoApiClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Select records from a MongoDB REST proxy")
    p.add_argument("database")
    p.add_argument("table")
    p.add_argument("--where", nargs=3, action="append", metavar=("FIELD", "OP", "VALUE"))
    p.add_argument("--sort", nargs=2, action="append", metavar=("FIELD", "DIRECTION"))
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--per-page", type=int, default=10)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    client = MongoApiClient(config=ClientConfig.from_env())
    client.from_db(args.database).from_table(args.table)
    for field, op, value in args.where or []:
        client.where(field, op, value)
    for field, direction in args.sort or []:
        client.sort_by(field, direction)

    result = client.page(args.page).per_page(args.per_page).select()
    if not result.get("status"):
        print(f"Error: {result.get('error')}")
        return

    print("=" * 65)
    print(f"Target  : {client.api_url}/db/{args.database}/{args.table}")
    print(f"Count   : {result.get('count')}")
    print("=" * 65)
    for record in result.get("results", []):
        print(json.dumps(record, default=str))


if __name__ == "__main__":
    main()
