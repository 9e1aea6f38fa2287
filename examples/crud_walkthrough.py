#!/usr/bin/env python3
"""Insert, query, update and delete a few records against a local proxy."""

from __future__ import annotations

from pprint import pprint

from mongoapi.client import MongoApiClient

PLAYERS = [
    {"username": "randomUser123", "age": 25, "scores": {"goals": 8, "k/d": 1.5, "isPlayer": True}},
    {"username": "user123", "age": 30, "scores": {"goals": 15, "k/d": 2.3, "isPlayer": True}},
    {"username": "johnDoe", "age": 35, "scores": {"goals": 5, "k/d": 0.9, "isPlayer": False}},
]


def main() -> None:
    mongo = MongoApiClient("localhost", 9875, "http")
    mongo.into_db("my-test-database").into_table("my-test-table")

    pprint(mongo.insert(PLAYERS))

    pprint(
        mongo.or_where("username", "=", "user123")
        .or_where("age", ">", 34)
        .sort_by("age", "desc")
        .page(1)
        .per_page(10)
        .select()
    )

    mongo.reset()
    pprint(mongo.where("username", "=", "user123").update({"age": 31}))

    mongo.reset()
    pprint(mongo.where("age", "between", [20, 40]).get().first())
    pprint(mongo.count())

    mongo.reset()
    pprint(mongo.where("username", "=", "johnDoe").delete())
    pprint(mongo.delete_tables_in_database("my-test-database", "my-test-table"))


if __name__ == "__main__":
    main()
