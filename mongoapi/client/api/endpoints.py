"""Endpoint definitions for the proxy API.

Each terminal operation of the client maps to exactly one endpoint spec here. Path
builders read ``db``, ``table`` and ``id`` from the params dict; the body is
read from ``data``.
"""

from __future__ import annotations

from typing import Any

from ..core.enums import HttpMethod
from ..runtime.rest import RestEndpointSpec

NO_DATABASE = "You did not provide a database name"
NO_RECORD_ID = "You failed to provide a Mongo record ID."
NO_DATA = "You failed to provide some data to send to the server"
NO_DATA_OR_ID = "You failed to provide some data + the mongoId to send to the server"
NO_DELETE_ID = "You failed to provide a mongoId to send to the server."
NO_DATABASE_OR_TABLE = "You did not provide a valid database + table / collection name."


def _table_path(params: dict[str, Any]) -> str:
    return f"/db/{params['db']}/{params['table']}"


LIST_DATABASES = RestEndpointSpec(
    id="list_databases",
    method=HttpMethod.GET,
    build_path=lambda p: "/db/databases",
)

LIST_TABLES = RestEndpointSpec(
    id="list_tables",
    method=HttpMethod.GET,
    build_path=lambda p: f"/db/{p['db']}/tables",
    required=("db",),
    missing_message=NO_DATABASE,
)

SELECT = RestEndpointSpec(
    id="select",
    method=HttpMethod.GET,
    build_path=lambda p: f"{_table_path(p)}/select",
    uses_query=True,
)

SELECT_BY_ID = RestEndpointSpec(
    id="select_by_id",
    method=HttpMethod.GET,
    build_path=lambda p: f"{_table_path(p)}/get/{p['id']}",
    required=("id",),
    missing_message=NO_RECORD_ID,
)

UPDATE_WHERE = RestEndpointSpec(
    id="update_where",
    method=HttpMethod.PUT,
    build_path=lambda p: f"{_table_path(p)}/update-where",
    uses_query=True,
    sends_body=True,
    required=("data",),
    missing_message=NO_DATA,
)

UPDATE_BY_ID = RestEndpointSpec(
    id="update_by_id",
    method=HttpMethod.PUT,
    build_path=lambda p: f"{_table_path(p)}/update/{p['id']}",
    sends_body=True,
    required=("id", "data"),
    missing_message=NO_DATA_OR_ID,
)

INSERT = RestEndpointSpec(
    id="insert",
    method=HttpMethod.POST,
    build_path=lambda p: f"{_table_path(p)}/insert",
    sends_body=True,
    required=("data",),
    missing_message=NO_DATA,
)

INSERT_IF = RestEndpointSpec(
    id="insert_if",
    method=HttpMethod.POST,
    build_path=lambda p: f"{_table_path(p)}/insert-if",
    uses_query=True,
    sends_body=True,
    required=("data",),
    missing_message=NO_DATA,
)

DELETE_WHERE = RestEndpointSpec(
    id="delete_where",
    method=HttpMethod.DELETE,
    build_path=lambda p: f"{_table_path(p)}/delete-where",
    uses_query=True,
)

DELETE_BY_ID = RestEndpointSpec(
    id="delete_by_id",
    method=HttpMethod.DELETE,
    build_path=lambda p: f"{_table_path(p)}/delete/{p['id']}",
    required=("id",),
    missing_message=NO_DELETE_ID,
)

DELETE_DATABASE = RestEndpointSpec(
    id="delete_database",
    method=HttpMethod.DELETE,
    build_path=lambda p: f"/db/{p['db']}/delete",
    required=("db",),
    missing_message=NO_DATABASE,
)

DELETE_TABLE = RestEndpointSpec(
    id="delete_table",
    method=HttpMethod.DELETE,
    build_path=lambda p: f"{_table_path(p)}/delete",
    required=("db", "table"),
    missing_message=NO_DATABASE_OR_TABLE,
)

ENDPOINTS: dict[str, RestEndpointSpec] = {
    spec.id: spec
    for spec in (
        LIST_DATABASES,
        LIST_TABLES,
        SELECT,
        SELECT_BY_ID,
        UPDATE_WHERE,
        UPDATE_BY_ID,
        INSERT,
        INSERT_IF,
        DELETE_WHERE,
        DELETE_BY_ID,
        DELETE_DATABASE,
        DELETE_TABLE,
    )
}
