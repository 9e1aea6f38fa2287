"""Unit tests for MongoApiClient.

The transport is replaced with an AsyncMock so every test runs without a
network; each terminal operation still goes through asyncio.run and the real
RestRunner.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pydantic
import pytest

from mongoapi.client import ClientConfig, MongoApiClient
from mongoapi.client.api.client import NOTHING_FETCHED
from mongoapi.client.core.exceptions import InternalServerError, ServerNotRespondingError

FORM = {"Content-Type": "application/x-www-form-urlencoded"}


@pytest.fixture
def client():
    return MongoApiClient("localhost", 9875, "http")


@pytest.fixture
def transport(client):
    """Replace the transport's request with an AsyncMock."""
    client._transport.request = AsyncMock(return_value={"status": True})
    return client._transport


def last_call(transport):
    args, kwargs = transport.request.call_args
    return args[0], args[1], kwargs


class TestConstruction:
    def test_positional_arguments(self):
        client = MongoApiClient("db.example.com", 8080, "https", "secret")
        assert client.api_url == "https://db.example.com:8080"
        assert client._transport.default_headers == {
            "accept": "application/json",
            "api_key": "secret",
        }

    def test_no_api_key_header_when_not_configured(self, client):
        assert client._transport.default_headers == {"accept": "application/json"}

    def test_arguments_override_config(self):
        config = ClientConfig(host="a", port=1, default_database="cfg-db")
        client = MongoApiClient(server_port=2, config=config)
        assert client.api_url == "http://a:2"
        assert client.state.database == "cfg-db"

    def test_invalid_scheme_raises(self):
        with pytest.raises(pydantic.ValidationError):
            MongoApiClient("localhost", 9875, "gopher")

    def test_placeholder_target(self, client):
        assert client.state.database == "my-db"
        assert client.state.table == "my-collection"


class TestTerminalOperations:
    def test_select_scenario(self, client, transport):
        (
            client.from_db("test-db")
            .from_table("users")
            .where("name", "=", "alice")
            .page(1)
            .per_page(10)
            .select()
        )

        method, path, kwargs = last_call(transport)
        assert method == "GET"
        assert path == "/db/test-db/users/select"
        assert kwargs["params"] == {"query_and": "[name,=,alice]", "page": 1, "per_page": 10}
        assert kwargs["payload"] is None

    def test_insert_scenario(self, client, transport):
        client.insert({"username": "bob"})

        method, path, kwargs = last_call(transport)
        assert (method, path) == ("POST", "/db/my-db/my-collection/insert")
        assert kwargs["payload"] == {"username": "bob"}
        assert kwargs["headers"] == FORM
        assert kwargs["params"] is None

    def test_insert_form_body_is_compact_json(self, client):
        client._transport._http.request = AsyncMock(return_value={"status": True})

        client.insert({"username": "bob"})

        kwargs = client._transport._http.request.call_args.kwargs
        assert kwargs["data"] == {"payload": '{"username":"bob"}'}

    def test_find_is_select(self, client, transport):
        client.from_db("a").from_table("b").find()
        assert last_call(transport)[1] == "/db/a/b/select"

    def test_result_passed_through(self, client, transport):
        transport.request.return_value = {"status": True, "count": 1, "results": [{"_id": "x"}]}
        assert client.select() == {"status": True, "count": 1, "results": [{"_id": "x"}]}

    def test_list_databases(self, client, transport):
        client.list_databases()
        assert last_call(transport)[:2] == ("GET", "/db/databases")

    def test_list_tables(self, client, transport):
        client.list_tables_in_db("shop")
        assert last_call(transport)[:2] == ("GET", "/db/shop/tables")

    def test_select_by_id_ignores_query_state(self, client, transport):
        client.where("a", "=", 1).find_by_id("abc")
        method, path, kwargs = last_call(transport)
        assert (method, path) == ("GET", "/db/my-db/my-collection/get/abc")
        assert kwargs["params"] is None

    def test_update_where(self, client, transport):
        client.where("username", "=", "popeye1212").update({"age": 56})
        method, path, kwargs = last_call(transport)
        assert (method, path) == ("PUT", "/db/my-db/my-collection/update-where")
        assert kwargs["params"] == {"query_and": "[username,=,popeye1212]"}
        assert kwargs["payload"] == {"age": 56}
        assert kwargs["headers"] == FORM

    def test_update_by_id(self, client, transport):
        client.update_by_id("6651", {"age": 21})
        method, path, kwargs = last_call(transport)
        assert (method, path) == ("PUT", "/db/my-db/my-collection/update/6651")
        assert kwargs["payload"] == {"age": 21}

    def test_insert_many(self, client, transport):
        records = [{"username": "a"}, {"username": "b"}]
        client.into_db("game").into_table("players").insert(records)
        method, path, kwargs = last_call(transport)
        assert path == "/db/game/players/insert"
        assert kwargs["payload"] == records

    def test_insert_if(self, client, transport):
        client.where("username", "=", "nobody").insert_if({"username": "testUser"})
        method, path, kwargs = last_call(transport)
        assert (method, path) == ("POST", "/db/my-db/my-collection/insert-if")
        assert kwargs["params"] == {"query_and": "[username,=,nobody]"}

    def test_delete_where(self, client, transport):
        client.where("username", "=", "testUser").delete()
        method, path, kwargs = last_call(transport)
        assert (method, path) == ("DELETE", "/db/my-db/my-collection/delete-where")
        assert kwargs["params"] == {"query_and": "[username,=,testUser]"}

    def test_delete_by_id(self, client, transport):
        client.delete_by_id("6651fa29")
        assert last_call(transport)[:2] == ("DELETE", "/db/my-db/my-collection/delete/6651fa29")

    def test_delete_database(self, client, transport):
        client.delete_database("old")
        assert last_call(transport)[:2] == ("DELETE", "/db/old/delete")

    def test_delete_table(self, client, transport):
        client.delete_tables_in_database("old", "logs")
        assert last_call(transport)[:2] == ("DELETE", "/db/old/logs/delete")

    def test_state_not_reset_between_calls(self, client, transport):
        client.where("a", "=", 1)
        client.select()
        client.where("b", "=", 2)
        client.select()
        assert last_call(transport)[2]["params"] == {"query_and": "[a,=,1|b,=,2]"}

    def test_reset_clears_filters_but_keeps_target(self, client, transport):
        client.from_db("shop").from_table("orders").where("a", "=", 1).page(3)
        client.reset().select()
        method, path, kwargs = last_call(transport)
        assert path == "/db/shop/orders/select"
        assert kwargs["params"] == {}


class TestPreflightValidation:
    @pytest.mark.parametrize(
        "call,error",
        [
            (lambda c: c.list_tables_in_db(), "You did not provide a database name"),
            (lambda c: c.select_by_id(""), "You failed to provide a Mongo record ID."),
            (lambda c: c.insert(), "You failed to provide some data to send to the server"),
            (lambda c: c.insert({}), "You failed to provide some data to send to the server"),
            (lambda c: c.insert_if(None), "You failed to provide some data to send to the server"),
            (lambda c: c.update(), "You failed to provide some data to send to the server"),
            (
                lambda c: c.update_by_id("abc"),
                "You failed to provide some data + the mongoId to send to the server",
            ),
            (
                lambda c: c.update_by_id(None, {"a": 1}),
                "You failed to provide some data + the mongoId to send to the server",
            ),
            (lambda c: c.delete_by_id(), "You failed to provide a mongoId to send to the server."),
            (lambda c: c.delete_database(""), "You did not provide a database name"),
            (
                lambda c: c.delete_tables_in_database("db"),
                "You did not provide a valid database + table / collection name.",
            ),
        ],
    )
    def test_missing_arguments(self, client, transport, call, error):
        assert call(client) == {"status": False, "error": error}
        transport.request.assert_not_called()


class TestFailureNormalization:
    def test_connection_failure_never_raises(self, client, transport):
        transport.request.side_effect = ServerNotRespondingError("Cannot connect to host")

        result = client.select()

        assert result == {
            "status": False,
            "error": "Error: Server not responding, due to: Cannot connect to host",
        }

    def test_server_error(self, client, transport):
        transport.request.side_effect = InternalServerError("oops")

        assert client.list_databases() == {
            "status": False,
            "error": "Internal Server Error (500): oops",
        }

    def test_end_to_end_connection_refused(self, client):
        """Drive the real transport and HTTPClient with a failing session."""
        session = MagicMock()
        session.closed = False
        session.close = AsyncMock()
        session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))
        client._transport._http._session = session

        result = client.list_databases()

        assert result == {"status": False, "error": "Error: Server not responding, due to: refused"}
        session.close.assert_awaited_once()
        assert client._transport._http._session is None


class TestCachedAccessors:
    RESULT = {"status": True, "count": 5, "results": [{"_id": "1"}, {"_id": "2"}]}

    def test_first_before_get(self, client, transport):
        assert client.first() == {"status": False, "error": NOTHING_FETCHED}
        transport.request.assert_not_called()

    def test_get_returns_client_and_caches(self, client, transport):
        transport.request.return_value = self.RESULT

        assert client.get() is client
        assert client.cached_result == self.RESULT

    def test_first_after_get(self, client, transport):
        transport.request.return_value = self.RESULT
        assert client.get().first() == {"status": True, "result": {"_id": "1"}}

    def test_first_without_results_returns_whole_result(self, client, transport):
        transport.request.return_value = {"status": True, "count": 1, "_id": "x"}
        assert client.get().first() == {
            "status": True,
            "result": {"status": True, "count": 1, "_id": "x"},
        }

    def test_count_from_cache_makes_no_call(self, client, transport):
        transport.request.return_value = self.RESULT
        client.get()
        transport.request.reset_mock()

        assert client.count() == {"status": True, "count": 5}
        transport.request.assert_not_called()

    def test_count_from_cache_without_count_field(self, client, transport):
        transport.request.return_value = {"status": True, "results": [{"a": 1}, {"a": 2}]}
        assert client.get().count() == {"status": True, "count": 2}

    def test_get_accepts_numeric_string_count(self, client, transport):
        transport.request.return_value = {"status": True, "count": "5", "results": [1]}

        assert client.get() is client
        assert client.cached_result == {"status": True, "count": "5", "results": [1]}
        assert client.count() == {"status": True, "count": 5}

    def test_get_non_numeric_count_falls_back_to_results(self, client, transport):
        transport.request.return_value = {"status": True, "count": "many", "results": [1, 2]}

        assert client.get() is client
        assert client.count() == {"status": True, "count": 2}

    def test_get_non_numeric_count_without_results(self, client, transport):
        transport.request.return_value = {"status": True, "count": None, "results": []}
        client.get()
        assert client.cached_result is None

    def test_get_does_not_cache_empty_result(self, client, transport):
        transport.request.return_value = {"status": True, "count": 0, "results": []}
        client.get()
        assert client.cached_result is None

    def test_get_does_not_cache_failure(self, client, transport):
        transport.request.side_effect = ServerNotRespondingError("down")
        client.get()
        assert client.cached_result is None

    def test_count_without_cache_selects(self, client, transport):
        transport.request.return_value = {"status": True, "count": 7, "results": []}
        client.where("username", "=", "LMAO-B")

        assert client.count() == {"status": True, "count": 7}
        method, path, kwargs = last_call(transport)
        assert path == "/db/my-db/my-collection/select"
        assert kwargs["params"] == {"query_and": "[username,=,LMAO-B]"}

    def test_count_without_cache_propagates_error(self, client, transport):
        transport.request.side_effect = ServerNotRespondingError("down")
        assert client.count() == {
            "status": False,
            "error": "Error: Server not responding, due to: down",
        }

    def test_reset_drops_cache(self, client, transport):
        transport.request.return_value = self.RESULT
        client.get().reset()
        assert client.cached_result is None
