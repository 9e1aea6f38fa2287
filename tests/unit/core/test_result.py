"""Unit tests for the Ok/Err result type."""

from mongoapi.client.core.result import Err, Ok, failure


def test_ok_flattens_to_payload():
    payload = {"status": True, "count": 1, "results": [{"_id": "a"}]}
    result = Ok(payload)
    assert result.ok
    assert result.to_dict() is payload


def test_err_without_payload_flattens_to_failure_record():
    result = Err("Error: Server not responding, due to: refused")
    assert not result.ok
    assert result.to_dict() == {
        "status": False,
        "error": "Error: Server not responding, due to: refused",
    }


def test_err_with_payload_passes_server_body_through():
    body = {"status": False, "error": "Invalid query"}
    assert Err("400", payload=body).to_dict() is body


def test_failure():
    assert failure("nope") == {"status": False, "error": "nope"}
