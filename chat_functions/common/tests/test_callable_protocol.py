import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from chat_functions.common.callable import (
    CallableError,
    callable_error_handler,
    callable_result,
    canonical_status,
    read_callable_data,
)

app = FastAPI()
app.add_exception_handler(CallableError, callable_error_handler)


@app.post("/echo")
async def _echo(request: Request):
    data = await read_callable_data(request)
    if data == "fail":
        raise CallableError("permission-denied", "nope", {"why": "test"})
    return callable_result(data)


client = TestClient(app)


def test_result_envelope():
    resp = client.post("/echo", json={"data": {"a": 1}})
    assert resp.json() == {"result": {"a": 1}}


def test_error_envelope_maps_code_to_status():
    resp = client.post("/echo", json={"data": "fail"})
    assert resp.status_code == 403
    assert resp.json() == {"error": {"status": "PERMISSION_DENIED", "message": "nope", "details": {"why": "test"}}}


def test_missing_data_member():
    resp = client.post("/echo", json={"a": 1})
    assert resp.status_code == 400
    assert resp.json()["error"]["status"] == "INVALID_ARGUMENT"


def test_canonical_status_and_unknown_code():
    assert canonical_status("deadline-exceeded") == "DEADLINE_EXCEEDED"
    assert CallableError("unavailable", "down").http_status == 503
    with pytest.raises(ValueError):
        CallableError("bogus", "x")
