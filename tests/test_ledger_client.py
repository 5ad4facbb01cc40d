"""Tests for the HTTP client (client.ledger_client) with a mocked session."""

from unittest.mock import MagicMock

import pytest

from client.ledger_client import LedgerClient, LedgerClientError


def _response(status, body):
    r = MagicMock()
    r.status_code = status
    r.json.return_value = body
    r.text = str(body)
    return r


def _client(status=200, body=None, caller="university1"):
    session = MagicMock()
    session.request.return_value = _response(status, body or {})
    return LedgerClient(caller=caller, base_url="http://ledger.test/", session=session), session


def test_issue_sends_caller_header():
    client, session = _client(body={"credential_id": 1})
    assert client.issue_credential("student1", "hash123") == 1

    method, url = session.request.call_args.args
    kwargs = session.request.call_args.kwargs
    assert method == "POST"
    assert url == "http://ledger.test/credentials"
    assert kwargs["headers"] == {"X-Caller": "university1"}
    assert kwargs["json"] == {"recipient": "student1", "credential_hash": "hash123"}
    assert kwargs["timeout"] == 5


def test_anonymous_request_has_no_caller_header():
    client, session = _client(body={"valid": True}, caller=None)
    assert client.verify_credential(1, "hash123") is True
    kwargs = session.request.call_args.kwargs
    assert kwargs["headers"] == {}
    assert kwargs["params"] == {"hash": "hash123"}


def test_error_carries_ledger_code():
    client, _ = _client(status=403, body={"error": "NOT_AUTHORIZED_INSTITUTION", "code": 103})
    with pytest.raises(LedgerClientError) as exc:
        client.revoke_credential(1)
    assert exc.value.status == 403
    assert exc.value.code == 103
    assert exc.value.error == "NOT_AUTHORIZED_INSTITUTION"


def test_error_with_non_json_body():
    client, session = _client(status=500)
    session.request.return_value.json.side_effect = ValueError("no json")
    session.request.return_value.text = "Internal Server Error"
    with pytest.raises(LedgerClientError) as exc:
        client.register_institution("university1")
    assert exc.value.code is None
    assert exc.value.error == "Internal Server Error"


def test_missing_credential_info_is_none():
    client, _ = _client(status=404, body={"error": "NOT_FOUND", "code": 101})
    assert client.get_credential_info(5) is None


def test_missing_disclosure_is_none():
    client, _ = _client(status=404, body={"error": "not disclosed"})
    assert client.get_selective_disclosure(1, "gpa") is None


def test_forbidden_read_still_raises():
    client, _ = _client(status=403, body={"error": "nope"})
    with pytest.raises(LedgerClientError):
        client.get_credential_info(1)


def test_add_selective_disclosure():
    client, session = _client(body={"disclosed": True}, caller="student1")
    assert client.add_selective_disclosure(1, "gpa", "3.8") is True
    assert session.request.call_args.args[1] == "http://ledger.test/credentials/1/disclosures"


def test_disclosure_field_sent_as_query_param():
    client, session = _client(body={"field": "a?b", "value": "3.8"}, caller=None)
    assert client.get_selective_disclosure(1, "a?b") == "3.8"
    method, url = session.request.call_args.args
    assert method == "GET"
    assert url == "http://ledger.test/credentials/1/disclosures"
    assert session.request.call_args.kwargs["params"] == {"field": "a?b"}


# =============================================================================
# Against the Flask service
# =============================================================================


class _FlaskResponse:
    def __init__(self, resp):
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)
        self._resp = resp

    def json(self):
        body = self._resp.get_json(silent=True)
        if body is None:
            raise ValueError("no json")
        return body


class _FlaskSession:
    """Routes LedgerClient requests into a Flask test client."""

    def __init__(self, test_client, base_url):
        self.test_client = test_client
        self.base_url = base_url

    def request(self, method, url, headers=None, timeout=None, json=None, params=None):
        path = url[len(self.base_url):]
        resp = self.test_client.open(path, method=method, headers=headers, json=json, query_string=params)
        return _FlaskResponse(resp)


@pytest.mark.parametrize("field", ["a?b", "a#b", "dates/2024", "x&y=z"])
def test_disclosure_round_trip_over_service(ledger, operator_sk, field):
    from ledger.service import create_app

    test_client = create_app(ledger, operator_sk=operator_sk).test_client()
    base = "http://ledger.test"

    def as_caller(caller):
        return LedgerClient(caller=caller, base_url=base, session=_FlaskSession(test_client, base))

    assert as_caller("contract-owner").register_institution("university1") is True
    assert as_caller("university1").issue_credential("student1", "hash123") == 1
    assert as_caller("student1").add_selective_disclosure(1, field, "3.8") is True
    assert as_caller(None).get_selective_disclosure(1, field) == "3.8"
    assert as_caller(None).get_selective_disclosure(1, "other") is None
