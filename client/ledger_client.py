from typing import Any, Dict, Optional

import requests

from ledger.config import LEDGER_URL

class LedgerClientError(Exception):
    def __init__(self, status: int, error: str, code: Optional[int] = None):
        self.status = status
        self.error = error
        self.code = code
        super().__init__(f"{status} {error}" + (f" (code {code})" if code is not None else ""))

class LedgerClient:
    """
    Thin HTTP client for the ledger service.
    `caller` is sent as X-Caller on every request; the service trusts it.
    """

    def __init__(self, caller: Optional[str] = None, base_url: str = LEDGER_URL, timeout: float = 5,
                 session: Optional[requests.Session] = None):
        self.caller = caller
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        headers = kwargs.pop("headers", {})
        if self.caller:
            headers["X-Caller"] = self.caller
        r = self.session.request(method, f"{self.base_url}{path}", headers=headers,
                                 timeout=self.timeout, **kwargs)
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = {"error": r.text}
            raise LedgerClientError(r.status_code, body.get("error", "unknown"), body.get("code"))
        return r.json()

    def register_institution(self, institution: str) -> bool:
        return self._request("POST", "/institutions", json={"institution": institution})["registered"]

    def issue_credential(self, recipient: str, credential_hash: str) -> int:
        body = {"recipient": recipient, "credential_hash": credential_hash}
        return self._request("POST", "/credentials", json=body)["credential_id"]

    def revoke_credential(self, credential_id: int) -> bool:
        return self._request("POST", f"/credentials/{credential_id}/revoke")["revoked"]

    def add_selective_disclosure(self, credential_id: int, field: str, value: str) -> bool:
        body = {"field": field, "value": value}
        return self._request("POST", f"/credentials/{credential_id}/disclosures", json=body)["disclosed"]

    def verify_credential(self, credential_id: int, credential_hash: str) -> bool:
        return self._request("GET", f"/credentials/{credential_id}/verify",
                             params={"hash": credential_hash})["valid"]

    def get_credential_info(self, credential_id: int) -> Optional[Dict[str, Any]]:
        try:
            return self._request("GET", f"/credentials/{credential_id}")
        except LedgerClientError as e:
            if e.status == 404:
                return None
            raise

    def get_selective_disclosure(self, credential_id: int, field: str) -> Optional[str]:
        try:
            return self._request("GET", f"/credentials/{credential_id}/disclosures",
                                 params={"field": field})["value"]
        except LedgerClientError as e:
            if e.status == 404:
                return None
            raise

    def statuslist(self) -> Dict[str, Any]:
        return self._request("GET", "/statuslist")
