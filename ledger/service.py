import logging
from typing import Optional

from flask import Flask, jsonify, request

from crypto.keys import get_operator_sk
from ledger.config import HTTP_HOST, HTTP_PORT, LOG_LEVEL, OWNER, STATE_PATH
from ledger.errors import LedgerError
from ledger.host import CredentialLedger
from ledger.result import Err
from ledger.statuslist import build_statuslist

log = logging.getLogger(__name__)

HTTP_STATUS = {101: 404, 103: 403, 104: 409}

def error_response(error: LedgerError):
    return jsonify({"error": error.name, "code": error.code, "message": error.message}), HTTP_STATUS[error.code]

def bad_request(msg: str):
    return jsonify({"error": msg}), 400

def caller_identity() -> Optional[str]:
    # authenticated upstream; we only read the principal it hands us
    caller = request.headers.get("X-Caller", "").strip()
    return caller or None

def result_response(result, key: str):
    if isinstance(result, Err):
        return error_response(result.error)
    return jsonify({key: result.value}), 200

def create_app(ledger: CredentialLedger, operator_sk=None) -> Flask:
    app = Flask(__name__)
    app.config["LEDGER"] = ledger
    sk = operator_sk if operator_sk is not None else get_operator_sk()

    @app.get("/health")
    def health():
        return {"ok": True, "last_credential_id": ledger.state.last_credential_id}, 200

    @app.post("/institutions")
    def register_institution():
        """
        Request JSON: {"institution": "..."}
        Caller must be the contract owner.
        """
        caller = caller_identity()
        if caller is None:
            return bad_request("X-Caller header required")
        data = request.get_json(force=True, silent=True) or {}
        institution = data.get("institution")
        if not isinstance(institution, str) or not institution:
            return bad_request("Invalid or missing institution")
        return result_response(ledger.register_institution(caller, institution), "registered")

    @app.post("/credentials")
    def issue_credential():
        """
        Request JSON: {"recipient": "...", "credential_hash": "..."}
        """
        caller = caller_identity()
        if caller is None:
            return bad_request("X-Caller header required")
        data = request.get_json(force=True, silent=True) or {}
        recipient = data.get("recipient")
        credential_hash = data.get("credential_hash")
        if not isinstance(recipient, str) or not recipient:
            return bad_request("Invalid or missing recipient")
        if not isinstance(credential_hash, str) or not credential_hash:
            return bad_request("Invalid or missing credential_hash")
        return result_response(ledger.issue_credential(caller, recipient, credential_hash), "credential_id")

    @app.post("/credentials/<int:credential_id>/revoke")
    def revoke_credential(credential_id: int):
        caller = caller_identity()
        if caller is None:
            return bad_request("X-Caller header required")
        return result_response(ledger.revoke_credential(caller, credential_id), "revoked")

    @app.post("/credentials/<int:credential_id>/disclosures")
    def add_disclosure(credential_id: int):
        """
        Request JSON: {"field": "...", "value": "..."}
        """
        caller = caller_identity()
        if caller is None:
            return bad_request("X-Caller header required")
        data = request.get_json(force=True, silent=True) or {}
        field = data.get("field")
        value = data.get("value")
        if not isinstance(field, str) or not isinstance(value, str):
            return bad_request("field and value must be strings")
        return result_response(
            ledger.add_selective_disclosure(caller, credential_id, field, value), "disclosed"
        )

    @app.get("/credentials/<int:credential_id>")
    def credential_info(credential_id: int):
        credential = ledger.get_credential_info(credential_id)
        if credential is None:
            return error_response(LedgerError.NOT_FOUND)
        return jsonify(credential.to_dict()), 200

    @app.get("/credentials/<int:credential_id>/verify")
    def verify_credential(credential_id: int):
        credential_hash = request.args.get("hash")
        if credential_hash is None:
            return bad_request("hash query parameter required")
        return result_response(ledger.verify_credential(credential_id, credential_hash), "valid")

    @app.get("/credentials/<int:credential_id>/disclosures")
    def get_disclosure(credential_id: int):
        # field names are opaque and may hold "/", "?" or be empty
        field = request.args.get("field")
        if field is None:
            return bad_request("field query parameter required")
        value = ledger.get_selective_disclosure(credential_id, field)
        if value is None:
            return jsonify({"error": "not disclosed"}), 404
        return jsonify({"field": field, "value": value}), 200

    @app.get("/statuslist")
    def statuslist():
        return jsonify(build_statuslist(ledger.state, sk))

    return app

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ledger = CredentialLedger.open(STATE_PATH, owner=OWNER)
    log.info("Ledger owner is %r", ledger.owner)
    create_app(ledger).run(host=HTTP_HOST, port=HTTP_PORT)
