from typing import Any, Dict

from Crypto.PublicKey import ECC

from crypto.canonical import canonicalize
from crypto.encoding import b64url_decode, b64url_encode
from crypto.signing import ed25519_sign, ed25519_verify
from ledger.state import LedgerState

def build_statuslist(state: LedgerState, sk: ECC.EccKey) -> Dict[str, Any]:
    """
    Signed snapshot of which credential ids are revoked.
    Lets a verifier check revocation offline against the operator key.
    """
    status = {
        "version": "v1",
        "owner": state.owner,
        "last_credential_id": state.last_credential_id,
        "revoked_ids": sorted(cid for cid, c in state.credentials.items() if c.is_revoked),
    }
    sig = ed25519_sign(canonicalize(status), sk)
    return {**status, "sig": b64url_encode(sig)}

def verify_statuslist(statuslist: Dict[str, Any], pk: ECC.EccKey) -> bool:
    body = {k: v for k, v in statuslist.items() if k != "sig"}
    sig = statuslist.get("sig")
    if not sig:
        return False
    return ed25519_verify(canonicalize(body), b64url_decode(sig), pk)
