import hashlib
from typing import Any, Dict

from crypto.canonical import canonicalize

def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()

def credential_content_hash(content: Dict[str, Any]) -> str:
    """
    Hex SHA-256 over canonical JSON of off-ledger credential content.
    The ledger treats the result as an opaque string; this helper only gives
    institutions and verifiers a shared way to compute it.
    """
    return sha256(canonicalize(content)).hex()
