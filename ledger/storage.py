from pathlib import Path
import json
import os
import tempfile
from typing import Any, Dict

from ledger.config import STATE_PATH
from ledger.state import Credential, LedgerState

def state_to_dict(state: LedgerState) -> Dict[str, Any]:
    return {
        "version": "v1",
        "owner": state.owner,
        "last_credential_id": state.last_credential_id,
        "institutions": dict(state.institutions),
        "credentials": {str(cid): c.to_dict() for cid, c in state.credentials.items()},
        "disclosures": {
            str(cid): dict(fields) for cid, fields in state.disclosures.items() if fields
        },
    }

def state_from_dict(data: Dict[str, Any]) -> LedgerState:
    credentials = {}
    for cid, c in data.get("credentials", {}).items():
        credentials[int(cid)] = Credential(
            credential_id=int(c["credential_id"]),
            institution=c["institution"],
            recipient=c["recipient"],
            credential_hash=c["credential_hash"],
            issuance_date=c["issuance_date"],
            is_revoked=bool(c["is_revoked"]),
        )
    return LedgerState(
        owner=data["owner"],
        institutions={k: bool(v) for k, v in data.get("institutions", {}).items()},
        credentials=credentials,
        disclosures={int(cid): fields for cid, fields in data.get("disclosures", {}).items()},
        last_credential_id=int(data.get("last_credential_id", 0)),
    )

def save_state(state: LedgerState, path: Path = STATE_PATH) -> None:
    """
    Write to a sibling temp file and rename it over `path`, so the state file
    is always either the previous snapshot or the new one, never a truncation.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(state_to_dict(state), indent=2, sort_keys=True))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise

def load_state(path: Path = STATE_PATH) -> LedgerState:
    if not path.exists():
        raise FileNotFoundError(f"No ledger state at {path}")
    return state_from_dict(json.loads(path.read_text(encoding="utf-8")))
