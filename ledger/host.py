"""
Serialized host around the credential state machine.

CredentialLedger is what a service embeds: it holds the current LedgerState,
supplies the issuance clock, and funnels every mutation through one lock so
the id counter and the three mappings advance as a single ordered log.
Reads take the current snapshot without locking; snapshots are never mutated.
"""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from ledger import engine
from ledger.config import MAX_DISCLOSURE_FIELDS, OWNER
from ledger.result import Result
from ledger.state import Credential, LedgerState
from ledger.storage import load_state, save_state

log = logging.getLogger(__name__)

def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")

class CredentialLedger:
    def __init__(
        self,
        owner: str = OWNER,
        *,
        state: Optional[LedgerState] = None,
        clock: Callable[[], str] = utc_now_iso,
        state_path: Optional[Path] = None,
        max_disclosure_fields: Optional[int] = MAX_DISCLOSURE_FIELDS,
    ):
        if state is None:
            state = LedgerState.genesis(owner)
        elif state.owner != owner:
            raise ValueError(f"State belongs to owner {state.owner!r}, not {owner!r}")
        self._state = state
        self._clock = clock
        self._state_path = state_path
        self._max_disclosure_fields = max_disclosure_fields
        self._lock = threading.Lock()

    @classmethod
    def open(cls, state_path: Path, owner: str = OWNER, **kwargs) -> "CredentialLedger":
        """Resume from state_path if it exists, else start empty; persist there."""
        if state_path.exists():
            state = load_state(state_path)
            log.info("Loaded ledger state from %s (last id %d)", state_path, state.last_credential_id)
        else:
            state = None
        return cls(owner, state=state, state_path=state_path, **kwargs)

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def owner(self) -> str:
        return self._state.owner

    def _apply(self, op: str, caller: str, transition: Callable[[LedgerState], engine.Transition]) -> Result:
        with self._lock:
            new_state, result = transition(self._state)
            if not result.is_ok:
                log.info("%s by %r rejected: %s (%d)", op, caller, result.error.name, result.code)
                return result
            if new_state is not self._state:
                if self._state_path is not None:
                    save_state(new_state, self._state_path)
                self._state = new_state
            log.debug("%s by %r -> %r", op, caller, result.value)
            return result

    def register_institution(self, caller: str, institution: str) -> Result:
        return self._apply(
            "register_institution", caller,
            lambda s: engine.register_institution(s, caller, institution),
        )

    def issue_credential(self, caller: str, recipient: str, credential_hash: str) -> Result:
        # clock is read inside the lock so issuance dates follow id order
        return self._apply(
            "issue_credential", caller,
            lambda s: engine.issue_credential(s, caller, recipient, credential_hash, self._clock()),
        )

    def revoke_credential(self, caller: str, credential_id: int) -> Result:
        return self._apply(
            "revoke_credential", caller,
            lambda s: engine.revoke_credential(s, caller, credential_id),
        )

    def add_selective_disclosure(self, caller: str, credential_id: int, field: str, value: str) -> Result:
        return self._apply(
            "add_selective_disclosure", caller,
            lambda s: engine.add_selective_disclosure(
                s, caller, credential_id, field, value, self._max_disclosure_fields,
            ),
        )

    def verify_credential(self, credential_id: int, credential_hash: str) -> Result:
        return engine.verify_credential(self._state, credential_id, credential_hash)

    def get_credential_info(self, credential_id: int) -> Optional[Credential]:
        return engine.get_credential_info(self._state, credential_id)

    def get_selective_disclosure(self, credential_id: int, field: str) -> Optional[str]:
        return engine.get_selective_disclosure(self._state, credential_id, field)
