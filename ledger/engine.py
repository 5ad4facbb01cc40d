"""
Credential state machine.

Every mutating operation takes the current LedgerState plus the authenticated
caller and returns (new_state, result). On any Err the returned state is the
input state object itself, so a failed call can never leave a partial write.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple

from ledger.errors import LedgerError
from ledger.result import Err, Ok, Result
from ledger.state import Credential, LedgerState

Transition = Tuple[LedgerState, Result]

def register_institution(state: LedgerState, caller: str, institution: str) -> Transition:
    if caller != state.owner:
        return state, Err(LedgerError.UNAUTHORIZED)
    # re-registration overwrites True with True
    institutions = {**state.institutions, institution: True}
    return replace(state, institutions=institutions), Ok(True)

def issue_credential(
    state: LedgerState,
    caller: str,
    recipient: str,
    credential_hash: str,
    issued_at: str,
) -> Transition:
    if not state.is_registered(caller):
        return state, Err(LedgerError.NOT_AUTHORIZED_INSTITUTION)

    new_id = state.last_credential_id + 1
    credential = Credential(
        credential_id=new_id,
        institution=caller,
        recipient=recipient,
        credential_hash=credential_hash,
        issuance_date=issued_at,
        is_revoked=False,
    )
    credentials = {**state.credentials, new_id: credential}
    return replace(state, credentials=credentials, last_credential_id=new_id), Ok(new_id)

def revoke_credential(state: LedgerState, caller: str, credential_id: int) -> Transition:
    credential = state.credentials.get(credential_id)
    if credential is None:
        return state, Err(LedgerError.NOT_FOUND)
    if credential.institution != caller:
        return state, Err(LedgerError.NOT_AUTHORIZED_INSTITUTION)
    if credential.is_revoked:
        return state, Ok(True)

    credentials = {**state.credentials, credential_id: replace(credential, is_revoked=True)}
    return replace(state, credentials=credentials), Ok(True)

def add_selective_disclosure(
    state: LedgerState,
    caller: str,
    credential_id: int,
    field: str,
    value: str,
    max_fields: Optional[int] = None,
) -> Transition:
    credential = state.credentials.get(credential_id)
    if credential is None:
        return state, Err(LedgerError.NOT_FOUND)
    if credential.recipient != caller:
        return state, Err(LedgerError.NOT_AUTHORIZED_RECIPIENT)

    fields = state.disclosed_fields(credential_id)
    if max_fields is not None and field not in fields and len(fields) >= max_fields:
        return state, Err(LedgerError.DISCLOSURE_LIMIT_EXCEEDED)

    disclosures = {**state.disclosures, credential_id: {**fields, field: value}}
    return replace(state, disclosures=disclosures), Ok(True)

def verify_credential(state: LedgerState, credential_id: int, credential_hash: str) -> Result:
    """Publicly callable. Only an unknown id is an error."""
    credential = state.credentials.get(credential_id)
    if credential is None:
        return Err(LedgerError.NOT_FOUND)
    return Ok(credential.credential_hash == credential_hash and not credential.is_revoked)

def get_credential_info(state: LedgerState, credential_id: int) -> Optional[Credential]:
    return state.credentials.get(credential_id)

def get_selective_disclosure(state: LedgerState, credential_id: int, field: str) -> Optional[str]:
    return state.disclosed_fields(credential_id).get(field)
