from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping

class CredentialStatus(str, Enum):
    ACTIVE = "active"
    REVOKED = "revoked"

@dataclass(frozen=True)
class Credential:
    credential_id: int
    institution: str
    recipient: str
    credential_hash: str
    issuance_date: str   # ISO-8601 UTC, "Z" suffix
    is_revoked: bool = False

    @property
    def status(self) -> CredentialStatus:
        return CredentialStatus.REVOKED if self.is_revoked else CredentialStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "credential_id": self.credential_id,
            "institution": self.institution,
            "recipient": self.recipient,
            "credential_hash": self.credential_hash,
            "issuance_date": self.issuance_date,
            "is_revoked": self.is_revoked,
            "status": self.status.value,
        }

@dataclass(frozen=True)
class LedgerState:
    """
    Complete ledger contents at one point in time.
    Transitions never mutate a LedgerState; they build a new one and leave
    this one readable as a consistent snapshot. The maps are exposed as
    read-only views so a snapshot cannot be edited behind the host's lock.
    """
    owner: str
    institutions: Mapping[str, bool] = field(default_factory=dict)
    credentials: Mapping[int, Credential] = field(default_factory=dict)
    # credential id -> field -> value
    disclosures: Mapping[int, Mapping[str, str]] = field(default_factory=dict)
    last_credential_id: int = 0

    def __post_init__(self):
        object.__setattr__(self, "institutions", _frozen(self.institutions))
        object.__setattr__(self, "credentials", _frozen(self.credentials))
        object.__setattr__(self, "disclosures", _frozen({
            cid: _frozen(fields) for cid, fields in self.disclosures.items()
        }))

    @classmethod
    def genesis(cls, owner: str) -> "LedgerState":
        return cls(owner=owner)

    def is_registered(self, institution: str) -> bool:
        return self.institutions.get(institution, False)

    def disclosed_fields(self, credential_id: int) -> Mapping[str, str]:
        return self.disclosures.get(credential_id, _EMPTY)

_EMPTY: Mapping[str, str] = MappingProxyType({})

def _frozen(m: Mapping) -> Mapping:
    # views built by an earlier snapshot are shared as-is
    if isinstance(m, MappingProxyType):
        return m
    return MappingProxyType(dict(m))
