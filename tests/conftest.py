"""Pytest fixtures for the credential ledger tests."""
import pytest
from Crypto.PublicKey import ECC

from ledger.host import CredentialLedger
from ledger.state import LedgerState

OWNER = "contract-owner"
FIXED_NOW = "2026-01-15T09:30:00Z"


@pytest.fixture
def genesis() -> LedgerState:
    return LedgerState.genesis(OWNER)


@pytest.fixture
def ledger() -> CredentialLedger:
    """Fresh in-memory ledger with a fixed issuance clock."""
    return CredentialLedger(OWNER, clock=lambda: FIXED_NOW)


@pytest.fixture
def issued_ledger(ledger) -> CredentialLedger:
    """Ledger with university1 registered and credential 1 issued to student1."""
    ledger.register_institution(OWNER, "university1")
    ledger.issue_credential("university1", "student1", "hash123")
    return ledger


@pytest.fixture(scope="session")
def operator_sk() -> ECC.EccKey:
    return ECC.generate(curve="Ed25519")
