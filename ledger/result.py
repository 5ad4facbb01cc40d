from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ledger.errors import LedgerError

T = TypeVar("T")

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

@dataclass(frozen=True)
class Err:
    error: LedgerError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> int:
        return self.error.code

Result = Union[Ok[T], Err]
