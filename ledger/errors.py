from enum import Enum

class LedgerError(Enum):
    """
    Typed failures returned by the engine.
    Codes 101 and 103 are shared with existing callers; 104 is ours.
    """
    NOT_FOUND = (101, "credential does not exist")
    UNAUTHORIZED = (103, "only the contract owner may do this")
    NOT_AUTHORIZED_INSTITUTION = (103, "caller is not the authorized institution")
    NOT_AUTHORIZED_RECIPIENT = (103, "caller is not the credential recipient")
    DISCLOSURE_LIMIT_EXCEEDED = (104, "too many disclosed fields for this credential")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]
