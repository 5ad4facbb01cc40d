import json
from typing import Any

def canonicalize(obj: Any) -> bytes:
    """
    Deterministic UTF-8 JSON bytes used wherever ledger data is hashed or signed.
    Keys are sorted, whitespace is dropped and non-ASCII is kept as-is, so the
    same state always yields the same bytes.
    """
    text = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return text.encode("utf-8")
