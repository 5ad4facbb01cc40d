"""
Ledger host configuration.
Defaults live here; each may be overridden through the environment.
"""
import os
from pathlib import Path

OWNER: str = os.getenv("LEDGER_OWNER", "contract-owner")

DATA_DIR = Path(os.getenv("LEDGER_DATA_DIR", "ledger_data"))
STATE_PATH = DATA_DIR / "state.json"
OPERATOR_SK_PATH = DATA_DIR / "operator_sk.pem"
OPERATOR_PK_PATH = DATA_DIR / "operator_pk.pem"

# distinct disclosed fields per credential; overwrites never count
MAX_DISCLOSURE_FIELDS: int = int(os.getenv("LEDGER_MAX_DISCLOSURE_FIELDS", "64"))

HTTP_HOST: str = os.getenv("LEDGER_HTTP_HOST", "127.0.0.1")
HTTP_PORT: int = int(os.getenv("LEDGER_HTTP_PORT", "5001"))
LEDGER_URL: str = os.getenv("LEDGER_URL", f"http://{HTTP_HOST}:{HTTP_PORT}")

LOG_LEVEL: str = os.getenv("LEDGER_LOG_LEVEL", "INFO")
