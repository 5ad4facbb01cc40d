from pathlib import Path
from Crypto.PublicKey import ECC

from ledger.config import OPERATOR_PK_PATH, OPERATOR_SK_PATH

def generate_operator_keypair(sk_path: Path = OPERATOR_SK_PATH, pk_path: Path = OPERATOR_PK_PATH) -> ECC.EccKey:
    sk_path.parent.mkdir(parents=True, exist_ok=True)

    sk = ECC.generate(curve="Ed25519")
    sk_path.write_text(sk.export_key(format="PEM"), encoding="utf-8")
    pk_path.write_text(sk.public_key().export_key(format="PEM"), encoding="utf-8")
    return sk

def load_operator_sk(sk_path: Path = OPERATOR_SK_PATH) -> ECC.EccKey:
    return ECC.import_key(sk_path.read_text(encoding="utf-8"))

def load_operator_pk(pk_path: Path = OPERATOR_PK_PATH) -> ECC.EccKey:
    return ECC.import_key(pk_path.read_text(encoding="utf-8"))

def get_operator_sk(sk_path: Path = OPERATOR_SK_PATH, pk_path: Path = OPERATOR_PK_PATH) -> ECC.EccKey:
    """Load the operator signing key, creating a keypair on first use."""
    if not sk_path.exists():
        return generate_operator_keypair(sk_path, pk_path)
    return load_operator_sk(sk_path)
