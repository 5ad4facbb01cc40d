from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

def ed25519_sign(message: bytes, sk: ECC.EccKey) -> bytes:
    """Pure Ed25519 (RFC 8032) over the message bytes; no pre-hash."""
    return eddsa.new(sk, mode="rfc8032").sign(message)

def ed25519_verify(message: bytes, sig: bytes, pk: ECC.EccKey) -> bool:
    verifier = eddsa.new(pk, mode="rfc8032")
    try:
        verifier.verify(message, sig)
    except ValueError:
        return False
    return True
