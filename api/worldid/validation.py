import json
import re

from .models import VerificationLevel

NULLIFIER_HASH_RE = re.compile("^[0-9a-fA-F]{64}$")
HEX_RE = re.compile("^[0-9a-fA-F]+$")


def validate_nullifier_hash(nullifier_hash) -> bool:
    # Nullifier hash should be a 64-character hexadecimal string
    if not isinstance(nullifier_hash, str):
        return False
    return NULLIFIER_HASH_RE.fullmatch(nullifier_hash) is not None


def validate_proof_format(proof) -> bool:
    """
    A proof is accepted when it is either a JSON object or a non-empty hex string.
    This is only a cheap sanity check, the actual proof is checked by the
    World ID verify endpoint.
    """
    if not isinstance(proof, str):
        return False
    try:
        if proof.startswith("{") and proof.endswith("}"):
            json.loads(proof)
            return True
        return HEX_RE.fullmatch(proof) is not None
    except (ValueError, RecursionError):
        return False


def validate_verification_level(verification_level) -> bool:
    return (
        isinstance(verification_level, str)
        and verification_level in VerificationLevel.values
    )
