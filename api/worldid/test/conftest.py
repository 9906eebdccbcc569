"""
Fixtures shared by the World ID tests: accounts, identity tokens, and a
stubbed World ID verify endpoint.
"""

# pylint: disable=redefined-outer-name
import pytest
from ninja_jwt.tokens import AccessToken

from account.models import Account
from worldid.client import VerificationOutcome

ZERO_NULLIFIER_HASH = "0" * 64


def access_token_for(account_id: str) -> str:
    token = AccessToken()
    token["uid"] = account_id
    return str(token)


@pytest.fixture
def account():
    return Account.objects.create(id="user-a")


@pytest.fixture
def other_account():
    return Account.objects.create(id="user-b", trust_score=10)


@pytest.fixture
def verified_account():
    return Account.objects.create(
        id="user-verified",
        is_verified=True,
        trust_score=60,
        verification_badges=["World ID Verified"],
    )


@pytest.fixture
def account_token(account):
    return access_token_for(account.id)


@pytest.fixture
def successful_outcome():
    return VerificationOutcome(
        success=True,
        detail="Verification successful",
        code="SUCCESS",
        attribute={"success": True, "action": "verify", "nullifier_hash": ZERO_NULLIFIER_HASH},
    )


@pytest.fixture
def world_id_accepts(mocker, successful_outcome):
    return mocker.patch(
        "worldid.verification.verify_world_id_proof", return_value=successful_outcome
    )


@pytest.fixture
def world_id_rejects(mocker):
    return mocker.patch(
        "worldid.verification.verify_world_id_proof",
        return_value=VerificationOutcome(
            success=False,
            detail="The proof is invalid.",
            code="invalid_proof",
        ),
    )


def proof_payload(signal: str, nullifier_hash: str = ZERO_NULLIFIER_HASH, **kwargs):
    payload = {
        "nullifier_hash": nullifier_hash,
        "merkle_root": "0x0",
        "proof": "deadbeef",
        "verification_level": "orb",
        "signal": signal,
    }
    payload.update(kwargs)
    return payload
