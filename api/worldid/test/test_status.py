import pytest

from worldid.exceptions import AccountNotFound
from worldid.models import WorldIdVerification
from worldid.test.conftest import proof_payload
from worldid.verification import (
    get_verification_status,
    init_verification,
    verify_proof,
)

pytestmark = pytest.mark.django_db


class TestVerificationStatus:
    def test_status_of_unknown_account(self):
        with pytest.raises(AccountNotFound):
            get_verification_status("nobody")

    def test_status_of_unverified_account(self, other_account):
        status = get_verification_status(other_account.id)

        assert status.is_verified is False
        assert status.verification_method is None
        assert status.verified_at is None
        assert status.trust_score == 10
        assert status.verification_badges == []

    def test_status_after_verification(self, account, world_id_accepts):
        signal = init_verification(account.id, "verify").signal
        verify_proof(account.id, proof_payload(signal, verification_level="device"))

        status = get_verification_status(account.id)
        verification = WorldIdVerification.objects.get(account=account)

        assert status.is_verified is True
        assert status.verification_method == "device"
        assert status.verified_at == verification.verified_at
        assert status.trust_score == 50
        assert status.verification_badges == ["World ID Verified"]
