from datetime import timedelta

import pytest
from django.db import IntegrityError
from django.utils import timezone

from worldid.models import NullifierRecord, VerificationSession

pytestmark = pytest.mark.django_db


class TestNullifierRecord:
    def test_nullifier_hash_is_unique(self, account, other_account):
        NullifierRecord.objects.create(
            nullifier_hash="0" * 64,
            account=account,
            verified_at=timezone.now(),
            verification_level="orb",
        )

        with pytest.raises(IntegrityError):
            NullifierRecord.objects.create(
                nullifier_hash="0" * 64,
                account=other_account,
                verified_at=timezone.now(),
                verification_level="device",
            )

    def test_nullifier_hash_uniqueness_ignores_case(self, account, other_account):
        NullifierRecord.objects.create(
            nullifier_hash="ab" * 32,
            account=account,
            verified_at=timezone.now(),
            verification_level="orb",
        )

        with pytest.raises(IntegrityError):
            NullifierRecord.objects.create(
                nullifier_hash="AB" * 32,
                account=other_account,
                verified_at=timezone.now(),
                verification_level="orb",
            )

    def test_is_consumed(self, account):
        assert NullifierRecord.is_consumed("ab" * 32) is False

        NullifierRecord.objects.create(
            nullifier_hash="ab" * 32,
            account=account,
            verified_at=timezone.now(),
            verification_level="phone",
        )

        assert NullifierRecord.is_consumed("ab" * 32) is True
        assert NullifierRecord.is_consumed("AB" * 32) is True
        assert NullifierRecord.is_consumed("cd" * 32) is False


class TestVerificationSession:
    def test_start_overwrites_previous_session(self, account):
        first = VerificationSession.start(account, "signal-1", "verify", ttl=60)
        first.mark_as_verified(timezone.now())
        first.save()

        second = VerificationSession.start(account, "signal-2", "login", ttl=120)

        assert VerificationSession.objects.count() == 1
        session = VerificationSession.objects.get(account=account)
        assert session.signal == "signal-2"
        assert session.action == "login"
        assert session.verified is False
        assert session.verified_at is None
        assert session.expires_at == second.created_at + timedelta(seconds=120)

    def test_matches(self, account):
        session = VerificationSession.start(account, "signal-1", "verify", ttl=60)

        assert session.matches("signal-1") is True
        assert session.matches("signal-2") is False
        assert session.matches("") is False

    def test_is_expired(self, account):
        session = VerificationSession.start(account, "signal-1", "verify", ttl=60)

        assert session.is_expired() is False
        assert session.is_expired(session.created_at + timedelta(seconds=59)) is False
        assert session.is_expired(session.created_at + timedelta(seconds=60)) is True

    def test_expired(self, account, other_account, verified_account):
        now = timezone.now()
        VerificationSession.start(account, "signal-1", "verify", ttl=60)
        VerificationSession.start(other_account, "signal-2", "verify", ttl=3600)
        verified = VerificationSession.start(
            verified_account, "signal-3", "verify", ttl=60
        )
        verified.mark_as_verified(now)
        verified.save()

        expired = VerificationSession.expired(now + timedelta(seconds=120))

        assert list(expired.values_list("account_id", flat=True)) == [account.id]
