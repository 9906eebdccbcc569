"""World ID Models"""

from __future__ import annotations

from datetime import datetime, timedelta

from django.db import models
from django.utils import timezone

from account.models import Account


class VerificationLevel(models.TextChoices):
    ORB = "orb"
    DEVICE = "device"
    PHONE = "phone"


class NullifierHashField(models.CharField):
    """
    Stores a World ID nullifier hash (64 hex characters).
    The value will always be converted to lowercase, so that 2 spellings of
    the same hash are considered equal.
    """

    def __init__(self, *args, **kwargs):
        if "max_length" not in kwargs:
            kwargs["max_length"] = 64
        super().__init__(*args, **kwargs)

    def get_prep_value(self, value):
        value = super().get_prep_value(value)
        if value is None:
            return None
        return str(value).lower()


class VerificationSession(models.Model):
    """
    The pending verification of an account. There is at most 1 session per
    account, starting a new verification replaces the previous session.
    """

    account = models.OneToOneField(
        Account,
        primary_key=True,
        related_name="world_id_session",
        on_delete=models.CASCADE,
    )
    signal = models.TextField(blank=False, null=False)
    action = models.CharField(max_length=255, blank=False, null=False)
    created_at = models.DateTimeField(null=False)
    expires_at = models.DateTimeField(null=False, db_index=True)
    verified = models.BooleanField(default=False)
    verified_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"VerificationSession for #{self.account_id} - verified={self.verified} - expires_at={self.expires_at}"

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at <= (now or timezone.now())

    def matches(self, signal: str) -> bool:
        return self.signal == signal

    def mark_as_verified(self, now: datetime) -> None:
        self.verified = True
        self.verified_at = now

    @classmethod
    def start(
        cls,
        account: Account,
        signal: str,
        action: str,
        ttl: int,
        using: str | None = None,
    ) -> VerificationSession:
        """Stores a new session for the account, overwriting any previous one"""
        now = timezone.now()
        session, _ = cls.objects.using(using).update_or_create(
            account=account,
            defaults={
                "signal": signal,
                "action": action,
                "created_at": now,
                "expires_at": now + timedelta(seconds=ttl),
                "verified": False,
                "verified_at": None,
            },
        )
        return session

    @classmethod
    def expired(cls, now: datetime | None = None):
        return cls.objects.filter(verified=False, expires_at__lte=now or timezone.now())


class NullifierRecord(models.Model):
    """
    Ledger of consumed nullifier hashes. The nullifier hash is the primary key,
    so the database rejects a 2nd verification with the same World ID, even
    for concurrent requests.
    """

    nullifier_hash = NullifierHashField(primary_key=True)
    account = models.ForeignKey(
        Account,
        related_name="world_id_nullifiers",
        on_delete=models.PROTECT,
        null=False,
    )
    verified_at = models.DateTimeField(null=False)
    verification_level = models.CharField(
        max_length=10, choices=VerificationLevel.choices, blank=False
    )

    def __str__(self):
        return f"NullifierRecord {self.nullifier_hash} - account #{self.account_id}"

    @classmethod
    def is_consumed(cls, nullifier_hash: str, using: str | None = None) -> bool:
        return cls.objects.using(using).filter(nullifier_hash=nullifier_hash).exists()


class WorldIdVerification(models.Model):
    """Verification metadata of a verified account"""

    account = models.OneToOneField(
        Account,
        primary_key=True,
        related_name="world_id_verification",
        on_delete=models.CASCADE,
    )
    verified_at = models.DateTimeField(null=False)
    nullifier_hash = NullifierHashField(null=False, blank=False, db_index=True)
    verification_level = models.CharField(
        max_length=10, choices=VerificationLevel.choices, blank=False
    )
    trust_score_boost = models.IntegerField(default=0)

    def __str__(self):
        return f"WorldIdVerification for #{self.account_id} - {self.verification_level} - {self.verified_at}"
