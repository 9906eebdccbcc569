"""
World ID verification flow.

A verification goes through 2 steps:

- `init_verification` creates (or replaces) the pending session of the account,
  holding the signal the proof must be bound to
- `verify_proof` checks the proof and, when valid, marks the account as
  verified and burns the nullifier hash in a single transaction

A nullifier hash can only be burned once, across all accounts. This is
enforced by the primary key of the `NullifierRecord` table, so that of 2
concurrent requests with the same nullifier only 1 can commit.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.utils import timezone

import api_logging as logging
from account.models import Account

from .challenge import generate_signal, generate_verification_url
from .client import (
    VerificationOutcome,
    VerificationRequest,
    verify_world_id_proof,
)
from .config import (
    WorldIdConfig,
    load_config,
    trust_score_boost,
    verification_action,
    verification_badge_name,
)
from .exceptions import (
    AccountNotFound,
    AlreadyVerified,
    InvalidFormat,
    InvalidSession,
    MissingFields,
    NullifierAlreadyUsed,
    RemoteVerificationFailed,
)
from .models import NullifierRecord, VerificationSession, WorldIdVerification
from .validation import (
    validate_nullifier_hash,
    validate_proof_format,
    validate_verification_level,
)

log = logging.getLogger(__name__)

REQUIRED_PROOF_FIELDS = (
    "nullifier_hash",
    "merkle_root",
    "proof",
    "verification_level",
    "signal",
)

ProofVerifier = Callable[[VerificationRequest, WorldIdConfig], VerificationOutcome]


@dataclass(frozen=True)
class InitVerificationResult:
    verification_url: str
    signal: str


@dataclass(frozen=True)
class VerifyProofResult:
    verified: bool
    trust_score_boost: int
    verification_badge: str


@dataclass(frozen=True)
class VerificationStatus:
    is_verified: bool
    verification_method: Optional[str]
    verified_at: Optional[datetime]
    trust_score: int
    verification_badges: List[str]


def _truncate(value: str, length: int = 20) -> str:
    return value if len(value) <= length else f"{value[:length]}..."


def get_account(account_id: str, using: str = DEFAULT_DB_ALIAS) -> Account:
    try:
        return Account.objects.using(using).get(pk=account_id)
    except Account.DoesNotExist as e:
        raise AccountNotFound() from e


def init_verification(
    account_id: str,
    action: Optional[str] = None,
    using: str = DEFAULT_DB_ALIAS,
) -> InitVerificationResult:
    account, created = Account.objects.using(using).get_or_create(pk=account_id)
    if created:
        log.info("Created account %s on first verification attempt", account_id)
    elif account.is_verified:
        log.info("Account %s is already verified, not starting a session", account_id)
        raise AlreadyVerified()

    config = load_config()
    action = action or verification_action()

    signal = generate_signal(account_id, action)
    verification_url = generate_verification_url(config.app_id, signal, action)

    VerificationSession.start(
        account,
        signal=signal,
        action=action,
        ttl=settings.WORLDID_SESSION_TTL_SECONDS,
        using=using,
    )
    log.info(
        "Started World ID verification session for account %s, action=%s signal=%s",
        account_id,
        action,
        _truncate(signal),
    )

    return InitVerificationResult(verification_url=verification_url, signal=signal)


def _get_valid_session(
    account_id: str, signal: str, now: datetime, using: str, for_update=False
) -> VerificationSession:
    queryset = VerificationSession.objects.using(using)
    if for_update:
        queryset = queryset.select_for_update()

    session = queryset.filter(account_id=account_id).first()
    if session is None or not session.matches(signal):
        raise InvalidSession()
    if session.verified:
        raise InvalidSession("Verification session has already been used")
    if session.is_expired(now):
        raise InvalidSession("Verification session expired")
    return session


def _parse_proof_payload(payload: Mapping[str, Any]) -> VerificationRequest:
    missing = [field for field in REQUIRED_PROOF_FIELDS if not payload.get(field)]
    if missing:
        raise MissingFields(missing)

    proof_request = VerificationRequest(
        signal=payload["signal"],
        nullifier_hash=payload["nullifier_hash"],
        merkle_root=payload["merkle_root"],
        proof=payload["proof"],
        verification_level=payload["verification_level"],
    )

    if not validate_nullifier_hash(
        proof_request.nullifier_hash
    ) or not validate_proof_format(proof_request.proof):
        raise InvalidFormat()

    if not isinstance(proof_request.signal, str) or not isinstance(
        proof_request.merkle_root, str
    ):
        raise InvalidFormat()

    if not validate_verification_level(proof_request.verification_level):
        raise InvalidFormat("Invalid verification level")

    return proof_request


def verify_proof(
    account_id: str,
    payload: Mapping[str, Any],
    using: str = DEFAULT_DB_ALIAS,
    verifier: Optional[ProofVerifier] = None,
) -> VerifyProofResult:
    proof_request = _parse_proof_payload(payload)

    account = get_account(account_id, using=using)
    if account.is_verified:
        raise AlreadyVerified("User is already verified")

    _get_valid_session(account_id, proof_request.signal, timezone.now(), using)

    if NullifierRecord.is_consumed(proof_request.nullifier_hash, using=using):
        log.info(
            "Nullifier %s already used, rejecting verification of account %s",
            proof_request.nullifier_hash,
            account_id,
        )
        raise NullifierAlreadyUsed()

    config = load_config()
    outcome = (verifier or verify_world_id_proof)(proof_request, config)
    if not outcome.success:
        log.info(
            "World ID rejected the proof of account %s: code=%s detail=%s",
            account_id,
            outcome.code,
            outcome.detail,
        )
        raise RemoteVerificationFailed(outcome.detail, outcome.code)

    boost = trust_score_boost()
    badge = verification_badge_name()

    try:
        _commit_verification(account_id, proof_request, boost, badge, using)
    except IntegrityError as e:
        # Another request burned the same nullifier after our check above
        log.warning(
            "Nullifier %s was burned concurrently, rejecting verification of account %s",
            proof_request.nullifier_hash,
            account_id,
        )
        raise NullifierAlreadyUsed() from e

    log.info(
        "Account %s verified with World ID, level=%s boost=%s",
        account_id,
        proof_request.verification_level,
        boost,
    )
    return VerifyProofResult(
        verified=True, trust_score_boost=boost, verification_badge=badge
    )


def _commit_verification(
    account_id: str,
    proof_request: VerificationRequest,
    boost: int,
    badge: str,
    using: str,
) -> None:
    """
    Writes the account, the nullifier record and the session in one transaction.
    The account and session are locked and checked again, as they might have
    changed while the proof was being verified remotely.
    """
    with transaction.atomic(using=using):
        now = timezone.now()

        try:
            account = (
                Account.objects.using(using).select_for_update().get(pk=account_id)
            )
        except Account.DoesNotExist as e:
            raise AccountNotFound() from e
        if account.is_verified:
            raise AlreadyVerified("User is already verified")

        session = _get_valid_session(
            account_id, proof_request.signal, now, using, for_update=True
        )

        NullifierRecord.objects.using(using).create(
            nullifier_hash=proof_request.nullifier_hash,
            account=account,
            verified_at=now,
            verification_level=proof_request.verification_level,
        )

        account.award_verification(boost, badge)
        account.save(
            using=using,
            update_fields=[
                "is_verified",
                "trust_score",
                "verification_badges",
                "updated_at",
            ],
        )

        WorldIdVerification.objects.using(using).update_or_create(
            account=account,
            defaults={
                "verified_at": now,
                "nullifier_hash": proof_request.nullifier_hash,
                "verification_level": proof_request.verification_level,
                "trust_score_boost": boost,
            },
        )

        session.mark_as_verified(now)
        session.save(using=using, update_fields=["verified", "verified_at"])


def get_verification_status(
    account_id: str, using: str = DEFAULT_DB_ALIAS
) -> VerificationStatus:
    account = get_account(account_id, using=using)

    world_id_verification = (
        WorldIdVerification.objects.using(using).filter(account_id=account_id).first()
    )

    return VerificationStatus(
        is_verified=account.is_verified,
        verification_method=world_id_verification.verification_level
        if world_id_verification
        else None,
        verified_at=world_id_verification.verified_at
        if world_id_verification
        else None,
        trust_score=account.trust_score,
        verification_badges=list(account.verification_badges or []),
    )
