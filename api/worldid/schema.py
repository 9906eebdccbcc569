from datetime import datetime
from typing import List, Optional

from ninja import Schema


class ErrorMessageResponse(Schema):
    detail: str


class InitVerificationPayload(Schema):
    action: Optional[str] = None


class InitVerificationResponse(Schema):
    success: bool = True
    verificationUrl: str
    signal: str


# All fields are optional here, missing fields are reported by the
# verification flow itself
class VerifyProofPayload(Schema):
    nullifier_hash: Optional[str] = None
    merkle_root: Optional[str] = None
    proof: Optional[str] = None
    verification_level: Optional[str] = None
    signal: Optional[str] = None


class VerifyProofResponse(Schema):
    success: bool = True
    verified: bool
    trustScoreBoost: int
    verificationBadge: str


class VerificationStatusResponse(Schema):
    success: bool = True
    isVerified: bool
    verificationMethod: Optional[str] = None
    verifiedAt: Optional[datetime] = None
    trustScore: int
    verificationBadges: List[str]
