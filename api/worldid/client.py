"""Client for the World ID developer portal verify endpoint"""

from dataclasses import dataclass
from typing import Any, Optional

import requests
from django.conf import settings

import api_logging as logging

from .config import WorldIdConfig

log = logging.getLogger(__name__)

NETWORK_ERROR_DETAIL = "Network error during verification"
NETWORK_ERROR_CODE = "NETWORK_ERROR"


@dataclass(frozen=True)
class VerificationRequest:
    signal: str
    nullifier_hash: str
    merkle_root: str
    proof: str
    verification_level: str

    def to_json(self) -> dict:
        return {
            "nullifier_hash": self.nullifier_hash,
            "merkle_root": self.merkle_root,
            "proof": self.proof,
            "verification_level": self.verification_level,
            "signal": self.signal,
        }


@dataclass(frozen=True)
class VerificationOutcome:
    success: bool
    detail: str
    code: str
    attribute: Optional[Any] = None


def verify_world_id_proof(
    proof: VerificationRequest, config: WorldIdConfig
) -> VerificationOutcome:
    """
    Submits the proof to World ID. This never raises, every failure
    (including timeouts and connection errors) is reported in the outcome.
    """
    url = f"{config.base_url}/verify/{config.app_id}"
    try:
        response = requests.post(
            url,
            json=proof.to_json(),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.api_key}",
            },
            timeout=settings.WORLDID_VERIFY_TIMEOUT,
        )

        if not response.ok:
            try:
                error_data = response.json()
            except ValueError:
                error_data = None
            if not isinstance(error_data, dict):
                error_data = {}
            log.warning(
                "World ID verification failed: status=%s body=%s",
                response.status_code,
                error_data,
            )
            return VerificationOutcome(
                success=False,
                detail=error_data.get("detail") or "Verification failed",
                code=error_data.get("code") or "VERIFICATION_ERROR",
            )

        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected verify response: {data!r}")

        return VerificationOutcome(
            success=True,
            detail=data.get("detail") or "Verification successful",
            code=data.get("code") or "SUCCESS",
            attribute=data,
        )
    except (requests.RequestException, ValueError) as e:
        log.error("Error verifying World ID proof: %s", e)
        return VerificationOutcome(
            success=False,
            detail=NETWORK_ERROR_DETAIL,
            code=NETWORK_ERROR_CODE,
        )
