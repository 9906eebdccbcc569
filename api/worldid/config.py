"""World ID configuration, resolved from the django settings at call time"""

from dataclasses import dataclass

from django.conf import settings

from .exceptions import ConfigurationError
from .models import VerificationLevel


@dataclass(frozen=True)
class WorldIdConfig:
    app_id: str
    api_key: str
    verification_level: str
    base_url: str


def load_config() -> WorldIdConfig:
    app_id = settings.WORLDID_APP_ID
    api_key = settings.WORLDID_API_KEY
    verification_level = settings.WORLDID_VERIFICATION_LEVEL or VerificationLevel.ORB
    base_url = settings.WORLDID_API_BASE_URL or "https://developer.worldcoin.org/api/v1"

    if not app_id or not api_key:
        raise ConfigurationError()

    if verification_level not in VerificationLevel.values:
        raise ConfigurationError(
            f"Invalid WORLDID_VERIFICATION_LEVEL '{verification_level}', expected one of {', '.join(VerificationLevel.values)}"
        )

    return WorldIdConfig(
        app_id=app_id,
        api_key=api_key,
        verification_level=str(verification_level),
        base_url=base_url.rstrip("/"),
    )


def trust_score_boost() -> int:
    boost = settings.WORLDID_TRUST_SCORE_BOOST
    return int(boost) if boost not in (None, "") else 50


def verification_badge_name() -> str:
    return settings.WORLDID_VERIFICATION_BADGE_NAME or "World ID Verified"


def verification_action() -> str:
    return settings.WORLDID_ACTION or "verify"
