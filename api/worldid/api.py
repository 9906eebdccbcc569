"""World ID verification endpoints"""

from ninja import Router
from ninja_extra import status
from ninja_extra.exceptions import APIException

import api_logging as logging
from account.auth import JWTAccountAuth

from .exceptions import AccountNotFound, ConfigurationError, WorldIdError
from .schema import (
    ErrorMessageResponse,
    InitVerificationPayload,
    InitVerificationResponse,
    VerificationStatusResponse,
    VerifyProofPayload,
    VerifyProofResponse,
)
from .verification import get_verification_status, init_verification, verify_proof

log = logging.getLogger(__name__)

router = Router()


class WorldIdRequestException(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "World ID verification failed"


class AccountNotFoundException(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User not found"


class InternalServerErrorException(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"


def to_api_exception(e: WorldIdError) -> APIException:
    if isinstance(e, ConfigurationError):
        log.error("World ID is not configured: %s", e.message)
        return InternalServerErrorException()
    if isinstance(e, AccountNotFound):
        return AccountNotFoundException(e.message, e.code)
    return WorldIdRequestException(e.message, e.code)


ERROR_RESPONSES = {
    400: ErrorMessageResponse,
    401: ErrorMessageResponse,
    404: ErrorMessageResponse,
    500: ErrorMessageResponse,
}


@router.post(
    "init",
    response={200: InitVerificationResponse, **ERROR_RESPONSES},
    auth=JWTAccountAuth(),
)
def init_world_id_verification(request, payload: InitVerificationPayload):
    try:
        result = init_verification(request.account_id, payload.action)
    except WorldIdError as e:
        raise to_api_exception(e) from e
    except Exception as e:
        log.exception("Unexpected error in init_world_id_verification")
        raise InternalServerErrorException() from e

    return InitVerificationResponse(
        verificationUrl=result.verification_url, signal=result.signal
    )


@router.post(
    "verify",
    response={200: VerifyProofResponse, **ERROR_RESPONSES},
    auth=JWTAccountAuth(),
)
def verify_world_id_proof(request, payload: VerifyProofPayload):
    try:
        result = verify_proof(request.account_id, payload.dict())
    except WorldIdError as e:
        raise to_api_exception(e) from e
    except Exception as e:
        log.exception("Unexpected error in verify_world_id_proof")
        raise InternalServerErrorException() from e

    return VerifyProofResponse(
        verified=result.verified,
        trustScoreBoost=result.trust_score_boost,
        verificationBadge=result.verification_badge,
    )


@router.get(
    "status",
    response={200: VerificationStatusResponse, **ERROR_RESPONSES},
    auth=JWTAccountAuth(),
)
def get_world_id_verification_status(request):
    try:
        result = get_verification_status(request.account_id)
    except WorldIdError as e:
        raise to_api_exception(e) from e
    except Exception as e:
        log.exception("Unexpected error in get_world_id_verification_status")
        raise InternalServerErrorException() from e

    return VerificationStatusResponse(
        isVerified=result.is_verified,
        verificationMethod=result.verification_method,
        verifiedAt=result.verified_at,
        trustScore=result.trust_score,
        verificationBadges=result.verification_badges,
    )
