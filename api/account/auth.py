"""Identity token authentication"""

from typing import Any

import jwt
from django.conf import settings
from django.http import HttpRequest
from ninja_extra.security import HttpBearer
from ninja_jwt.exceptions import InvalidToken, TokenError
from ninja_jwt.settings import api_settings

import api_logging as logging

log = logging.getLogger(__name__)


def get_validated_token(raw_token: str) -> Any:
    """
    Validates an encoded JSON web token and returns the validated claims.

    When IDENTITY_JWT_PUBLIC_KEY is configured only RS256 tokens issued by the
    identity provider are accepted. Without it, the HS256 ninja_jwt access
    tokens signed with SECRET_KEY are used instead.
    """
    messages = []

    if settings.IDENTITY_JWT_PUBLIC_KEY:
        try:
            return jwt.decode(
                raw_token,
                settings.IDENTITY_JWT_PUBLIC_KEY,
                algorithms=["RS256"],
                issuer=settings.IDENTITY_JWT_ISSUER,
            )
        except jwt.exceptions.PyJWTError as e:
            messages.append(
                {
                    "token_class": "IDENTITY_RS256",
                    "token_type": "access",
                    "message": str(e),
                }
            )
    else:
        for AuthToken in api_settings.AUTH_TOKEN_CLASSES:
            try:
                return AuthToken(raw_token)
            except TokenError as e:
                messages.append(
                    {
                        "token_class": AuthToken.__name__,
                        "token_type": AuthToken.token_type,
                        "message": e.args[0],
                    }
                )

    raise InvalidToken(
        {
            "detail": "Given token not valid for any token type",
            "messages": messages,
        }
    )


def verify_credential(raw_token: str) -> str:
    """Returns the account id carried by a valid identity token, raises InvalidToken otherwise"""
    validated_token = get_validated_token(raw_token)
    account_id = validated_token.get(settings.IDENTITY_JWT_ACCOUNT_CLAIM)
    if not account_id:
        raise InvalidToken(
            {"detail": "Token contained no recognizable account identification"}
        )
    return str(account_id)


class JWTAccountAuth(HttpBearer):
    """
    Checks the bearer token and saves the account id in `request.account_id`
    """

    openapi_security_schema_name = "JWTAccountAuth"

    def authenticate(self, request: HttpRequest, token: str) -> Any:
        request.account_id = None
        request.account_id = verify_credential(token)
        return request
