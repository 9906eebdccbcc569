"""Ninja JWT settings."""
from datetime import timedelta

from .env import env

NINJA_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(
        minutes=env.int("IDENTITY_ACCESS_TOKEN_LIFETIME", default=1440)
    ),
}

# RS256 tokens issued by the identity provider. When the public key is not set
# only the HS256 ninja_jwt tokens signed with SECRET_KEY are accepted.
IDENTITY_JWT_PUBLIC_KEY = env("IDENTITY_JWT_PUBLIC_KEY", default=None)
IDENTITY_JWT_ISSUER = env("IDENTITY_JWT_ISSUER", default="personhood-identity")
IDENTITY_JWT_ACCOUNT_CLAIM = env("IDENTITY_JWT_ACCOUNT_CLAIM", default="uid")
