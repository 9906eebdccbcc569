import pytest


@pytest.fixture(autouse=True)
def worldid_settings(settings):
    settings.WORLDID_APP_ID = "app_staging_0123456789abcdef"
    settings.WORLDID_API_KEY = "api_test_key"
    settings.WORLDID_VERIFICATION_LEVEL = "orb"
    settings.WORLDID_API_BASE_URL = "https://developer.worldcoin.org/api/v1"
    settings.WORLDID_VERIFY_URL = "https://worldcoin.org/verify"
    settings.WORLDID_TRUST_SCORE_BOOST = 50
    settings.WORLDID_VERIFICATION_BADGE_NAME = "World ID Verified"
    settings.WORLDID_ACTION = "verify"
    settings.WORLDID_VERIFY_TIMEOUT = 10.0
    settings.WORLDID_SESSION_TTL_SECONDS = 3600
    settings.IDENTITY_JWT_PUBLIC_KEY = None
