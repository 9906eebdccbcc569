"""World ID settings"""

from .env import env

WORLDID_APP_ID = env("WORLDID_APP_ID", default="")
WORLDID_API_KEY = env("WORLDID_API_KEY", default="")

# One of: orb, device, phone
WORLDID_VERIFICATION_LEVEL = env("WORLDID_VERIFICATION_LEVEL", default="orb")
WORLDID_API_BASE_URL = env(
    "WORLDID_API_BASE_URL", default="https://developer.worldcoin.org/api/v1"
)
WORLDID_VERIFY_URL = env("WORLDID_VERIFY_URL", default="https://worldcoin.org/verify")

WORLDID_TRUST_SCORE_BOOST = env.int("WORLDID_TRUST_SCORE_BOOST", default=50)
WORLDID_VERIFICATION_BADGE_NAME = env(
    "WORLDID_VERIFICATION_BADGE_NAME", default="World ID Verified"
)
WORLDID_ACTION = env("WORLDID_ACTION", default="verify")

# Timeout in seconds for the call to the World ID verify endpoint
WORLDID_VERIFY_TIMEOUT = env.float("WORLDID_VERIFY_TIMEOUT", default=10.0)

# A verification session must be completed within this many seconds after init
WORLDID_SESSION_TTL_SECONDS = env.int("WORLDID_SESSION_TTL_SECONDS", default=3600)
