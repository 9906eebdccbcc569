import secrets
import string
import time
from urllib.parse import urlencode

from django.conf import settings

SALT_ALPHABET = string.ascii_lowercase + string.digits
SALT_LENGTH = 13


def generate_signal(account_id: str, action: str) -> str:
    """Unique signal for one verification attempt: '<account>:<action>:<epoch ms>:<salt>'"""
    timestamp = int(time.time() * 1000)
    salt = "".join(secrets.choice(SALT_ALPHABET) for _ in range(SALT_LENGTH))
    return f"{account_id}:{action}:{timestamp}:{salt}"


def generate_verification_url(app_id: str, signal: str, action: str = "verify") -> str:
    params = urlencode({"app_id": app_id, "signal": signal, "action": action})
    return f"{settings.WORLDID_VERIFY_URL}?{params}"
