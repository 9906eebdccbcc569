from datetime import timedelta
from urllib.parse import parse_qs, urlparse

import pytest

from account.models import Account
from worldid.exceptions import AlreadyVerified, ConfigurationError
from worldid.models import VerificationSession
from worldid.verification import init_verification

pytestmark = pytest.mark.django_db


class TestInitVerification:
    def test_init_creates_pending_session(self, account):
        result = init_verification(account.id, "verify")

        assert result.signal.startswith("user-a:verify:")
        query = parse_qs(urlparse(result.verification_url).query)
        assert query["signal"] == [result.signal]
        assert query["app_id"] == ["app_staging_0123456789abcdef"]
        assert query["action"] == ["verify"]

        session = VerificationSession.objects.get(account=account)
        assert session.signal == result.signal
        assert session.action == "verify"
        assert session.verified is False
        assert session.verified_at is None
        assert session.expires_at - session.created_at == timedelta(seconds=3600)

    def test_init_uses_configured_action_by_default(self, settings, account):
        settings.WORLDID_ACTION = "verify-human"

        result = init_verification(account.id)

        assert ":verify-human:" in result.signal
        assert VerificationSession.objects.get(account=account).action == "verify-human"

    def test_init_twice_overwrites_session(self, account):
        first = init_verification(account.id, "verify")
        second = init_verification(account.id, "verify")

        assert first.signal != second.signal
        assert VerificationSession.objects.filter(account=account).count() == 1
        assert VerificationSession.objects.get(account=account).signal == second.signal

    def test_init_resets_a_consumed_session(self, account):
        init_verification(account.id, "verify")
        VerificationSession.objects.filter(account=account).update(verified=True)

        result = init_verification(account.id, "verify")

        session = VerificationSession.objects.get(account=account)
        assert session.signal == result.signal
        assert session.verified is False

    def test_init_for_verified_account(self, verified_account):
        with pytest.raises(AlreadyVerified):
            init_verification(verified_account.id, "verify")

        assert not VerificationSession.objects.filter(account=verified_account).exists()

    def test_init_creates_missing_account(self):
        result = init_verification("fresh-user", "verify")

        account = Account.objects.get(pk="fresh-user")
        assert account.is_verified is False
        assert account.trust_score == 0
        assert account.verification_badges == []
        assert VerificationSession.objects.get(account=account).signal == result.signal

    def test_init_without_configuration(self, settings, account):
        settings.WORLDID_API_KEY = ""

        with pytest.raises(ConfigurationError):
            init_verification(account.id, "verify")

        assert not VerificationSession.objects.filter(account=account).exists()
