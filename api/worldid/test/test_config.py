import pytest

from worldid.config import (
    WorldIdConfig,
    load_config,
    trust_score_boost,
    verification_action,
    verification_badge_name,
)
from worldid.exceptions import ConfigurationError


class TestLoadConfig:
    def test_load_config(self):
        assert load_config() == WorldIdConfig(
            app_id="app_staging_0123456789abcdef",
            api_key="api_test_key",
            verification_level="orb",
            base_url="https://developer.worldcoin.org/api/v1",
        )

    def test_defaults(self, settings):
        settings.WORLDID_VERIFICATION_LEVEL = ""
        settings.WORLDID_API_BASE_URL = ""

        config = load_config()

        assert config.verification_level == "orb"
        assert config.base_url == "https://developer.worldcoin.org/api/v1"

    def test_trailing_slash_is_stripped_from_base_url(self, settings):
        settings.WORLDID_API_BASE_URL = "https://developer.worldcoin.org/api/v2/"
        assert load_config().base_url == "https://developer.worldcoin.org/api/v2"

    @pytest.mark.parametrize("setting_name", ["WORLDID_APP_ID", "WORLDID_API_KEY"])
    def test_missing_identity_is_fatal(self, settings, setting_name):
        setattr(settings, setting_name, "")

        with pytest.raises(ConfigurationError):
            load_config()

    def test_unknown_verification_level(self, settings):
        settings.WORLDID_VERIFICATION_LEVEL = "retina"

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert "retina" in exc_info.value.message


def test_trust_score_boost(settings):
    assert trust_score_boost() == 50

    settings.WORLDID_TRUST_SCORE_BOOST = "25"
    assert trust_score_boost() == 25

    settings.WORLDID_TRUST_SCORE_BOOST = None
    assert trust_score_boost() == 50


def test_verification_badge_name(settings):
    assert verification_badge_name() == "World ID Verified"

    settings.WORLDID_VERIFICATION_BADGE_NAME = "Human"
    assert verification_badge_name() == "Human"


def test_verification_action(settings):
    assert verification_action() == "verify"

    settings.WORLDID_ACTION = "verify-human"
    assert verification_action() == "verify-human"

    settings.WORLDID_ACTION = ""
    assert verification_action() == "verify"
