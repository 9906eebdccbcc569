"""Account Models"""

from django.db import models

import api_logging as logging

log = logging.getLogger(__name__)


class AccountIdField(models.CharField):
    """
    Field to store the opaque account id issued by the identity provider
    """

    def __init__(self, *args, **kwargs):
        if "max_length" not in kwargs:
            kwargs["max_length"] = 128
        super().__init__(*args, **kwargs)


class Account(models.Model):
    """
    An application account. Accounts are created by the identity provider, this
    service only tracks their proof-of-personhood state.
    """

    id = AccountIdField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    is_verified = models.BooleanField(default=False, db_index=True)
    trust_score = models.IntegerField(default=0)
    verification_badges = models.JSONField(
        default=list,
        blank=True,
        help_text="Ordered list of badge names awarded to this account",
    )

    def __str__(self):
        return f"Account #{self.id} - verified={self.is_verified} - trust_score={self.trust_score}"

    def award_verification(self, trust_score_boost: int, badge: str) -> None:
        """Flag the account as verified and apply the trust score boost and badge.
        The caller is responsible for saving the account."""
        self.is_verified = True
        self.trust_score += trust_score_boost
        self.verification_badges = [*(self.verification_badges or []), badge]
