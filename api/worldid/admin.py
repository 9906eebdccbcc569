from django.contrib import admin

from personhood.model_admin import PersonhoodModelAdmin

from .models import NullifierRecord, VerificationSession, WorldIdVerification


@admin.register(VerificationSession)
class VerificationSessionAdmin(PersonhoodModelAdmin):
    list_display = (
        "account",
        "action",
        "verified",
        "created_at",
        "expires_at",
        "verified_at",
    )
    search_fields = ("account__id", "signal")
    list_filter = ["verified", "action"]
    raw_id_fields = ["account"]


@admin.register(NullifierRecord)
class NullifierRecordAdmin(PersonhoodModelAdmin):
    list_display = ("nullifier_hash", "account", "verification_level", "verified_at")
    search_fields = ("nullifier_hash", "account__id")
    list_filter = ["verification_level"]
    raw_id_fields = ["account"]

    def has_delete_permission(self, request, obj=None):
        # Deleting a record would allow the same World ID to verify again
        return False


@admin.register(WorldIdVerification)
class WorldIdVerificationAdmin(PersonhoodModelAdmin):
    list_display = (
        "account",
        "verification_level",
        "trust_score_boost",
        "verified_at",
    )
    search_fields = ("account__id", "nullifier_hash")
    list_filter = ["verification_level"]
    raw_id_fields = ["account"]
