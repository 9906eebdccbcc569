from django.contrib import admin

from personhood.model_admin import PersonhoodModelAdmin

from .models import Account


@admin.register(Account)
class AccountAdmin(PersonhoodModelAdmin):
    list_display = ("id", "is_verified", "trust_score", "created_at", "updated_at")
    readonly_fields = ["created_at", "updated_at"]
    search_fields = ("id",)
    list_filter = ["is_verified"]
