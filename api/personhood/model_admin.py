from django.contrib import admin


class PersonhoodModelAdmin(admin.ModelAdmin):
    """
    This extends the default ModelAdmin in django and:
    - sets `show_full_result_count` to `False`, counting the rows of the
    nullifier ledger gets slow once it grows, and the count has no real value.
    Users should rely on the search function to narrow down the list of results.
    - makes the objects read-only by default. Verification state is written by
    the verification flow only, editing it by hand would break the
    one-nullifier-per-account binding.
    """

    show_full_result_count = False

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
