from django.contrib import admin

from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("job_id", "caller_site_identifier", "caller_client_name", "compiler_version", "duration_ms", "memory_bytes", "created_at")
    list_filter = ("compiler_version", "caller_client_name")
    search_fields = ("job_id", "caller_site_identifier")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
