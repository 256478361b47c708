from django.db import models


class Profile(models.Model):
    """Cost and caller of one successful compilation."""

    job_id                 = models.UUIDField(db_index=True)
    duration_ms            = models.PositiveIntegerField()
    memory_bytes           = models.PositiveBigIntegerField()
    compiler_version       = models.CharField(max_length=255)
    caller_client_name     = models.TextField(null=True, blank=True)
    caller_site_identifier = models.TextField(null=True, blank=True)
    created_at             = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.job_id} ({self.caller_site_identifier})"
