"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events.

    The auto-increment primary key preserves insertion order; the domain
    identifier lives in event_id.
    """

    id = models.BigAutoField(primary_key=True)
    event_id = models.UUIDField(unique=True, default=uuid.uuid4, editable=False)
    event_name = models.CharField(max_length=255, blank=True, null=True)
    tags = models.JSONField(blank=True, null=True)
    # Plain decimal text, stored unrounded.
    ticket_price = models.CharField(max_length=64, blank=True, null=True)
    event_date_time = models.DateTimeField(blank=True, null=True)
    duration_minutes = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["event_date_time"], name="events_event_date_time_idx"),
        ]

    def __str__(self) -> str:
        return self.event_name or str(self.event_id)
