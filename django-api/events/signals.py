"""Django signal handlers for the events app."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from events.services import get_event_service


@receiver(setting_changed)
def reset_event_service(sender, setting, **kwargs):
    """Drop the cached service when the store class setting changes."""
    if setting == "EVENTS_STORE_CLASS":
        get_event_service.cache_clear()
