from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from events.services.event_service import EventService


@lru_cache(maxsize=1)
def get_event_service() -> EventService:
    """Return the process-wide EventService backed by EVENTS_STORE_CLASS.

    The store is built once so that in-process stores keep their records
    across requests.
    """
    store_class = import_string(settings.EVENTS_STORE_CLASS)
    return EventService(store_class())


__all__ = ["EventService", "get_event_service"]
