from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventPriceView,
    EventsByDateView,
    EventsByPriceView,
    EventsByTagView,
    UpcomingEventsView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventPriceView",
    "UpcomingEventsView",
    "EventsByTagView",
    "EventsByPriceView",
    "EventsByDateView",
]
